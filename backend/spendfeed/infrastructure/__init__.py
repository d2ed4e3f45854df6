"""Infrastructure Layer — database access, repositories and logging.

Invariants:
    - All SQLAlchemy failures mapped to DataSourceUnavailableError
"""
