"""Services Layer — FeedResolver, StatisticsEngine and profile reads.

Invariants:
    - Services depend on core Protocols, never on ORM models or sessions
    - Services hold no mutable state between calls
"""
