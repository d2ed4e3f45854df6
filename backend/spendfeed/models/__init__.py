"""ORM Models — SQLAlchemy declarative models for users, articles and follow edges.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are written by other services; this package only reads them

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete for migrations and tests
"""

from spendfeed.models.user import User  # noqa: F401
from spendfeed.models.article import Article  # noqa: F401
from spendfeed.models.following import Following  # noqa: F401
