"""Domain Types — identity types and enums shared by feed and statistics.

Invariants:
    - UserSeq, ArticleSeq wrap ints; never use bare int ids in domain logic
    - ArticleStatus values match the persisted `status` column (1, 2, 3)
    - ExpenditureCategory covers exactly the codes 1..6
    - MAX_DAY_OF_MONTH is a fixed iteration bound, not a calendar fact

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for persisted codes: compares equal to the raw column values
"""

from enum import IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserSeq = NewType("UserSeq", int)
ArticleSeq = NewType("ArticleSeq", int)


# ─── Value Types ─────────────────────────────────────────────────

Amount = NewType("Amount", int)  # smallest currency unit, >= 0


# ─── Enums ───────────────────────────────────────────────────────

class ArticleStatus(IntEnum):
    """Per-article visibility flag — maps to DB `status` column."""
    PUBLIC = 1
    MUTUAL_ONLY = 2
    PRIVATE = 3


class ArticleType(IntEnum):
    """Article kind — only EXPENDITURE participates in statistics."""
    GENERAL = 0
    EXPENDITURE = 1


class ExpenditureCategory(IntEnum):
    """Spending categories used by the monthly chart."""
    FOOD = 1
    SHOPPING = 2
    TRANSPORT = 3
    HOUSING = 4
    LEISURE = 5
    ETC = 6


# ─── Limits ──────────────────────────────────────────────────────

# Daily views iterate 1..31 for every month; nonexistent days resolve to no data.
MAX_DAY_OF_MONTH = 31
FIRST_MONTH = 1
LAST_MONTH = 12
