"""Boundary Protocols — read contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Every method is read-only and side-effect free
    - Unknown users yield empty lists / None, never an exception
    - Single-record reads (get_article, get_user_by_login_id) return None when absent
    - Read failures surface as DataSourceUnavailableError

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM models satisfy ArticleLike directly
    - Follow graph exposed as has_edge(from, to): the core never materializes edges
    - Async in Protocol: implementations do IO; the pure visibility and record
      functions in core/ stay synchronous
"""

from datetime import date, datetime
from typing import Protocol

from spendfeed.core.domain_types import ArticleSeq, UserSeq


class ArticleLike(Protocol):
    """Structural contract for article rows handed to the core."""
    article_seq: int
    user_seq: int
    written_date: datetime
    article_text: str
    financial_text: str | None
    status: int
    article_type: int
    expenditure_category: int | None
    amount: int | None
    consumption_date: date | None


class UserLike(Protocol):
    """Structural contract for a profile owner."""
    user_seq: int
    user_id: str
    nickname: str | None


class ArticleReader(Protocol):
    """Articles by author — implemented by shell."""
    async def get_articles_by_user(self, user_seq: UserSeq) -> list[ArticleLike]: ...


class FollowReader(Protocol):
    """Outgoing follow edges and directed edge existence — implemented by shell."""
    async def get_following(self, user_seq: UserSeq) -> list[UserSeq]: ...
    async def has_edge(self, from_user: UserSeq, to_user: UserSeq) -> bool: ...


class ExpenditureReader(Protocol):
    """Expenditure queries — only article_type == EXPENDITURE rows are visible."""
    async def get_expenditures_on(
        self, user_seq: UserSeq, day: date,
    ) -> list[ArticleLike]: ...
    async def sum_amount_on(self, user_seq: UserSeq, day: date) -> int | None: ...
    async def sum_amount_between(
        self, user_seq: UserSeq, start: date, end: date,
        category: int | None = None,
    ) -> int | None: ...


class ProfileReader(Protocol):
    """Profile-page reads — implemented by shell."""
    async def get_articles_by_login_id(self, user_id: str) -> list[ArticleLike]: ...
    async def search_article_seqs(self, text: str) -> list[ArticleSeq]: ...
    async def get_followers(self, user_seq: UserSeq) -> list[UserSeq]: ...
    async def get_article(self, article_seq: ArticleSeq) -> ArticleLike | None: ...
    async def get_user_by_login_id(self, user_id: str) -> UserLike | None: ...
