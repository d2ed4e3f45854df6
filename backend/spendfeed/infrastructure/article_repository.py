"""SQL Article Repository — SQLAlchemy implementation of the core read Protocols.

Invariants:
    - Implements ArticleReader, FollowReader, ExpenditureReader, ProfileReader
    - Each query opens its own short-lived session (safe under asyncio.gather)
    - Read-only: never adds, flushes or commits
    - SQLAlchemyError and driver-level connection failures (OSError, timeouts)
      -> DataSourceUnavailableError; no retries
    - Expenditure queries filter article_type == EXPENDITURE
    - SUM over no rows returns None ("no data")

Design Decisions:
    - No transaction spans the queries of one feed/statistics call; a slightly
      stale snapshot across them is accepted
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncGenerator

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from spendfeed.core.domain_types import ArticleSeq, ArticleType, UserSeq
from spendfeed.core.errors import DataSourceUnavailableError, ErrorContext
from spendfeed.models import Article, Following, User

logger = logging.getLogger(__name__)


class SqlArticleRepository:
    """Read queries over users, articles and follow edges."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(
        self, operation: str, user_seq: int | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        try:
            async with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error(
                f"Read '{operation}' failed: {e}", extra={"user_seq": user_seq},
            )
            raise DataSourceUnavailableError(
                "Read query failed", operation,
                ErrorContext(user_seq=user_seq),
            ) from e

    # ─── ArticleReader ───────────────────────────────────────────

    async def get_articles_by_user(self, user_seq: UserSeq) -> list[Article]:
        async with self._session("get_articles_by_user", user_seq) as db:
            result = await db.execute(
                select(Article)
                .where(Article.user_seq == user_seq)
                .order_by(Article.written_date.desc(), Article.article_seq.desc()),
            )
            return list(result.scalars().all())

    # ─── FollowReader ────────────────────────────────────────────

    async def get_following(self, user_seq: UserSeq) -> list[UserSeq]:
        async with self._session("get_following", user_seq) as db:
            result = await db.execute(
                select(Following.following_user_seq)
                .where(Following.user_seq == user_seq)
                .order_by(Following.following_seq),
            )
            return [UserSeq(u) for u in result.scalars().all()]

    async def has_edge(self, from_user: UserSeq, to_user: UserSeq) -> bool:
        async with self._session("has_edge", from_user) as db:
            result = await db.execute(
                select(Following.following_seq)
                .where(Following.user_seq == from_user)
                .where(Following.following_user_seq == to_user)
                .limit(1),
            )
            return result.scalar_one_or_none() is not None

    # ─── ExpenditureReader ───────────────────────────────────────

    async def get_expenditures_on(
        self, user_seq: UserSeq, day: date,
    ) -> list[Article]:
        async with self._session("get_expenditures_on", user_seq) as db:
            result = await db.execute(
                select(Article)
                .where(Article.user_seq == user_seq)
                .where(Article.consumption_date == day)
                .where(Article.article_type == ArticleType.EXPENDITURE.value)
                .order_by(Article.article_seq),
            )
            return list(result.scalars().all())

    async def sum_amount_on(self, user_seq: UserSeq, day: date) -> int | None:
        async with self._session("sum_amount_on", user_seq) as db:
            result = await db.execute(
                select(func.sum(Article.amount))
                .where(Article.user_seq == user_seq)
                .where(Article.consumption_date == day)
                .where(Article.article_type == ArticleType.EXPENDITURE.value),
            )
            return _as_amount(result.scalar())

    async def sum_amount_between(
        self, user_seq: UserSeq, start: date, end: date,
        category: int | None = None,
    ) -> int | None:
        query = (
            select(func.sum(Article.amount))
            .where(Article.user_seq == user_seq)
            .where(Article.article_type == ArticleType.EXPENDITURE.value)
            .where(Article.consumption_date >= start)
            .where(Article.consumption_date < end)
        )
        if category is not None:
            query = query.where(Article.expenditure_category == category)
        async with self._session("sum_amount_between", user_seq) as db:
            result = await db.execute(query)
            return _as_amount(result.scalar())

    # ─── ProfileReader ───────────────────────────────────────────

    async def get_articles_by_login_id(self, user_id: str) -> list[Article]:
        async with self._session("get_articles_by_login_id") as db:
            result = await db.execute(
                select(Article)
                .join(User, User.user_seq == Article.user_seq)
                .where(User.user_id == user_id)
                .order_by(Article.written_date.desc(), Article.article_seq.desc()),
            )
            return list(result.scalars().all())

    async def search_article_seqs(self, text: str) -> list[ArticleSeq]:
        async with self._session("search_article_seqs") as db:
            result = await db.execute(
                select(Article.article_seq)
                .where(Article.article_text.contains(text, autoescape=True))
                .order_by(Article.written_date.desc(), Article.article_seq.desc()),
            )
            return [ArticleSeq(a) for a in result.scalars().all()]

    async def get_followers(self, user_seq: UserSeq) -> list[UserSeq]:
        async with self._session("get_followers", user_seq) as db:
            result = await db.execute(
                select(Following.user_seq)
                .where(Following.following_user_seq == user_seq)
                .order_by(Following.following_seq),
            )
            return [UserSeq(u) for u in result.scalars().all()]

    async def get_article(self, article_seq: ArticleSeq) -> Article | None:
        async with self._session("get_article") as db:
            return await db.get(Article, article_seq)

    async def get_user_by_login_id(self, user_id: str) -> User | None:
        async with self._session("get_user_by_login_id") as db:
            result = await db.execute(select(User).where(User.user_id == user_id))
            return result.scalar_one_or_none()


def _as_amount(value) -> int | None:
    """Normalize driver SUM results (Decimal on PostgreSQL) to int."""
    if value is None:
        return None
    return int(value)
