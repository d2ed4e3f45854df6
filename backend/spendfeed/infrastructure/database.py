"""Database Session Manager — async connection pool and health checks.

Invariants:
    - Connection pool uses pool_pre_ping for stale connection detection
    - Read error mapping lives in SqlArticleRepository._session (one place only)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - get_repository hands the repository a session *factory*, not a session:
      statistics queries run concurrently and an AsyncSession is not concurrency-safe
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy import text

from spendfeed.infrastructure.article_repository import SqlArticleRepository

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the async engine and session factory; answers readiness probes."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self._session_factory() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_repository() -> SqlArticleRepository:
    """FastAPI dependency for the read repository."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return SqlArticleRepository(db_manager.session_factory)
