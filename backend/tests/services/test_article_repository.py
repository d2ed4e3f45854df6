"""SQL Article Repository — query shapes against a real SQLite schema.

Tests cover:
    - Articles by user newest first
    - Follow edges and directed has_edge
    - Expenditure reads ignore general articles and other users
    - SUM over no rows -> None; range is [start, end); category filter
    - Profile reads: by login id, text search (LIKE wildcards escaped), followers
    - Missing tables, refused connections, timeouts -> DataSourceUnavailableError
    - Single-record reads: article by id, user by login id
    - DatabaseSessionManager: readiness check, public session factory
"""

import asyncio
import socket
from datetime import date

import pytest

from spendfeed.core.domain_types import ArticleSeq, ArticleType, UserSeq
from spendfeed.core.errors import DataSourceUnavailableError
from spendfeed.infrastructure.article_repository import SqlArticleRepository
from spendfeed.infrastructure.database import DatabaseSessionManager


async def test_articles_by_user_newest_first(repo, seed):
    alice = await seed.user("alice")
    bob = await seed.user("bob")
    first = await seed.post(alice, minutes=1)
    second = await seed.post(alice, minutes=2)
    await seed.post(bob)
    articles = await repo.get_articles_by_user(alice.user_seq)
    assert [a.article_seq for a in articles] == [second.article_seq, first.article_seq]


async def test_following_and_has_edge(repo, seed):
    alice = await seed.user("alice")
    bob = await seed.user("bob")
    await seed.follow(alice, bob)
    assert await repo.get_following(alice.user_seq) == [bob.user_seq]
    assert await repo.has_edge(alice.user_seq, bob.user_seq) is True
    assert await repo.has_edge(bob.user_seq, alice.user_seq) is False


async def test_expenditures_on_day_only_expenditure_rows(repo, seed):
    alice = await seed.user("alice")
    bob = await seed.user("bob")
    spent = await seed.spend(alice, 5000, 2, date(2024, 3, 5))
    await seed.post(
        alice, article_type=int(ArticleType.GENERAL), amount=100,
        consumption_date=date(2024, 3, 5),
    )
    await seed.spend(bob, 7000, 2, date(2024, 3, 5))
    await seed.spend(alice, 10, 2, date(2024, 3, 6))

    rows = await repo.get_expenditures_on(alice.user_seq, date(2024, 3, 5))
    assert [r.article_seq for r in rows] == [spent.article_seq]
    assert await repo.sum_amount_on(alice.user_seq, date(2024, 3, 5)) == 5000


async def test_sum_over_no_rows_is_none(repo, seed):
    alice = await seed.user("alice")
    assert await repo.sum_amount_on(alice.user_seq, date(2024, 3, 1)) is None
    assert await repo.sum_amount_between(
        alice.user_seq, date(2024, 3, 1), date(2024, 4, 1),
    ) is None


async def test_sum_between_is_half_open_and_filters_category(repo, seed):
    alice = await seed.user("alice")
    await seed.spend(alice, 100, 1, date(2024, 3, 1))
    await seed.spend(alice, 200, 2, date(2024, 3, 31))
    await seed.spend(alice, 400, 1, date(2024, 4, 1))
    start, end = date(2024, 3, 1), date(2024, 4, 1)
    assert await repo.sum_amount_between(alice.user_seq, start, end) == 300
    assert await repo.sum_amount_between(alice.user_seq, start, end, category=1) == 100
    assert await repo.sum_amount_between(alice.user_seq, start, end, category=6) is None


async def test_articles_by_login_id(repo, seed):
    alice = await seed.user("alice")
    post = await seed.post(alice)
    articles = await repo.get_articles_by_login_id("alice")
    assert [a.article_seq for a in articles] == [post.article_seq]
    assert await repo.get_articles_by_login_id("nobody") == []


async def test_search_escapes_like_wildcards(repo, seed):
    alice = await seed.user("alice")
    hit = await seed.post(alice, text="saved 50% on shoes")
    await seed.post(alice, text="saved 50 dollars")
    assert await repo.search_article_seqs("50%") == [hit.article_seq]


async def test_followers(repo, seed):
    alice = await seed.user("alice")
    bob = await seed.user("bob")
    carol = await seed.user("carol")
    await seed.follow(bob, alice)
    await seed.follow(carol, alice)
    assert await repo.get_followers(alice.user_seq) == [bob.user_seq, carol.user_seq]


@pytest.mark.parametrize("call", [
    lambda r: r.get_articles_by_user(1),
    lambda r: r.has_edge(1, 2),
    lambda r: r.sum_amount_on(1, date(2024, 3, 1)),
    lambda r: r.sum_amount_between(1, date(2024, 3, 1), date(2024, 4, 1), category=2),
])
async def test_missing_tables_surface_as_data_source_unavailable(broken_repo, call):
    with pytest.raises(DataSourceUnavailableError) as exc_info:
        await call(broken_repo)
    assert exc_info.value.http_status == 503


async def test_unreachable_database_surfaces_as_data_source_unavailable(unreachable_repo):
    with pytest.raises(DataSourceUnavailableError) as exc_info:
        await unreachable_repo.get_following(UserSeq(1))
    assert exc_info.value.http_status == 503
    assert isinstance(exc_info.value.__cause__, OSError)


class _FailingSession:
    """Session whose every read raises the given driver-level error."""

    def __init__(self, error: BaseException):
        self.error = error

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def execute(self, *args, **kwargs):
        raise self.error

    async def get(self, *args, **kwargs):
        raise self.error


@pytest.mark.parametrize("error", [
    ConnectionRefusedError(111, "Connect call failed"),
    socket.gaierror(-2, "Name or service not known"),
    asyncio.TimeoutError(),
])
async def test_driver_errors_surface_as_data_source_unavailable(error):
    repo = SqlArticleRepository(lambda: _FailingSession(error))
    with pytest.raises(DataSourceUnavailableError) as exc_info:
        await repo.sum_amount_on(UserSeq(1), date(2024, 3, 1))
    assert exc_info.value.context.user_seq == 1
    assert exc_info.value.__cause__ is error


async def test_programming_errors_are_not_masked():
    repo = SqlArticleRepository(lambda: _FailingSession(TypeError("bad bind")))
    with pytest.raises(TypeError):
        await repo.get_article(ArticleSeq(1))


async def test_get_article_by_id(repo, seed):
    alice = await seed.user("alice")
    post = await seed.post(alice, text="coffee")
    article = await repo.get_article(ArticleSeq(post.article_seq))
    assert article.article_text == "coffee"
    assert await repo.get_article(ArticleSeq(post.article_seq + 100)) is None


async def test_get_user_by_login_id(repo, seed):
    alice = await seed.user("alice")
    user = await repo.get_user_by_login_id("alice")
    assert user.user_seq == alice.user_seq
    assert await repo.get_user_by_login_id("nobody") is None


async def test_session_manager_hands_its_factory_to_the_repository(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'ready.db'}")
    try:
        assert await manager.health_check() is True
        repo = SqlArticleRepository(manager.session_factory)
        with pytest.raises(DataSourceUnavailableError):
            await repo.get_followers(UserSeq(1))
    finally:
        await manager.engine.dispose()
