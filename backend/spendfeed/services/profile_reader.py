"""Profile Reader — profile-page reads: a user's articles, follow lists, text search.

Invariants:
    - Read-only; unknown login id / user -> empty list
    - Single-record reads (one article, one profile) raise ResourceNotFoundError when absent
    - Follow lists deduplicated, store order kept
    - Blank search text matches nothing
"""

import logging

from spendfeed.core.domain_types import ArticleSeq, UserSeq
from spendfeed.core.errors import ResourceNotFoundError
from spendfeed.core.repository_protocols import (
    ArticleLike, FollowReader, ProfileReader, UserLike,
)

logger = logging.getLogger(__name__)


def _distinct(users: list[UserSeq]) -> list[UserSeq]:
    return list(dict.fromkeys(users))


class ProfileService:
    """Thin read service over ProfileReader and FollowReader."""

    def __init__(self, profiles: ProfileReader, follows: FollowReader):
        self.profiles = profiles
        self.follows = follows

    async def list_user_articles(self, user_id: str) -> list[ArticleLike]:
        return await self.profiles.get_articles_by_login_id(user_id)

    async def list_following(self, user_seq: UserSeq) -> list[UserSeq]:
        return _distinct(await self.follows.get_following(user_seq))

    async def list_followers(self, user_seq: UserSeq) -> list[UserSeq]:
        return _distinct(await self.profiles.get_followers(user_seq))

    async def search_articles(self, text: str) -> list[ArticleSeq]:
        text = text.strip()
        if not text:
            return []
        found = await self.profiles.search_article_seqs(text)
        logger.debug(f"Article search matched {len(found)} articles")
        return found

    async def get_article(self, article_seq: ArticleSeq) -> ArticleLike:
        article = await self.profiles.get_article(article_seq)
        if article is None:
            raise ResourceNotFoundError("Article", str(article_seq))
        return article

    async def get_profile(self, user_id: str) -> UserLike:
        user = await self.profiles.get_user_by_login_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user
