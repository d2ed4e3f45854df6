"""Feed Resolver — ordered article ids visible to one viewer.

Invariants:
    - Viewer's own articles always included, whatever their status
    - Followees' articles filtered by core/feed_visibility rules
    - Unknown viewer (no articles, no edges) -> empty list, not an error
    - Self-edges never double count: followee list excludes the viewer
    - Reader failures propagate unchanged (no retry, no partial feed)

Design Decisions:
    - Mutual check via has_edge(author, viewer) per followee: no in-memory graph
    - Per-followee reads gathered concurrently; ordering is applied after all
      reads complete, so fetch order never leaks into the result
"""

import logging

from spendfeed.core.domain_types import ArticleSeq, UserSeq
from spendfeed.core.feed_visibility import Relationship, is_visible, order_feed
from spendfeed.core.repository_protocols import (
    ArticleLike, ArticleReader, FollowReader,
)
from spendfeed.services.concurrency import gather_or_cancel

logger = logging.getLogger(__name__)


class FeedResolver:
    """Computes a viewer's feed from article and follow reads."""

    def __init__(self, articles: ArticleReader, follows: FollowReader):
        self.articles = articles
        self.follows = follows

    async def resolve_feed(self, viewer: UserSeq) -> list[ArticleSeq]:
        """Article ids for the viewer's feed, newest first."""
        own = await self.articles.get_articles_by_user(viewer)
        followees = await self._followees(viewer)

        per_author = await gather_or_cancel(
            self._visible_from(viewer, author) for author in followees
        )
        visible: list[ArticleLike] = [
            a for a in own if is_visible(viewer, a, Relationship())
        ]
        for articles in per_author:
            visible.extend(articles)

        feed = order_feed(visible)
        logger.info(
            f"Resolved feed with {len(feed)} articles from {len(followees)} followees",
            extra={"user_seq": viewer},
        )
        return feed

    async def _followees(self, viewer: UserSeq) -> list[UserSeq]:
        """Distinct followed users, excluding the viewer itself."""
        seen: list[UserSeq] = []
        for author in await self.follows.get_following(viewer):
            if author != viewer and author not in seen:
                seen.append(author)
        return seen

    async def _visible_from(
        self, viewer: UserSeq, author: UserSeq,
    ) -> list[ArticleLike]:
        rel = Relationship(
            viewer_follows_author=True,
            author_follows_viewer=await self.follows.has_edge(author, viewer),
        )
        articles = await self.articles.get_articles_by_user(author)
        return [a for a in articles if is_visible(viewer, a, rel)]
