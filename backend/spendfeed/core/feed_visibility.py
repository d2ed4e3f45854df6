"""Feed Visibility — pure inclusion rules and ordering for a viewer's feed.

Invariants:
    - An article is visible iff ANY rule holds:
        1. the viewer wrote it (any status)
        2. viewer follows the author AND status == PUBLIC
        3. viewer and author follow each other AND status == MUTUAL_ONLY
    - Rules evaluated one by one, never as a single combined boolean expression
    - Output ordered by written_date desc, then article_seq desc, no duplicates
    - Pure, no IO

Design Decisions:
    - Relationship passed as a small frozen dataclass: the resolver fills it from
      has_edge() queries, this module never sees the follow graph
"""

from dataclasses import dataclass
from typing import Iterable

from spendfeed.core.domain_types import ArticleSeq, ArticleStatus, UserSeq
from spendfeed.core.repository_protocols import ArticleLike


@dataclass(frozen=True)
class Relationship:
    """Directed edges between the viewer and one author."""
    viewer_follows_author: bool = False
    author_follows_viewer: bool = False

    @property
    def is_mutual(self) -> bool:
        return self.viewer_follows_author and self.author_follows_viewer


def is_own_article(viewer: UserSeq, article: ArticleLike) -> bool:
    """Rule 1: ownership always wins."""
    return article.user_seq == viewer


def is_visible_to_follower(article: ArticleLike, rel: Relationship) -> bool:
    """Rule 2: public posts of followed authors."""
    if not rel.viewer_follows_author:
        return False
    return article.status == ArticleStatus.PUBLIC


def is_visible_to_mutual(article: ArticleLike, rel: Relationship) -> bool:
    """Rule 3: mutual-only posts of mutually followed authors."""
    if not rel.is_mutual:
        return False
    return article.status == ArticleStatus.MUTUAL_ONLY


def is_visible(viewer: UserSeq, article: ArticleLike, rel: Relationship) -> bool:
    """Union of the three inclusion rules."""
    if is_own_article(viewer, article):
        return True
    if is_visible_to_follower(article, rel):
        return True
    if is_visible_to_mutual(article, rel):
        return True
    return False


def order_feed(articles: Iterable[ArticleLike]) -> list[ArticleSeq]:
    """Dedupe by article_seq, sort newest first with article_seq desc as tie-break."""
    unique: dict[int, ArticleLike] = {}
    for article in articles:
        unique.setdefault(article.article_seq, article)
    ordered = sorted(
        unique.values(),
        key=lambda a: (a.written_date, a.article_seq),
        reverse=True,
    )
    return [ArticleSeq(a.article_seq) for a in ordered]
