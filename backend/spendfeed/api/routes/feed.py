"""Feed Route — GET endpoint for a user's resolved feed.

Invariants:
    - Unknown user -> 200 with empty article_seqs (absence of data is not an error)
    - Order is the resolver's order: newest first, article_seq desc on ties
"""

import logging

from fastapi import APIRouter, Depends

from spendfeed.core.domain_types import UserSeq
from spendfeed.infrastructure.article_repository import SqlArticleRepository
from spendfeed.infrastructure.database import get_repository
from spendfeed.schemas.feed import FeedResponse
from spendfeed.services.feed_resolver import FeedResolver

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["feed"])


@router.get("/{user_seq}/feed", response_model=FeedResponse)
async def get_feed(
    user_seq: int, repo: SqlArticleRepository = Depends(get_repository),
):
    """Article ids visible in the user's feed."""
    resolver = FeedResolver(articles=repo, follows=repo)
    article_seqs = await resolver.resolve_feed(UserSeq(user_seq))
    return FeedResponse(user_seq=user_seq, article_seqs=article_seqs)
