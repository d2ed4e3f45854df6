"""Profile Routes — profile header, a user's articles, follow lists, article lookup and search.

Invariants:
    - Read-only; unknown users yield empty lists with 200
    - /by-login/{user_id} declared before /{user_seq} routes so login ids are not parsed as ints
    - /articles/search declared before /articles/{article_seq}
    - Single-record reads answer 404 RESOURCE_NOT_FOUND when absent
"""

import logging

from fastapi import APIRouter, Depends, Query

from spendfeed.core.domain_types import ArticleSeq, UserSeq
from spendfeed.infrastructure.article_repository import SqlArticleRepository
from spendfeed.infrastructure.database import get_repository
from spendfeed.schemas.feed import (
    ArticleSearchResponse, ArticleSummary, FollowListResponse,
    UserArticlesResponse, UserProfileResponse,
)
from spendfeed.services.profile_reader import ProfileService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["profile"])


def get_profile_service(
    repo: SqlArticleRepository = Depends(get_repository),
) -> ProfileService:
    return ProfileService(profiles=repo, follows=repo)


@router.get("/users/by-login/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: str, service: ProfileService = Depends(get_profile_service),
):
    """Profile header for a login id."""
    user = await service.get_profile(user_id)
    return UserProfileResponse.model_validate(user)


@router.get(
    "/users/by-login/{user_id}/articles", response_model=UserArticlesResponse,
)
async def get_user_articles(
    user_id: str, service: ProfileService = Depends(get_profile_service),
):
    """Articles written by the user, newest first."""
    articles = await service.list_user_articles(user_id)
    return UserArticlesResponse(
        user_id=user_id,
        articles=[ArticleSummary.model_validate(a) for a in articles],
    )


@router.get("/users/{user_seq}/following", response_model=FollowListResponse)
async def get_following(
    user_seq: int, service: ProfileService = Depends(get_profile_service),
):
    """Users this user follows."""
    users = await service.list_following(UserSeq(user_seq))
    return FollowListResponse(user_seq=user_seq, users=users)


@router.get("/users/{user_seq}/followers", response_model=FollowListResponse)
async def get_followers(
    user_seq: int, service: ProfileService = Depends(get_profile_service),
):
    """Users following this user."""
    users = await service.list_followers(UserSeq(user_seq))
    return FollowListResponse(user_seq=user_seq, users=users)


@router.get("/articles/search", response_model=ArticleSearchResponse)
async def search_articles(
    q: str = Query(..., max_length=200),
    service: ProfileService = Depends(get_profile_service),
):
    """Ids of articles whose body contains the query text."""
    article_seqs = await service.search_articles(q)
    return ArticleSearchResponse(query=q, article_seqs=article_seqs)


@router.get("/articles/{article_seq}", response_model=ArticleSummary)
async def get_article(
    article_seq: int, service: ProfileService = Depends(get_profile_service),
):
    """One article by id; the feed returns ids only."""
    article = await service.get_article(ArticleSeq(article_seq))
    return ArticleSummary.model_validate(article)
