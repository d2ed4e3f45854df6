"""Feed Schemas — Pydantic models for feed and profile API responses.

Invariants:
    - FeedResponse.article_seqs keeps resolver order (newest first)
    - ArticleSummary never exposes financial data of non-expenditure rows
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class FeedResponse(BaseModel):
    """Ordered article ids visible to the viewer."""
    user_seq: int
    article_seqs: list[int] = []


class ArticleSummary(BaseModel):
    """Article as listed on a profile page."""
    model_config = ConfigDict(from_attributes=True)

    article_seq: int
    user_seq: int
    written_date: datetime
    article_text: str
    status: int
    article_type: int
    expenditure_category: int | None = None
    amount: int | None = None
    consumption_date: date | None = None


class UserArticlesResponse(BaseModel):
    user_id: str
    articles: list[ArticleSummary] = []


class FollowListResponse(BaseModel):
    user_seq: int
    users: list[int] = []


class ArticleSearchResponse(BaseModel):
    query: str
    article_seqs: list[int] = []


class UserProfileResponse(BaseModel):
    """Profile header: identity of the page owner."""
    model_config = ConfigDict(from_attributes=True)

    user_seq: int
    user_id: str
    nickname: str | None = None
