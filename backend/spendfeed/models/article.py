"""Article ORM — diary entry, optionally an expenditure record.

Invariants:
    - status: 1 = public, 2 = mutual-follow only, 3 = private
    - article_type: 1 = expenditure; only those carry category/amount/consumption_date
    - consumption_date is the spending day, distinct from written_date
    - amount is a non-negative integer in the smallest currency unit

Design Decisions:
    - user_seq exposed as a plain column so rows satisfy core ArticleLike directly
    - Indexes on (user_seq, written_date) for feeds and (user_seq, consumption_date)
      for statistics
"""

from datetime import date, datetime, timezone

from sqlalchemy import (
    BigInteger, CheckConstraint, Date, DateTime, ForeignKey, Index, Integer, Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from spendfeed.db.base import Base, IdType


class Article(Base):
    """User-authored post."""
    __tablename__ = "article"
    __table_args__ = (
        CheckConstraint("amount IS NULL OR amount >= 0", name="ck_article_amount"),
        Index("ix_article_user_written", "user_seq", "written_date"),
        Index("ix_article_user_consumption", "user_seq", "consumption_date"),
    )

    article_seq: Mapped[int] = mapped_column(
        IdType, primary_key=True, autoincrement=True,
    )
    user_seq: Mapped[int] = mapped_column(
        IdType, ForeignKey("users.user_seq", ondelete="CASCADE"),
        nullable=False,
    )
    written_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    article_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    financial_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    article_type: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    expenditure_category: Mapped[int | None] = mapped_column(
        Integer, nullable=True,
    )
    amount: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    consumption_date: Mapped[date | None] = mapped_column(Date, nullable=True)
