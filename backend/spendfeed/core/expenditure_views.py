"""Expenditure Views — pure record conversion and fixed-key statistics maps.

Invariants:
    - Display context is the financial note when non-empty, else the article body
    - Only EXPENDITURE articles become records; anything else is dropped
    - Day maps always hold keys 1..max_day in ascending order
    - Category maps always hold keys 1..6 in ascending order
    - A missing aggregate is None ("no data"), never silently 0

Design Decisions:
    - Maps pre-sized with every key, then filled: enumeration order does not
      depend on the order lookups finish
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, TypeVar

from spendfeed.core.domain_types import (
    ArticleSeq, ArticleType, ExpenditureCategory, MAX_DAY_OF_MONTH,
)
from spendfeed.core.repository_protocols import ArticleLike

T = TypeVar("T")


@dataclass(frozen=True)
class ExpenditureRecord:
    """One spending entry as shown on the monthly statistics page."""
    expenditure_category: int | None
    context: str
    amount: int | None
    article_seq: ArticleSeq
    consumption_date: date | None


def resolve_context(financial_text: str | None, article_text: str | None) -> str:
    """Financial note takes precedence; fall back to the body when it is null or empty."""
    if financial_text:
        return financial_text
    return article_text or ""


def is_expenditure(article: ArticleLike) -> bool:
    return article.article_type == ArticleType.EXPENDITURE


def to_expenditure_record(article: ArticleLike) -> ExpenditureRecord:
    return ExpenditureRecord(
        expenditure_category=article.expenditure_category,
        context=resolve_context(article.financial_text, article.article_text),
        amount=article.amount,
        article_seq=ArticleSeq(article.article_seq),
        consumption_date=article.consumption_date,
    )


def to_expenditure_records(articles: Iterable[ArticleLike]) -> list[ExpenditureRecord]:
    """Convert in store order, skipping non-expenditure rows."""
    return [to_expenditure_record(a) for a in articles if is_expenditure(a)]


def day_keys(max_day: int = MAX_DAY_OF_MONTH) -> list[int]:
    return list(range(1, max_day + 1))


def category_keys() -> list[int]:
    return [int(c) for c in ExpenditureCategory]


def fill_fixed_keys(keys: list[int], values: dict[int, T], default: T) -> dict[int, T]:
    """Build a mapping with every key in ascending order; absent keys get default."""
    return {k: values.get(k, default) for k in sorted(keys)}

