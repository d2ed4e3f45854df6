"""Statistics Routes — monthly expenditure list, calendar, chart and total.

Invariants:
    - month outside 1..12 -> 400 INVALID_PERIOD envelope (raised by the engine)
    - Read failure -> 503 DATA_SOURCE_UNAVAILABLE, never a partially filled map
    - null amounts in responses mean "no data"

Design Decisions:
    - month validated by the engine, not by Query(ge, le): one error shape for
      invalid periods whether they come from HTTP or from library callers
"""

import logging

from fastapi import APIRouter, Depends, Query

from spendfeed.config import get_settings
from spendfeed.core.domain_types import UserSeq
from spendfeed.infrastructure.article_repository import SqlArticleRepository
from spendfeed.infrastructure.database import get_repository
from spendfeed.schemas.statistics import (
    CalendarResponse, ChartResponse, DailyExpendituresResponse,
    ExpenditureRecordOut, MonthTotalResponse,
)
from spendfeed.services.statistics_engine import StatisticsEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["statistics"])


def get_statistics_engine(
    repo: SqlArticleRepository = Depends(get_repository),
) -> StatisticsEngine:
    settings = get_settings()
    return StatisticsEngine(
        repo,
        max_day_of_month=settings.max_day_of_month,
        calendar_correct_days=settings.calendar_correct_days,
        concurrency=settings.statistics_concurrency,
    )


@router.get(
    "/{user_seq}/statistics/expenditures",
    response_model=DailyExpendituresResponse,
)
async def get_daily_expenditures(
    user_seq: int,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(...),
    engine: StatisticsEngine = Depends(get_statistics_engine),
):
    """Expenditure records per day of the month."""
    days = await engine.daily_expenditures(UserSeq(user_seq), year, month)
    return DailyExpendituresResponse(
        user_seq=user_seq, year=year, month=month,
        days={
            day: [ExpenditureRecordOut.model_validate(r) for r in records]
            for day, records in days.items()
        },
    )


@router.get("/{user_seq}/statistics/calendar", response_model=CalendarResponse)
async def get_calendar(
    user_seq: int,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(...),
    engine: StatisticsEngine = Depends(get_statistics_engine),
):
    """Total amount spent per day of the month."""
    days = await engine.daily_totals(UserSeq(user_seq), year, month)
    return CalendarResponse(user_seq=user_seq, year=year, month=month, days=days)


@router.get("/{user_seq}/statistics/chart", response_model=ChartResponse)
async def get_chart(
    user_seq: int,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(...),
    engine: StatisticsEngine = Depends(get_statistics_engine),
):
    """Total amount spent per category within the month."""
    categories = await engine.category_totals(UserSeq(user_seq), year, month)
    return ChartResponse(
        user_seq=user_seq, year=year, month=month, categories=categories,
    )


@router.get("/{user_seq}/statistics/total", response_model=MonthTotalResponse)
async def get_month_total(
    user_seq: int,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(...),
    engine: StatisticsEngine = Depends(get_statistics_engine),
):
    """Total amount spent within the month."""
    total = await engine.month_total(UserSeq(user_seq), year, month)
    return MonthTotalResponse(user_seq=user_seq, year=year, month=month, total=total)
