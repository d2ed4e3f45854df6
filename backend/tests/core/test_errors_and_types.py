"""Errors and Domain Types — verifies error envelopes and persisted enum codes.

Tests:
    - Enum values match the stored column codes
    - to_response() carries code, category, severity and period context
    - DataSourceUnavailableError is critical and maps to 503
"""

from spendfeed.core.domain_types import (
    ArticleStatus, ArticleType, ExpenditureCategory, MAX_DAY_OF_MONTH,
)
from spendfeed.core.errors import (
    DataSourceUnavailableError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidPeriodError, SpendFeedError,
)


def test_article_status_codes():
    assert ArticleStatus.PUBLIC == 1
    assert ArticleStatus.MUTUAL_ONLY == 2


def test_expenditure_type_code():
    assert ArticleType.EXPENDITURE == 1


def test_six_expenditure_categories():
    assert [int(c) for c in ExpenditureCategory] == [1, 2, 3, 4, 5, 6]


def test_max_day_of_month_is_31():
    assert MAX_DAY_OF_MONTH == 31


def test_invalid_period_response_envelope():
    err = InvalidPeriodError(2024, 13)
    body = err.to_response()["error"]
    assert body["code"] == "INVALID_PERIOD"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert body["context"]["year"] == 2024
    assert body["context"]["month"] == 13


def test_data_source_unavailable_is_critical():
    err = DataSourceUnavailableError("boom", "sum_amount_on", ErrorContext(user_seq=3))
    assert isinstance(err, SpendFeedError)
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "sum_amount_on"
    assert err.to_response()["error"]["context"]["user_seq"] == 3
