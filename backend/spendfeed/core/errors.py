"""Error Hierarchy — typed, categorized exceptions for all SpendFeed failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are caller mistakes; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SpendFeedError base: FastAPI global handler catches all
    - Unknown users are NOT errors for list reads: absence of data is a valid state.
      Only single-record lookups (one article, one profile) raise ResourceNotFoundError
    - ErrorContext as dataclass: carries user/period for logs without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_SOURCE = "data_source"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_seq: int | None = None
    year: int | None = None
    month: int | None = None
    debug_info: dict[str, Any] | None = None


class SpendFeedError(Exception):
    """Base exception for all SpendFeed errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_seq": self.context.user_seq,
                    "year": self.context.year,
                    "month": self.context.month,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidPeriodError(SpendFeedError):
    """Year/month pair cannot bound a calendar month."""
    def __init__(self, year: int, month: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.year = year
        ctx.month = month
        super().__init__(
            f"Month must be between 1 and 12, got {month} (year {year})",
            "INVALID_PERIOD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.year = year
        self.month = month


class ResourceNotFoundError(SpendFeedError):
    """Requested single record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DataSourceUnavailableError(SpendFeedError):
    """A read against the backing store failed. Never retried by the core."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Data source {operation} failed: {message}",
            "DATA_SOURCE_UNAVAILABLE", ErrorCategory.DATA_SOURCE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
