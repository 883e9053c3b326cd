"""Error Hierarchy: typed, categorized exceptions for every numcheck failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - str(error) is exactly error.message; callers may compare messages verbatim
    - Lookup failures and validation failures are distinct classes, so callers
      branch on type, never on message text
    - to_response() produces the REST envelope used by the API layer

Design Decisions:
    - Single hierarchy with NumCheckError base: FastAPI global handler catches all
    - StoreLookupError accepts any message: stores choose their own wording and the
      service propagates it untouched
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field, replace
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
    LOOKUP = "lookup"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: int | None = None
    debug_info: dict[str, Any] | None = None


class NumCheckError(Exception):
    """Base exception for all numcheck errors."""

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
                    "record_id": self.context.record_id,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class ResultTooHighError(NumCheckError):
    """Fetched value exceeds the validation threshold."""
    def __init__(
        self, value: int, threshold: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"result too high: {value}",
            "RESULT_TOO_HIGH", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
        )
        self.value = value
        self.threshold = threshold


# ─── Lookup Errors (raised by stores) ───────────────────────────

class StoreLookupError(NumCheckError):
    """Store could not produce a value. Cause is opaque to the service."""
    def __init__(
        self,
        message: str,
        code: str = "LOOKUP_ERROR",
        category: ErrorCategory = ErrorCategory.LOOKUP,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 502,
    ):
        super().__init__(message, code, category, severity, context, http_status)


class RecordNotFoundError(StoreLookupError):
    """No record stored under the requested id."""
    def __init__(self, record_id: int, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), record_id=record_id)
        super().__init__(
            f"number {record_id} not found",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.record_id = record_id


class DatabaseError(StoreLookupError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Request Errors (raised by the API layer) ───────────────────

class InvalidRequestError(NumCheckError):
    """Request parameters failed schema validation before reaching the service."""
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class InternalError(NumCheckError):
    """Unexpected failure; the message never carries the underlying cause."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
