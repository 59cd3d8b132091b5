"""Error Hierarchy: typed, categorized exceptions for Defense Desk failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; aggregation and scheduling raise nothing
    - build_error_envelope() is the only producer of the REST error body, so domain
      errors and request validation errors share one shape
    - Field-level problems always carry details[] with "body.<name>" locations
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DefenseDeskError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class FieldIssue:
    """One field-level problem in a request body."""
    field: str
    message: str
    type: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


def body_field(name: str) -> str:
    """Location of a request body field, matching Pydantic's loc join."""
    return f"body.{name}"


def build_error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[FieldIssue] | None = None,
    **extra: Any,
) -> dict:
    """REST error body shared by domain and validation handlers."""
    error: dict[str, Any] = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    error.update(extra)
    if details:
        error["details"] = [d.to_dict() for d in details]
    return {"error": error}


class DefenseDeskError(Exception):
    """Base exception for all Defense Desk errors."""

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

    def field_issues(self) -> list[FieldIssue]:
        return []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return build_error_envelope(
            self.code,
            self.context.user_message or self.message,
            self.category,
            self.severity,
            details=self.field_issues(),
            timestamp=self.context.timestamp.isoformat(),
            context={"session_id": self.context.session_id},
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class QueryValidationError(DefenseDeskError):
    """Registration list query parameters out of range."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def field_issues(self) -> list[FieldIssue]:
        return [FieldIssue(body_field(self.field), self.message, "query_out_of_range")]
