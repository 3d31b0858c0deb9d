"""Error Hierarchy: typed sentinel errors for every pm-api failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PmError base: one FastAPI handler catches all
    - Failed update/insert stay 400 (the request referenced something unusable),
      only a missing row on read is 404
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    WRITE_FAILED = "write_failed"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class PmError(Exception):
    """Base exception for all pm-api errors."""

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
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationFailedError(PmError):
    """Input failed validation (malformed id, empty name, bad time window)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class ResourceNotFoundError(PmError):
    """Requested resource does not exist or is soft-deleted."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class UpdateFailedError(PmError):
    """An UPDATE affected no rows."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"Failed to update {resource_type} '{resource_id}'",
            "UPDATE_FAILED", ErrorCategory.WRITE_FAILED,
            ErrorSeverity.ERROR, ctx, 400,
        )


class InsertFailedError(PmError):
    """An INSERT was rejected (constraint violation or missing parent)."""
    def __init__(
        self, resource_type: str, reason: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        super().__init__(
            f"Failed to create {resource_type}: {reason}",
            "INSERT_FAILED", ErrorCategory.WRITE_FAILED,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(PmError):
    """Unexpected failure inside the service."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(PmError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
