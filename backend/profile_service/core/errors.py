"""Error Hierarchy — typed, categorized exceptions for all profile service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are client-caused; storage errors (500-level) are not
    - message is the exact client-facing text and never contains internal details

Design Decisions:
    - Single hierarchy with ProfileServiceError base: one global handler catches all
    - StorageFailure carries the failed operation for logs only; the cause is chained
      via `raise ... from exc` and never rendered
"""

from datetime import datetime, timezone
from enum import Enum

from profile_service.core.domain_types import RejectReason, REJECT_MESSAGES


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


class ProfileServiceError(Exception):
    """Base exception for all profile service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProfileValidationError(ProfileServiceError):
    """Submission rejected by the validator."""
    def __init__(self, reason: RejectReason):
        super().__init__(
            REJECT_MESSAGES[reason], reason.value, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageFailure(ProfileServiceError):
    """Durable storage operation failed. Message is deliberately generic."""
    def __init__(self, operation: str):
        super().__init__(
            "failed to save", "STORAGE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
