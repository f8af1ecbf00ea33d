"""Error Hierarchy — typed, categorized exceptions for every core failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Exactly three domain kinds: Validation (400), NotFound (404), Conflict (409)
    - to_response() produces the REST envelope used by all error handlers
    - Core raises, never logs: logging happens in api/error_handlers.py

Design Decisions:
    - Single hierarchy with FilmorateError base: FastAPI global handler catches all
    - ErrorContext as dataclass: records which entity/id failed without coupling to logging
    - Conflict is 409 everywhere (duplicate email on create and on update alike)
"""

from dataclasses import dataclass, field
from enum import Enum
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
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which record the failure concerns, for the envelope and the logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    related_id: int | None = None


class FilmorateError(Exception):
    """Base exception for all Filmorate errors."""

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
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                    "related_id": self.context.related_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class DomainValidationError(FilmorateError):
    """Input the core itself rejects (e.g. befriending yourself)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ResourceNotFoundError(FilmorateError):
    """Requested id does not exist in the owning table."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        ctx.entity_id = resource_id if ctx.entity_id is None else ctx.entity_id
        super().__init__(
            f"{resource_type} with id={resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateResourceError(FilmorateError):
    """Uniqueness invariant violated (duplicate email)."""
    def __init__(
        self, resource_type: str, field: str, value: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        super().__init__(
            f"{resource_type} with {field} '{value}' already exists",
            "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.field = field
        self.value = value
