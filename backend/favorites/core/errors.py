"""Error Hierarchy — typed, categorized exceptions for all favorites failure modes.

Invariants:
    - Every error has a kind (ErrorKind), category (ErrorCategory), severity (ErrorSeverity)
    - Callers branch on `kind`, never on message text — messages are for humans only
    - Each ErrorKind maps to exactly one HTTP status
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FavoritesError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class ErrorKind(str, Enum):
    """Closed set of domain outcomes other than success."""
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ASSET_NOT_FOUND = "ASSET_NOT_FOUND"
    NOT_IN_FAVORITES = "NOT_IN_FAVORITES"
    ALREADY_FAVORITED = "ALREADY_FAVORITED"
    INVALID_KIND = "INVALID_KIND"
    MISSING_FIELD = "MISSING_FIELD"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    asset_id: str | None = None
    debug_info: dict[str, Any] | None = None


class FavoritesError(Exception):
    """Base exception for all favorites errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def code(self) -> str:
        return self.kind.value

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
                    "user_id": self.context.user_id,
                    "asset_id": self.context.asset_id,
                },
            }
        }


# ─── Not Found (404) ────────────────────────────────────────────

class UserNotFoundError(FavoritesError):
    """User id does not exist."""
    def __init__(self, user_id: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = str(user_id)
        super().__init__(
            f"User '{user_id}' not found",
            ErrorKind.USER_NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class AssetNotFoundError(FavoritesError):
    """Asset id does not exist."""
    def __init__(self, asset_id: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.asset_id = str(asset_id)
        super().__init__(
            f"Asset '{asset_id}' not found",
            ErrorKind.ASSET_NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class NotInFavoritesError(FavoritesError):
    """No active favorite links the user to the asset."""
    def __init__(
        self, user_id: object, asset_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = str(user_id)
        ctx.asset_id = str(asset_id)
        super().__init__(
            f"Asset '{asset_id}' is not in the favorites of user '{user_id}'",
            ErrorKind.NOT_IN_FAVORITES, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Conflict (409) ─────────────────────────────────────────────

class AlreadyFavoritedError(FavoritesError):
    """An active favorite already exists for the pair."""
    def __init__(
        self, user_id: object, asset_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = str(user_id)
        ctx.asset_id = str(asset_id)
        super().__init__(
            f"Asset '{asset_id}' is already in the favorites of user '{user_id}'",
            ErrorKind.ALREADY_FAVORITED, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


# ─── Invalid Input (400) ────────────────────────────────────────

class InvalidKindError(FavoritesError):
    """Asset kind outside {chart, insight, audience}."""
    def __init__(self, kind: object, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid asset type '{kind}' (expected chart, insight or audience)",
            ErrorKind.INVALID_KIND, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.kind_value = kind


class MissingFieldError(FavoritesError):
    """A required input field is missing or empty."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field_name} is required",
            ErrorKind.MISSING_FIELD, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field_name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FavoritesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            ErrorKind.DATABASE_ERROR, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
