"""Error Hierarchy: typed, categorized exceptions for every store failure mode.

Invariants:
    - Every error has a code (str), kind (StoreErrorKind), severity (ErrorSeverity)
    - Every store error keeps the original cause (also chained via `raise ... from`)
    - str(error) is the single human-readable message surfaced to callers
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ZeTodoError base: FastAPI global handler catches all
    - Kind enum instead of message matching: callers branch on `exc.kind`
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


class StoreErrorKind(str, Enum):
    """What went wrong, independent of the message text."""
    ENGINE = "engine"
    NOT_INITIALIZED = "not_initialized"
    LOCK_UNAVAILABLE = "lock_unavailable"
    SERIALIZATION = "serialization"
    NOT_FOUND = "not_found"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    project_id: str | None = None
    entity_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class ZeTodoError(Exception):
    """Base exception for all ZeTodo errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: StoreErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.cause = cause

    @property
    def recoverable(self) -> bool:
        return self.kind not in (
            StoreErrorKind.NOT_INITIALIZED, StoreErrorKind.LOCK_UNAVAILABLE,
        )

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "kind": self.kind.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "project_id": self.context.project_id,
                    "entity_id": self.context.entity_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Boundary Errors (400-level) ────────────────────────────────

class SerializationError(ZeTodoError):
    """Input entity could not be parsed into a valid domain object."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Serialization error: {message}",
            "SERIALIZATION_ERROR", StoreErrorKind.SERIALIZATION,
            ErrorSeverity.ERROR, context, 400, cause,
        )


class ResourceNotFoundError(ZeTodoError):
    """Requested resource does not exist. Reads return empty results instead."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Item not found: {resource_type} '{resource_id}'",
            "RESOURCE_NOT_FOUND", StoreErrorKind.NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class DatabaseError(ZeTodoError):
    """Storage engine failure: constraint violation, I/O, driver error."""
    def __init__(
        self,
        message: str,
        operation: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", StoreErrorKind.ENGINE,
            ErrorSeverity.ERROR, ctx, 503, cause,
        )
        self.operation = operation


class MigrationError(ZeTodoError):
    """A schema migration step failed. Fatal at startup."""
    def __init__(self, version: int, cause: BaseException | None = None):
        super().__init__(
            f"Migration v{version} failed: {cause}",
            "MIGRATION_FAILED", StoreErrorKind.ENGINE,
            ErrorSeverity.CRITICAL, ErrorContext(operation="migrate"), 500, cause,
        )
        self.version = version


class StoreNotInitializedError(ZeTodoError):
    """Operation invoked before migrations completed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database not initialized",
            "STORE_NOT_INITIALIZED", StoreErrorKind.NOT_INITIALIZED,
            ErrorSeverity.CRITICAL, context, 503,
        )


class LockPoisonedError(ZeTodoError):
    """A prior operation left the store handle in an unknown state."""
    def __init__(
        self, cause: BaseException | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Lock poisoned",
            "LOCK_POISONED", StoreErrorKind.LOCK_UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503, cause,
        )
