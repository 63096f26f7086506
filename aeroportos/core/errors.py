"""Error Hierarchy — domain error values and infrastructure exceptions.

Invariants:
    - Domain failures (not found, duplicate code, validation) are VALUES (DomainError),
      returned inside a Result — never raised by core or services
    - Infrastructure failures are exceptions (AeroportosError) with an http_status
    - Both produce the same REST envelope via to_response()
    - No internal details leaked in user-facing messages

Design Decisions:
    - DomainError carries a kind, not a status code: the API layer owns kind → status
      (ADR: transport decides HTTP semantics, see api/error_mapping.py)
    - Single exception base AeroportosError: FastAPI global handler catches all
      infrastructure failures (ADR: uniform error shape)
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
    """Domain failure kinds — the API layer maps each one to a status code."""
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_CODE = "DUPLICATE_CODE"


_CATEGORY_BY_KIND = {
    ErrorKind.VALIDATION_FAILED: ErrorCategory.VALIDATION,
    ErrorKind.NOT_FOUND: ErrorCategory.RESOURCE_NOT_FOUND,
    ErrorKind.DUPLICATE_CODE: ErrorCategory.CONFLICT,
}


class ViolationKind(str, Enum):
    """Field constraint that a candidate airport failed."""
    REQUIRED_FIELD = "required_field"
    TOO_LONG = "too_long"
    PATTERN_MISMATCH = "pattern_mismatch"
    OUT_OF_RANGE = "out_of_range"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class Violation:
    """One failed field constraint. `field` uses the wire (JSON) name."""
    field: str
    kind: ViolationKind
    message: str

    def to_detail(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.kind.value}


@dataclass(frozen=True)
class DomainError:
    """A domain failure returned (not raised) by the service layer."""
    kind: ErrorKind
    message: str
    iata_code: str | None = None
    violations: tuple[Violation, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORY_BY_KIND[self.kind]

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {
            "code": self.kind.value,
            "message": self.message,
            "category": self.category.value,
            "severity": ErrorSeverity.ERROR.value,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.iata_code is not None:
            body["iata_code"] = self.iata_code
        if self.violations:
            body["details"] = [v.to_detail() for v in self.violations]
        return {"error": body}


def not_found(iata_code: str) -> DomainError:
    return DomainError(
        ErrorKind.NOT_FOUND,
        f"Aeroporto com código IATA '{iata_code}' não encontrado.",
        iata_code=iata_code,
    )


def duplicate_code(iata_code: str) -> DomainError:
    return DomainError(
        ErrorKind.DUPLICATE_CODE,
        f"Aeroporto com código IATA '{iata_code}' já existe.",
        iata_code=iata_code,
    )


def validation_failed(violations: list[Violation]) -> DomainError:
    return DomainError(
        ErrorKind.VALIDATION_FAILED,
        "Invalid request data",
        violations=tuple(violations),
    )


# ─── Infrastructure Errors (exceptions) ─────────────────────────

@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    iata_code: str | None = None


class AeroportosError(Exception):
    """Base exception for all infrastructure failures."""

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
            }
        }


class DatabaseError(AeroportosError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class DuplicateRecordError(AeroportosError):
    """Unique constraint on the IATA code rejected an insert."""
    def __init__(self, iata_code: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.iata_code = iata_code
        super().__init__(
            f"Airport '{iata_code}' violates the unique IATA code constraint",
            "DUPLICATE_RECORD", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.iata_code = iata_code
