"""Error Handlers — global exception handlers for the Aeroportos API.

Invariants:
    - AeroportosError → its http_status with the infrastructure envelope
    - RequestValidationError → 400 VALIDATION_FAILED, one detail per field,
      same shape as a validate_airport failure
    - Exception (catch-all) → 500, never leaks internal details
    - Every logged error carries path and method

Design Decisions:
    - Body parsing failures (wrong JSON type, NaN, malformed JSON) reuse
      validation_failed + error_response: clients see one 400 format whether
      pydantic or validate_airport rejected the body
    - Domain failures do not reach these handlers: routes map Result errors
      through api/error_mapping.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from aeroportos.api.error_mapping import error_response
from aeroportos.core.errors import (
    AeroportosError, ErrorSeverity, Violation, ViolationKind, validation_failed,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_infrastructure_error_handler(app)
    _register_body_error_handler(app)
    _register_generic_error_handler(app)


def _register_infrastructure_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AeroportosError)
    async def infrastructure_error_handler(request: Request, exc: AeroportosError):
        logger.error(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "iata_code": exc.context.iata_code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_body_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        """Malformed or mistyped request body → 400 VALIDATION_FAILED."""
        violations = [violation_from_pydantic(e) for e in exc.errors()]
        return error_response(validation_failed(violations), request.url.path)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def violation_from_pydantic(error: dict) -> Violation:
    """Turn one pydantic error into a Violation keyed by the JSON field name.

    loc is ("body", "<alias>") for a field error and ("body", <offset>) or
    ("body",) when the body itself could not be parsed.
    """
    names = [str(part) for part in error["loc"][1:] if isinstance(part, str)]
    field = ".".join(names) or "body"
    return Violation(
        field, ViolationKind.INVALID_VALUE, f"Valor inválido: {error['msg']}",
    )
