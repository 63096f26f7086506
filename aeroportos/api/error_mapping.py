"""Error Mapping — translates domain error kinds into HTTP responses.

Invariants:
    - VALIDATION_FAILED → 400, NOT_FOUND → 404
    - DUPLICATE_CODE → settings.duplicate_code_status (400 unless configured 409)
    - Body is DomainError.to_response() — same envelope as infrastructure errors
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from aeroportos.config import get_settings
from aeroportos.core.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    if error.kind == ErrorKind.DUPLICATE_CODE:
        return get_settings().duplicate_code_status
    return _STATUS_BY_KIND[error.kind]


def error_response(error: DomainError, path: str | None = None) -> JSONResponse:
    """Build the JSON response for a domain error and log it."""
    logger.warning(
        f"{error.kind.value}: {error.message}",
        extra={
            "error_kind": error.kind.value,
            "iata_code": error.iata_code,
            "path": path,
        },
    )
    return JSONResponse(status_code=status_for(error), content=error.to_response())
