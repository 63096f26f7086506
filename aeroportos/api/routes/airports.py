"""Airport Routes — the five CRUD endpoints under /api/v1/aeroportos.

Invariants:
    - Bodies are normalized (codes upper-cased) then validated BEFORE the service runs
    - {iata} path values are case-insensitive
    - Domain errors mapped to HTTP by api/error_mapping.py; success codes:
      GET 200, POST 201, PUT 200, DELETE 204 with empty body
    - PUT ignores codigoIata in the body: the stored code never changes

Design Decisions:
    - Service built per request from the request's DB session (FastAPI dependency)
    - Normalize-then-validate: lowercase codes such as "br" are accepted and
      stored as "BR" instead of failing the uppercase pattern
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from aeroportos.api.error_mapping import error_response
from aeroportos.core.errors import validation_failed
from aeroportos.core.normalize_codes import normalize_fields
from aeroportos.core.validate_airport import validate_airport
from aeroportos.infrastructure.airport_repository import SqlAlchemyAirportRepository
from aeroportos.infrastructure.database import get_db
from aeroportos.schemas.airport import AirportPayload, AirportResponse
from aeroportos.services.airport_service import AirportService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/aeroportos", tags=["aeroportos"])


def get_airport_service(db: AsyncSession = Depends(get_db)) -> AirportService:
    return AirportService(SqlAlchemyAirportRepository(db))


@router.get("", response_model=list[AirportResponse])
async def list_airports(service: AirportService = Depends(get_airport_service)):
    """List every stored airport."""
    result = await service.list_all()
    return result.value


@router.get("/{iata}", response_model=AirportResponse)
async def get_airport(
    iata: str, request: Request,
    service: AirportService = Depends(get_airport_service),
):
    """Get one airport by IATA code."""
    result = await service.find_by_code(iata)
    if not result.is_ok:
        return error_response(result.error, request.url.path)
    return result.value


@router.post(
    "", response_model=AirportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_airport(
    body: AirportPayload, request: Request,
    service: AirportService = Depends(get_airport_service),
):
    """Create an airport. The server assigns its id."""
    fields = normalize_fields(body.to_fields())
    violations = validate_airport(fields)
    if violations:
        return error_response(validation_failed(violations), request.url.path)

    result = await service.create(fields)
    if not result.is_ok:
        return error_response(result.error, request.url.path)
    return result.value


@router.put("/{iata}", response_model=AirportResponse)
async def update_airport(
    iata: str, body: AirportPayload, request: Request,
    service: AirportService = Depends(get_airport_service),
):
    """Replace every field of an airport except its id and IATA code."""
    fields = normalize_fields(body.to_fields())
    violations = validate_airport(fields, check_iata=fields.iata_code is not None)
    if violations:
        return error_response(validation_failed(violations), request.url.path)

    result = await service.update(iata, fields)
    if not result.is_ok:
        return error_response(result.error, request.url.path)
    return result.value


@router.delete("/{iata}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_airport(
    iata: str, request: Request,
    service: AirportService = Depends(get_airport_service),
):
    """Delete an airport by IATA code."""
    result = await service.delete(iata)
    if not result.is_ok:
        return error_response(result.error, request.url.path)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
