"""Airport Service — business rules for the airport CRUD operations.

Invariants:
    - Every code is upper-cased before it reaches the repository
    - create checks existence before insert; the unique constraint is the
      authoritative guard and a lost race yields the same DUPLICATE_CODE result
    - update never changes id or iata_code
    - delete checks existence first so a missing code is NOT_FOUND, not a silent no-op
    - Domain failures returned as Result.fail(DomainError), never raised

Design Decisions:
    - Repository passed in by the caller (FastAPI dependency or test fixture)
      instead of resolved from a container (ADR: explicit dependencies)
    - Callers validate before calling create/update: the service trusts its input
      shape and only enforces cross-record rules
"""

import logging
from typing import Sequence

from aeroportos.core.domain_types import AirportFields, IataCode
from aeroportos.core.errors import DuplicateRecordError, duplicate_code, not_found
from aeroportos.core.merge_airport import apply_update
from aeroportos.core.normalize_codes import normalize_fields, normalize_iata_code
from aeroportos.core.repository_protocols import AirportLike, AirportRepository
from aeroportos.core.result import Result
from aeroportos.models.airport import Airport

logger = logging.getLogger(__name__)


class AirportService:
    """CRUD operations on airports keyed by IATA code."""

    def __init__(self, repository: AirportRepository):
        self.repository = repository

    async def list_all(self) -> Result[Sequence[AirportLike]]:
        return Result.ok(await self.repository.list_all())

    async def find_by_code(self, iata_code: str) -> Result[AirportLike]:
        airport = await self.repository.find_by_code(normalize_iata_code(iata_code))
        if airport is None:
            return Result.fail(not_found(iata_code))
        return Result.ok(airport)

    async def create(self, fields: AirportFields) -> Result[AirportLike]:
        fields = normalize_fields(fields)
        if await self.repository.exists(IataCode(fields.iata_code)):
            return Result.fail(duplicate_code(fields.iata_code))

        airport = Airport(
            name=fields.name,
            iata_code=fields.iata_code,
            city=fields.city,
            country_code=fields.country_code,
            latitude=fields.latitude,
            longitude=fields.longitude,
            altitude=fields.altitude,
        )
        try:
            saved = await self.repository.save(airport)
        except DuplicateRecordError:
            return Result.fail(duplicate_code(fields.iata_code))

        logger.info(
            f"Airport {saved.iata_code} created", extra={"iata_code": saved.iata_code},
        )
        return Result.ok(saved)

    async def update(
        self, iata_code: str, fields: AirportFields,
    ) -> Result[AirportLike]:
        found = await self.find_by_code(iata_code)
        if not found.is_ok:
            return found

        airport = apply_update(found.value, fields)
        saved = await self.repository.save(airport)
        logger.info(
            f"Airport {saved.iata_code} updated", extra={"iata_code": saved.iata_code},
        )
        return Result.ok(saved)

    async def delete(self, iata_code: str) -> Result[None]:
        code = normalize_iata_code(iata_code)
        if not await self.repository.exists(code):
            return Result.fail(not_found(iata_code))

        await self.repository.delete_by_code(code)
        logger.info(f"Airport {code} deleted", extra={"iata_code": code})
        return Result.ok()
