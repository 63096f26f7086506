"""Airport Repository — SQLAlchemy implementation of core AirportRepository.

Invariants:
    - Codes arrive already normalized; lookups are exact matches on codigo_iata
    - save() commits and refreshes: the returned airport carries its assigned id
    - Only a rejection by the codigo_iata unique constraint becomes
      DuplicateRecordError (the service turns it into a DUPLICATE_CODE result)
    - Any other integrity failure on save() (NOT NULL, ...) is rolled back and
      raised as DatabaseError

Design Decisions:
    - One repository per request, bound to the request's AsyncSession
    - Commit inside the repository: every operation is single-row, there is no
      multi-statement unit of work to coordinate
"""

import logging
from typing import Sequence

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from aeroportos.core.domain_types import IataCode
from aeroportos.core.errors import DatabaseError, DuplicateRecordError
from aeroportos.models.airport import Airport, IATA_CODE_CONSTRAINT

logger = logging.getLogger(__name__)

# PostgreSQL names the constraint; SQLite names the column
_DUPLICATE_CODE_MARKERS = (
    IATA_CODE_CONSTRAINT,
    "UNIQUE constraint failed: aeroporto.codigo_iata",
)


def is_duplicate_code_violation(error: IntegrityError) -> bool:
    """True when the IATA code unique constraint caused the integrity error."""
    detail = str(error.orig)
    return any(marker in detail for marker in _DUPLICATE_CODE_MARKERS)


class SqlAlchemyAirportRepository:
    """Airport persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Airport]:
        result = await self.db.execute(select(Airport).order_by(Airport.id))
        return result.scalars().all()

    async def find_by_code(self, iata_code: IataCode) -> Airport | None:
        result = await self.db.execute(
            select(Airport).where(Airport.iata_code == iata_code),
        )
        return result.scalar_one_or_none()

    async def exists(self, iata_code: IataCode) -> bool:
        result = await self.db.execute(
            select(exists().where(Airport.iata_code == iata_code)),
        )
        return bool(result.scalar())

    async def save(self, airport: Airport) -> Airport:
        iata_code = airport.iata_code
        self.db.add(airport)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if not is_duplicate_code_violation(e):
                logger.error(
                    f"Constraint on aeroporto rejected airport: {e.orig}",
                    extra={"iata_code": iata_code},
                )
                raise DatabaseError("Integrity constraint violated", "commit") from e
            logger.warning(
                f"Unique constraint rejected airport: {e.orig}",
                extra={"iata_code": iata_code},
            )
            raise DuplicateRecordError(iata_code) from e
        await self.db.refresh(airport)
        return airport

    async def delete_by_code(self, iata_code: IataCode) -> None:
        await self.db.execute(
            delete(Airport).where(Airport.iata_code == iata_code),
        )
        await self.db.commit()
