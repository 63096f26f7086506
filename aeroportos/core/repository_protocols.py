"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Repository methods receive codes already normalized (upper-cased)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, the service awaits them
"""

from typing import Protocol, Sequence

from aeroportos.core.domain_types import IataCode


class AirportLike(Protocol):
    """Structural contract for a stored airport.

    Lets core helpers work on the ORM model without importing it.
    """
    id: int | None
    name: str
    iata_code: str
    city: str
    country_code: str
    latitude: float
    longitude: float
    altitude: float


class AirportRepository(Protocol):
    """Contract for airport persistence — implemented by shell."""
    async def list_all(self) -> Sequence[AirportLike]: ...
    async def find_by_code(self, iata_code: IataCode) -> AirportLike | None: ...
    async def exists(self, iata_code: IataCode) -> bool: ...
    async def save(self, airport: AirportLike) -> AirportLike: ...
    async def delete_by_code(self, iata_code: IataCode) -> None: ...
