"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - IataCode is a normalized (upper-cased) code: the only form repositories see
    - AirportFields is the transport-neutral shape of an incoming airport record

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - AirportFields keeps every field Optional: missing values are reported by
      validate_airport, not by the type system (ADR: collect all violations)
"""

from dataclasses import dataclass, replace
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

IataCode = NewType("IataCode", str)


# ─── Field limits ────────────────────────────────────────────────

NAME_MAX_LENGTH = 255
CITY_MAX_LENGTH = 100

# Fields copied onto an existing airport by update (never id or iata_code)
UPDATABLE_FIELDS = (
    "name", "city", "country_code", "latitude", "longitude", "altitude",
)


@dataclass(frozen=True)
class AirportFields:
    """Candidate airport data as received from a client."""
    name: str | None = None
    iata_code: str | None = None
    city: str | None = None
    country_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None

    def with_codes(
        self, iata_code: str | None, country_code: str | None,
    ) -> "AirportFields":
        return replace(self, iata_code=iata_code, country_code=country_code)
