"""Airport Validation — pure field-constraint checks on a candidate airport.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every rule is evaluated — validate_airport collects ALL violations, never first-error-wins
    - Empty list means valid
    - Pattern checks are case-sensitive full matches: callers normalize codes first,
      and a trailing newline or extra character is a mismatch
    - Coordinates and altitude must be finite (NaN and infinities are rejected)

Design Decisions:
    - Explicit function over Pydantic constraints: returns structured Violation values
      the API layer can enumerate in a 400 body (ADR: errors as values)
    - Violation.field uses the wire name (nome, codigoIata, ...) so clients can map
      errors back to the JSON they sent
"""

import math
import re

from aeroportos.core.domain_types import (
    AirportFields, CITY_MAX_LENGTH, NAME_MAX_LENGTH,
)
from aeroportos.core.errors import Violation, ViolationKind

IATA_CODE_PATTERN = re.compile(r"[A-Z]{3}")
COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_name(name: str | None) -> list[Violation]:
    violations = []
    if _is_blank(name):
        violations.append(Violation(
            "nome", ViolationKind.REQUIRED_FIELD,
            "Nome do aeroporto é obrigatório",
        ))
    if name is not None and len(name) > NAME_MAX_LENGTH:
        violations.append(Violation(
            "nome", ViolationKind.TOO_LONG,
            f"Nome do aeroporto deve ter no máximo {NAME_MAX_LENGTH} caracteres",
        ))
    return violations


def check_iata_code(iata_code: str | None) -> list[Violation]:
    violations = []
    if _is_blank(iata_code):
        violations.append(Violation(
            "codigoIata", ViolationKind.REQUIRED_FIELD,
            "Código IATA é obrigatório",
        ))
    if iata_code is not None and not IATA_CODE_PATTERN.fullmatch(iata_code):
        violations.append(Violation(
            "codigoIata", ViolationKind.PATTERN_MISMATCH,
            "Código IATA deve ter exatamente 3 letras maiúsculas",
        ))
    return violations


def check_city(city: str | None) -> list[Violation]:
    violations = []
    if _is_blank(city):
        violations.append(Violation(
            "cidade", ViolationKind.REQUIRED_FIELD, "Cidade é obrigatória",
        ))
    if city is not None and len(city) > CITY_MAX_LENGTH:
        violations.append(Violation(
            "cidade", ViolationKind.TOO_LONG,
            f"Cidade deve ter no máximo {CITY_MAX_LENGTH} caracteres",
        ))
    return violations


def check_country_code(country_code: str | None) -> list[Violation]:
    violations = []
    if _is_blank(country_code):
        violations.append(Violation(
            "codigoPaisIso", ViolationKind.REQUIRED_FIELD,
            "Código do país é obrigatório",
        ))
    if country_code is not None and not COUNTRY_CODE_PATTERN.fullmatch(country_code):
        violations.append(Violation(
            "codigoPaisIso", ViolationKind.PATTERN_MISMATCH,
            "Código do país deve ter exatamente 2 letras maiúsculas (ISO 3166-1)",
        ))
    return violations


def _not_finite(field: str, label: str) -> Violation:
    return Violation(
        field, ViolationKind.OUT_OF_RANGE, f"{label} deve ser um número finito",
    )


def check_coordinates(
    latitude: float | None, longitude: float | None,
) -> list[Violation]:
    violations = []
    if latitude is None:
        violations.append(Violation(
            "latitude", ViolationKind.REQUIRED_FIELD, "Latitude é obrigatória",
        ))
    elif not math.isfinite(latitude):
        violations.append(_not_finite("latitude", "Latitude"))
    if longitude is None:
        violations.append(Violation(
            "longitude", ViolationKind.REQUIRED_FIELD, "Longitude é obrigatória",
        ))
    elif not math.isfinite(longitude):
        violations.append(_not_finite("longitude", "Longitude"))
    return violations


def check_altitude(altitude: float | None) -> list[Violation]:
    if altitude is None:
        return [Violation(
            "altitude", ViolationKind.REQUIRED_FIELD, "Altitude é obrigatória",
        )]
    if not math.isfinite(altitude):
        return [_not_finite("altitude", "Altitude")]
    if altitude < 0:
        return [Violation(
            "altitude", ViolationKind.OUT_OF_RANGE,
            "Altitude não pode ser negativa",
        )]
    return []


def validate_airport(
    candidate: AirportFields, check_iata: bool = True,
) -> list[Violation]:
    """Run every field rule and return all violations (empty if valid).

    check_iata=False skips the IATA rules — used on update when the body
    omits the code, since the path identifies the record.
    """
    violations = check_name(candidate.name)
    if check_iata:
        violations += check_iata_code(candidate.iata_code)
    violations += check_city(candidate.city)
    violations += check_country_code(candidate.country_code)
    violations += check_coordinates(candidate.latitude, candidate.longitude)
    violations += check_altitude(candidate.altitude)
    return violations
