"""Code Normalization — upper-cases IATA and country codes before validation or storage.

Invariants:
    - normalize_code is idempotent: normalize_code(normalize_code(x)) == normalize_code(x)
    - None passes through unchanged (missing fields are reported by validation)
    - Only case changes — whitespace and length are left for validation to judge
    - Only ASCII codes are upper-cased: Unicode case mapping can change the length
      ("ﬀa" would become "FFA"), so non-ASCII input is left for validation to reject
"""

from aeroportos.core.domain_types import AirportFields, IataCode


def normalize_code(code: str) -> str:
    """Upper-case an ASCII code for lookup and storage."""
    return code.upper() if code.isascii() else code


def normalize_iata_code(code: str) -> IataCode:
    """Normalize a path or body IATA code into the form repositories look up."""
    return IataCode(normalize_code(code))


def normalize_fields(fields: AirportFields) -> AirportFields:
    """Return a copy with iata_code and country_code upper-cased."""
    return fields.with_codes(
        normalize_code(fields.iata_code) if fields.iata_code is not None else None,
        normalize_code(fields.country_code) if fields.country_code is not None else None,
    )
