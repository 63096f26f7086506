"""Airport Merge — copies updatable fields from incoming data onto an existing airport.

Invariants:
    - id and iata_code are NEVER touched, whatever the incoming data holds
    - country_code is stored upper-cased
    - Mutates target in place and returns it (target is the tracked ORM instance)
"""

from aeroportos.core.domain_types import AirportFields, UPDATABLE_FIELDS
from aeroportos.core.normalize_codes import normalize_fields
from aeroportos.core.repository_protocols import AirportLike


def apply_update(target: AirportLike, incoming: AirportFields) -> AirportLike:
    """Replace every updatable field of target with the incoming value."""
    normalized = normalize_fields(incoming)
    for name in UPDATABLE_FIELDS:
        setattr(target, name, getattr(normalized, name))
    return target
