"""Domain Types — verifies identity wrappers, field limits and AirportFields.

Tests:
    - IataCode is transparent at runtime
    - UPDATABLE_FIELDS excludes id and iata_code
    - AirportFields defaults every field to None and is immutable
"""

import dataclasses

import pytest

from aeroportos.core.domain_types import (
    AirportFields, IataCode, UPDATABLE_FIELDS,
)


def test_iata_code_wraps_str():
    assert IataCode("GRU") == "GRU"


def test_updatable_fields_exclude_identity():
    assert "iata_code" not in UPDATABLE_FIELDS
    assert "id" not in UPDATABLE_FIELDS
    assert set(UPDATABLE_FIELDS) == {
        "name", "city", "country_code", "latitude", "longitude", "altitude",
    }


def test_airport_fields_default_to_none():
    fields = AirportFields()
    assert all(getattr(fields, f.name) is None for f in dataclasses.fields(fields))


def test_airport_fields_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        AirportFields().name = "X"


def test_with_codes_replaces_only_codes():
    fields = AirportFields(name="Galeão", iata_code="gig", country_code="br")
    updated = fields.with_codes("GIG", "BR")
    assert (updated.name, updated.iata_code, updated.country_code) == ("Galeão", "GIG", "BR")
