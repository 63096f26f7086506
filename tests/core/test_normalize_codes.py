"""Code Normalization & Merge — tests for upper-casing and update semantics.

Tests cover:
    - normalize_code upper-cases and is idempotent
    - non-ASCII codes are left as they are (Unicode upper-casing can grow them)
    - normalize_fields touches only iata_code and country_code, passes None through
    - apply_update replaces updatable fields, never iata_code or id
"""

from types import SimpleNamespace

from aeroportos.core.domain_types import AirportFields
from aeroportos.core.merge_airport import apply_update
from aeroportos.core.normalize_codes import (
    normalize_code, normalize_fields, normalize_iata_code,
)
from aeroportos.core.validate_airport import check_iata_code


def test_normalize_code_upper_cases():
    assert normalize_code("gru") == "GRU"
    assert normalize_code("Gru") == "GRU"


def test_normalize_code_is_idempotent():
    assert normalize_code(normalize_code("cgh")) == "CGH"


def test_normalize_code_leaves_non_ascii_untouched():
    assert normalize_code("\ufb00a") == "\ufb00a"
    assert normalize_code("stra\u00dfe") == "stra\u00dfe"


def test_ligature_code_is_not_stretched_into_a_valid_one():
    assert check_iata_code(normalize_iata_code("\ufb00a")) != []


def test_normalize_iata_code_upper_cases():
    assert normalize_iata_code("gig") == "GIG"


def test_normalize_fields_upper_cases_both_codes():
    fields = AirportFields(name="Congonhas", iata_code="cgh", country_code="br")
    normalized = normalize_fields(fields)
    assert normalized.iata_code == "CGH"
    assert normalized.country_code == "BR"
    assert normalized.name == "Congonhas"


def test_normalize_fields_keeps_missing_codes_missing():
    normalized = normalize_fields(AirportFields(name="X"))
    assert normalized.iata_code is None
    assert normalized.country_code is None


def test_normalize_fields_returns_new_instance():
    fields = AirportFields(iata_code="tst")
    normalize_fields(fields)
    assert fields.iata_code == "tst"


def _stored_airport():
    return SimpleNamespace(
        id=1, name="Aeroporto de Congonhas", iata_code="CGH", city="São Paulo",
        country_code="BR", latitude=-23.6261, longitude=-46.6564, altitude=802.0,
    )


def test_apply_update_replaces_updatable_fields():
    target = _stored_airport()
    incoming = AirportFields(
        name="Aeroporto Atualizado", iata_code="CGH", city="Nova Cidade",
        country_code="us", latitude=-25.0, longitude=-48.0, altitude=500.0,
    )
    apply_update(target, incoming)
    assert target.name == "Aeroporto Atualizado"
    assert target.city == "Nova Cidade"
    assert target.country_code == "US"
    assert (target.latitude, target.longitude, target.altitude) == (-25.0, -48.0, 500.0)


def test_apply_update_never_changes_iata_code_or_id():
    target = _stored_airport()
    incoming = AirportFields(
        name="Outro", iata_code="XYZ", city="Outra", country_code="BR",
        latitude=0.0, longitude=0.0, altitude=0.0,
    )
    result = apply_update(target, incoming)
    assert result is target
    assert target.iata_code == "CGH"
    assert target.id == 1
