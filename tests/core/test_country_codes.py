"""Country Codes — alias lookup for English and Portuguese country names."""

import pytest

from aeroportos.core.country_codes import (
    COUNTRY_ALIASES, UNKNOWN_COUNTRY_CODE, iso_country_code,
)


def test_brazil_resolves_to_br():
    assert iso_country_code("Brazil") == "BR"


def test_united_states_resolves_to_us():
    assert iso_country_code("United States") == "US"


def test_unknown_country_returns_sentinel():
    assert iso_country_code("Nonexistent") == "??"
    assert UNKNOWN_COUNTRY_CODE == "??"


@pytest.mark.parametrize("name,code", [
    ("BRASIL", "BR"),
    ("estados unidos", "US"),
    ("USA", "US"),
    ("Reino Unido", "GB"),
    ("uk", "GB"),
    ("Japão", "JP"),
    ("MÉXICO", "MX"),
    ("Austrália", "AU"),
])
def test_lookup_is_case_insensitive_across_languages(name, code):
    assert iso_country_code(name) == code


def test_every_alias_maps_to_two_uppercase_letters():
    for code in COUNTRY_ALIASES.values():
        assert len(code) == 2 and code.isalpha() and code.isupper()
