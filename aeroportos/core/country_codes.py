"""Country Codes — resolves common country names to ISO 3166-1 alpha-2 codes.

Invariants:
    - Lookup is case-insensitive
    - Unknown names resolve to UNKNOWN_COUNTRY_CODE ("??"), never raise
    - Standalone utility: the create/update path never calls it

Design Decisions:
    - Small fixed alias table (English + Portuguese spellings) over a full
      ISO registry: airports carry the code already, this only helps data entry
"""

UNKNOWN_COUNTRY_CODE = "??"

COUNTRY_ALIASES: dict[str, str] = {
    "brazil": "BR",
    "brasil": "BR",
    "united states": "US",
    "usa": "US",
    "estados unidos": "US",
    "portugal": "PT",
    "spain": "ES",
    "espanha": "ES",
    "france": "FR",
    "frança": "FR",
    "germany": "DE",
    "alemanha": "DE",
    "italy": "IT",
    "itália": "IT",
    "japan": "JP",
    "japão": "JP",
    "argentina": "AR",
    "chile": "CL",
    "united kingdom": "GB",
    "uk": "GB",
    "reino unido": "GB",
    "canada": "CA",
    "mexico": "MX",
    "méxico": "MX",
    "australia": "AU",
    "austrália": "AU",
}


def iso_country_code(country_name: str) -> str:
    """Return the 2-letter code for a country name, or "??" if unknown."""
    return COUNTRY_ALIASES.get(country_name.lower(), UNKNOWN_COUNTRY_CODE)
