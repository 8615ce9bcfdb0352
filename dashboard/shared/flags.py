"""Country name to flag image lookup for race labels."""

from __future__ import annotations

FLAG_URL_TEMPLATE = "https://flagcdn.com/w40/{code}.png"
FALLBACK_FLAG_CODE = "xx"

COUNTRY_TO_ISO: dict[str, str] = {
    "Abu Dhabi": "ae",
    "Australia": "au",
    "Austria": "at",
    "Azerbaijan": "az",
    "Bahrain": "bh",
    "Belgium": "be",
    "Brazil": "br",
    "Canada": "ca",
    "China": "cn",
    "France": "fr",
    "Germany": "de",
    "Great Britain": "gb",
    "Hungary": "hu",
    "India": "in",
    "Italy": "it",
    "Japan": "jp",
    "Korea": "kr",
    "Las Vegas": "us",
    "Malaysia": "my",
    "Mexico": "mx",
    "Miami": "us",
    "Monaco": "mc",
    "Netherlands": "nl",
    "Portugal": "pt",
    "Qatar": "qa",
    "Russia": "ru",
    "Saudi Arabia": "sa",
    "Singapore": "sg",
    "Spain": "es",
    "Turkey": "tr",
    "UAE": "ae",
    "UK": "gb",
    "United States": "us",
    "USA": "us",
}


def country_to_flag_asset(country: str | None) -> str:
    """Return the flag image URL for *country*, or the fallback flag if unknown."""
    code = COUNTRY_TO_ISO.get((country or "").strip(), FALLBACK_FLAG_CODE)
    return FLAG_URL_TEMPLATE.format(code=code)
