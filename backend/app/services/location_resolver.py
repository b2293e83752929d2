"""City/location resolver — free-text city names to 3-letter location codes."""

from app.data.city_codes import CITY_CODES


def resolve_city_code(city_name: str) -> str:
    """Resolve a city name to its location code.

    Known cities come from the static table; anything else falls back to the
    first three characters of the upper-cased name (shorter names give a
    shorter code).
    """
    normalized = city_name.strip().lower()
    code = CITY_CODES.get(normalized)
    if code:
        return code
    return city_name.strip().upper()[:3]
