"""Deep-link builder — pre-filled flight and hotel search URLs on the partner travel site."""

from urllib.parse import quote, urlencode

from app.services.date_normalizer import DateInput, normalize_date
from app.services.location_resolver import resolve_city_code

DEFAULT_BASE_URL = "https://www.kayak.com"


def _base(base_url: str | None) -> str:
    return (base_url or DEFAULT_BASE_URL).rstrip("/")


def flight_url(
    origin: str,
    destination: str,
    departure_date: DateInput,
    return_date: DateInput | None = None,
    passengers: int = 1,
    cabin: str = "economy",
    *,
    base_url: str | None = None,
) -> str:
    """Flight search URL; one-way when `return_date` is omitted.

    Raises InvalidDateError for unparseable dates.
    """
    origin_code = resolve_city_code(origin)
    dest_code = resolve_city_code(destination)
    dep_date = normalize_date(departure_date)
    ret_date = normalize_date(return_date) if return_date else None

    params = {
        "origin": origin_code,
        "destination": dest_code,
        "departdate": dep_date,
    }
    if ret_date:
        params["returndate"] = ret_date
    params.update({
        "passengers": str(passengers),
        "cabin": cabin,
        "sort": "bestflight_a",
    })

    path = f"/flights/{origin_code}-{dest_code}/{dep_date}"
    if ret_date:
        path += f"/{ret_date}"
    return f"{_base(base_url)}{path}?{urlencode(params)}"


def hotel_url(
    destination: str,
    check_in: DateInput,
    check_out: DateInput,
    guests: int = 2,
    rooms: int = 1,
    *,
    base_url: str | None = None,
) -> str:
    """Hotel search URL for a destination and stay window."""
    check_in_date = normalize_date(check_in)
    check_out_date = normalize_date(check_out)

    params = {
        "destination": destination,
        "checkin": check_in_date,
        "checkout": check_out_date,
        "guests": str(guests),
        "rooms": str(rooms),
        "sort": "rank_a",
    }

    path = f"/hotels/{quote(destination, safe='')}/{check_in_date}/{check_out_date}"
    return f"{_base(base_url)}{path}?{urlencode(params)}"


def trip_urls(
    origin: str,
    destination: str,
    start_date: DateInput,
    end_date: DateInput,
    passengers: int = 1,
    *,
    base_url: str | None = None,
) -> dict[str, str]:
    """Both links for a round trip: flights out and back, hotel for the stay."""
    return {
        "flights": flight_url(
            origin, destination, start_date, end_date, passengers, base_url=base_url
        ),
        "hotels": hotel_url(destination, start_date, end_date, guests=passengers, base_url=base_url),
    }
