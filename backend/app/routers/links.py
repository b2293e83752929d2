"""Deep-link router — booking URLs on the partner travel site."""

from fastapi import APIRouter, HTTPException, Query

from app.config import settings
from app.exceptions import InvalidDateError
from app.schemas.search import CabinClass, LinkResponse, LocationResponse, TripLinksResponse
from app.services.deep_links import flight_url, hotel_url, trip_urls
from app.services.location_resolver import resolve_city_code

router = APIRouter()


@router.get("/links/flights", response_model=LinkResponse)
async def get_flight_link(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    departure_date: str = Query(...),
    return_date: str | None = Query(None),
    passengers: int = Query(1, ge=1, le=9),
    cabin: CabinClass = Query("economy"),
):
    try:
        url = flight_url(
            origin, destination, departure_date, return_date, passengers, cabin,
            base_url=settings.deeplink_base_url,
        )
    except InvalidDateError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return LinkResponse(url=url)


@router.get("/links/hotels", response_model=LinkResponse)
async def get_hotel_link(
    destination: str = Query(..., min_length=1),
    check_in: str = Query(...),
    check_out: str = Query(...),
    guests: int = Query(2, ge=1, le=9),
    rooms: int = Query(1, ge=1, le=9),
):
    try:
        url = hotel_url(
            destination, check_in, check_out, guests, rooms,
            base_url=settings.deeplink_base_url,
        )
    except InvalidDateError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return LinkResponse(url=url)


@router.get("/links/trip", response_model=TripLinksResponse)
async def get_trip_links(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    start_date: str = Query(...),
    end_date: str = Query(...),
    passengers: int = Query(1, ge=1, le=9),
):
    """Flight and hotel links for a whole trip."""
    try:
        urls = trip_urls(
            origin, destination, start_date, end_date, passengers,
            base_url=settings.deeplink_base_url,
        )
    except InvalidDateError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return TripLinksResponse(**urls)


@router.get("/locations/{city}", response_model=LocationResponse)
async def get_location_code(city: str):
    return LocationResponse(city=city, code=resolve_city_code(city))
