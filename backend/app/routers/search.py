"""Search router — flight and hotel listings, live or synthetic."""

from fastapi import APIRouter

from app.schemas.flight import FlightListing
from app.schemas.hotel import HotelListing
from app.schemas.search import FlightSearchRequest, HotelSearchRequest
from app.services.flight_search_service import flight_search_service
from app.services.hotel_search_service import hotel_search_service

router = APIRouter()


@router.post("/flights", response_model=list[FlightListing])
async def search_flights(req: FlightSearchRequest):
    """Search flights. Always returns listings sorted by total price."""
    return await flight_search_service.search(
        origin=req.origin,
        destination=req.destination,
        departure_date=req.departure_date,
        return_date=req.return_date,
        passengers=req.passengers,
    )


@router.post("/hotels", response_model=list[HotelListing])
async def search_hotels(req: HotelSearchRequest):
    """Search hotels. Always returns listings sorted by nightly price."""
    return await hotel_search_service.search(
        destination=req.destination,
        check_in=req.check_in,
        check_out=req.check_out,
        guests=req.guests,
    )
