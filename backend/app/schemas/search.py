from typing import Literal

from pydantic import BaseModel, Field

CabinClass = Literal["economy", "business", "first"]


class FlightSearchRequest(BaseModel):
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    departure_date: str
    return_date: str | None = None
    passengers: int = Field(1, ge=1, le=9)


class HotelSearchRequest(BaseModel):
    destination: str = Field(min_length=1)
    check_in: str
    check_out: str
    guests: int = Field(2, ge=1, le=9)


class TripLinksResponse(BaseModel):
    flights: str
    hotels: str


class LinkResponse(BaseModel):
    url: str


class LocationResponse(BaseModel):
    city: str
    code: str
