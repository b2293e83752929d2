from pydantic import BaseModel, Field


class FlightListing(BaseModel):
    id: str
    airline: str
    departure_time: str
    arrival_time: str
    duration_minutes: int = Field(ge=0)
    price_total: float = Field(ge=0)
    stop_count: int = Field(ge=0)
    flight_number: str
    aircraft: str
