import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from app.exceptions import InvalidDateError
from app.schemas.itinerary import Itinerary
from app.services.date_normalizer import parse_date

MIN_TRIP_BUDGET = Decimal("1000")


class TripRequest(BaseModel):
    origin: str = Field(min_length=1, max_length=100)
    destination: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date
    budget: Decimal = Field(ge=MIN_TRIP_BUDGET, max_digits=12, decimal_places=2)

    @field_validator("origin", "destination")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        if isinstance(v, str):
            try:
                return parse_date(v)
            except InvalidDateError as e:
                raise ValueError(str(e)) from e
        return v

    @model_validator(mode="after")
    def end_after_start(self) -> "TripRequest":
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class TripResponse(BaseModel):
    id: uuid.UUID
    user_id: str
    origin: str
    destination: str
    start_date: date
    end_date: date
    budget: Decimal
    itinerary: Itinerary
    transport_cost: Decimal
    stay_cost: Decimal
    food_cost: Decimal
    activities_cost: Decimal
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
