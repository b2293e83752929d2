from pydantic import BaseModel, Field, field_validator


class HotelListing(BaseModel):
    id: str
    name: str
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(ge=0)
    location: str
    price_per_night: float = Field(ge=0)
    original_price_per_night: float | None = None
    image_url: str | None = None
    amenities: list[str] = []

    @field_validator("amenities")
    @classmethod
    def dedupe_amenities(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))
