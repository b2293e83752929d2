from pydantic import BaseModel


class DestinationResponse(BaseModel):
    name: str
    location_code: str
    description: str
    avg_cost: str
    best_time: str
    image_url: str
    highlights: list[str]
