"""Destinations router — curated destination content."""

from fastapi import APIRouter, HTTPException

from app.data.destinations import DESTINATIONS
from app.schemas.destination import DestinationResponse
from app.services.location_resolver import resolve_city_code

router = APIRouter()


def _to_response(destination: dict) -> DestinationResponse:
    return DestinationResponse(
        location_code=resolve_city_code(destination["name"]), **destination
    )


@router.get("", response_model=list[DestinationResponse])
async def list_destinations():
    return [_to_response(d) for d in DESTINATIONS]


@router.get("/{name}", response_model=DestinationResponse)
async def get_destination(name: str):
    wanted = name.strip().lower()
    for destination in DESTINATIONS:
        if destination["name"].lower() == wanted:
            return _to_response(destination)
    raise HTTPException(status_code=404, detail="Destination not found")
