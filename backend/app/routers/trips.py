import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_user_id
from app.exceptions import (
    ConfigurationError,
    GenerationParseError,
    GenerationProviderError,
    PersistenceError,
    TripNotFoundError,
    ValidationError,
)
from app.schemas.trip import TripRequest, TripResponse
from app.services.trip_service import trip_service

router = APIRouter()


@router.post("", status_code=201, response_model=TripResponse)
async def create_trip(
    req: TripRequest,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Generate an itinerary for the request and save the trip."""
    try:
        return await trip_service.plan_trip(db, user_id, req)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except (GenerationProviderError, GenerationParseError) as e:
        raise HTTPException(
            status_code=502,
            detail=f"Could not generate the itinerary ({e}). Please try again.",
        )
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("", response_model=list[TripResponse])
async def list_trips(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """List the caller's trips, newest first."""
    try:
        return await trip_service.list_trips(db, user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return await trip_service.get_trip(db, user_id, trip_id)
    except TripNotFoundError:
        raise HTTPException(status_code=404, detail="Trip not found")
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{trip_id}", status_code=204)
async def delete_trip(
    trip_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Delete one of the caller's trips."""
    try:
        await trip_service.delete_trip(db, user_id, trip_id)
    except TripNotFoundError:
        raise HTTPException(status_code=404, detail="Trip not found")
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
