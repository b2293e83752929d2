"""Trip service — generate an itinerary for a trip request and persist the result."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import PersistenceError, TripNotFoundError, ValidationError
from app.models.trip import Trip
from app.schemas.trip import TripRequest
from app.services.date_normalizer import days_between
from app.services.itinerary_generator import ItineraryGenerator

logger = logging.getLogger(__name__)


class TripService:
    """Creates, lists and deletes trips. Trips are never updated."""

    def __init__(self, generator: ItineraryGenerator):
        self._generator = generator

    async def plan_trip(self, db: AsyncSession, user_id: str, request: TripRequest) -> Trip:
        """Generate the itinerary for `request` and save it as a new trip.

        Generation errors propagate untouched and nothing is saved.
        """
        if request.end_date <= request.start_date:
            raise ValidationError("End date must be after start date")
        days = days_between(request.start_date, request.end_date)
        if days < 1:
            raise ValidationError("Trip must last at least one day")

        itinerary = await self._generator.generate(request.destination, days, request.budget)
        breakdown = itinerary.budget_breakdown

        trip = Trip(
            user_id=user_id,
            origin=request.origin,
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
            budget=request.budget,
            itinerary=itinerary.model_dump(mode="json"),
            transport_cost=breakdown.transport,
            stay_cost=breakdown.stay,
            food_cost=breakdown.food,
            activities_cost=breakdown.activities,
        )

        try:
            db.add(trip)
            await db.commit()
            await db.refresh(trip)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Failed to save trip for user {user_id}: {e}")
            raise PersistenceError(f"Could not save trip: {e}") from e

        logger.info(f"Trip {trip.id} planned: {request.origin} → {request.destination}, {days} days")
        return trip

    async def list_trips(self, db: AsyncSession, user_id: str) -> list[Trip]:
        """All trips owned by the user, newest first."""
        try:
            result = await db.execute(
                select(Trip).where(Trip.user_id == user_id).order_by(Trip.created_at.desc())
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not load trips: {e}") from e
        return list(result.scalars().all())

    async def get_trip(self, db: AsyncSession, user_id: str, trip_id: uuid.UUID) -> Trip:
        try:
            result = await db.execute(
                select(Trip).where(Trip.id == trip_id, Trip.user_id == user_id)
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not load trip: {e}") from e
        trip = result.scalar_one_or_none()
        if not trip:
            raise TripNotFoundError(f"Trip {trip_id} not found")
        return trip

    async def delete_trip(self, db: AsyncSession, user_id: str, trip_id: uuid.UUID) -> None:
        trip = await self.get_trip(db, user_id, trip_id)
        try:
            await db.delete(trip)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise PersistenceError(f"Could not delete trip: {e}") from e
        logger.info(f"Trip {trip_id} deleted by user {user_id}")

    async def close(self):
        await self._generator.close()


trip_service = TripService(ItineraryGenerator.from_settings(settings))
