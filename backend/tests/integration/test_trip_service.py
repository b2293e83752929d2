"""Trip service against an in-memory database."""

import uuid
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import (
    ConfigurationError,
    GenerationParseError,
    PersistenceError,
    TripNotFoundError,
    ValidationError,
)
from app.models.trip import Trip
from app.schemas.trip import TripRequest
from app.services.itinerary_generator import ItineraryGenerator
from app.services.trip_service import TripService


def _request(**overrides) -> TripRequest:
    data = {
        "origin": "Delhi",
        "destination": "Goa",
        "start_date": "2025-03-01",
        "end_date": "2025-03-04",
        "budget": 20000,
    }
    data.update(overrides)
    return TripRequest(**data)


def _service(llm) -> TripService:
    return TripService(ItineraryGenerator(llm))


def _stored_trip(user_id: str, created_at: datetime, destination: str = "Goa") -> Trip:
    return Trip(
        user_id=user_id,
        origin="Delhi",
        destination=destination,
        start_date=date(2025, 3, 1),
        end_date=date(2025, 3, 3),
        budget=Decimal("10000.00"),
        itinerary={"days": [], "tips": [], "best_attractions": [], "budget_breakdown": {}},
        transport_cost=Decimal("4000.00"),
        stay_cost=Decimal("3500.00"),
        food_cost=Decimal("1500.00"),
        activities_cost=Decimal("1000.00"),
        created_at=created_at,
    )


class TestPlanTrip:
    @pytest.mark.asyncio
    async def test_persists_trip_with_breakdown(self, db_session, stub_llm_factory, itinerary_json) -> None:
        llm = stub_llm_factory(itinerary_json(3))
        trip = await _service(llm).plan_trip(db_session, "user-1", _request())

        assert trip.id is not None
        assert trip.user_id == "user-1"
        assert trip.destination == "Goa"
        assert trip.transport_cost == Decimal("8000.00")
        assert trip.stay_cost == Decimal("7000.00")
        assert trip.food_cost == Decimal("3000.00")
        assert trip.activities_cost == Decimal("2000.00")
        assert len(trip.itinerary["days"]) == 3
        assert trip.itinerary["budget_breakdown"]["transport"] == "8000.00"
        assert "3-day" in llm.calls[0]["user"]

        stored = await _service(llm).get_trip(db_session, "user-1", trip.id)
        assert stored.id == trip.id

    @pytest.mark.asyncio
    async def test_parse_failure_saves_nothing(self, db_session, stub_llm_factory) -> None:
        service = _service(stub_llm_factory("I cannot plan that trip."))
        with pytest.raises(GenerationParseError):
            await service.plan_trip(db_session, "user-1", _request())
        assert await service.list_trips(db_session, "user-1") == []

    @pytest.mark.asyncio
    async def test_missing_llm_key_saves_nothing(self, db_session, stub_llm_factory) -> None:
        service = _service(stub_llm_factory(configured=False))
        with pytest.raises(ConfigurationError):
            await service.plan_trip(db_session, "user-1", _request())
        assert await service.list_trips(db_session, "user-1") == []

    @pytest.mark.asyncio
    async def test_rejects_inverted_dates(self, db_session, stub_llm_factory, itinerary_json) -> None:
        llm = stub_llm_factory(itinerary_json(3))
        request = TripRequest.model_construct(
            origin="Delhi",
            destination="Goa",
            start_date=date(2025, 3, 4),
            end_date=date(2025, 3, 1),
            budget=Decimal("20000"),
        )
        with pytest.raises(ValidationError):
            await _service(llm).plan_trip(db_session, "user-1", request)
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back(
        self, db_session, stub_llm_factory, itinerary_json, monkeypatch
    ) -> None:
        rollback = AsyncMock(wraps=db_session.rollback)
        monkeypatch.setattr(db_session, "commit", AsyncMock(side_effect=SQLAlchemyError("disk full")))
        monkeypatch.setattr(db_session, "rollback", rollback)

        with pytest.raises(PersistenceError):
            await _service(stub_llm_factory(itinerary_json(3))).plan_trip(
                db_session, "user-1", _request()
            )
        rollback.assert_awaited_once()


class TestReadAndDelete:
    @pytest.mark.asyncio
    async def test_list_is_newest_first_and_scoped_to_user(self, db_session, stub_llm_factory) -> None:
        now = datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)
        db_session.add_all([
            _stored_trip("user-1", now - timedelta(days=2), "Jaipur"),
            _stored_trip("user-1", now, "Goa"),
            _stored_trip("user-1", now - timedelta(days=1), "Manali"),
            _stored_trip("user-2", now, "Shimla"),
        ])
        await db_session.commit()

        trips = await _service(stub_llm_factory()).list_trips(db_session, "user-1")
        assert [t.destination for t in trips] == ["Goa", "Manali", "Jaipur"]

    @pytest.mark.asyncio
    async def test_other_users_trip_is_not_found(self, db_session, stub_llm_factory) -> None:
        trip = _stored_trip("user-2", datetime(2025, 2, 1, tzinfo=timezone.utc))
        db_session.add(trip)
        await db_session.commit()

        service = _service(stub_llm_factory())
        with pytest.raises(TripNotFoundError):
            await service.get_trip(db_session, "user-1", trip.id)
        with pytest.raises(TripNotFoundError):
            await service.delete_trip(db_session, "user-1", trip.id)
        assert (await service.get_trip(db_session, "user-2", trip.id)).id == trip.id

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, db_session, stub_llm_factory) -> None:
        with pytest.raises(TripNotFoundError):
            await _service(stub_llm_factory()).get_trip(db_session, "user-1", uuid.uuid4())

    @pytest.mark.asyncio
    async def test_delete_removes_trip(self, db_session, stub_llm_factory, itinerary_json) -> None:
        service = _service(stub_llm_factory(itinerary_json(3)))
        trip = await service.plan_trip(db_session, "user-1", _request())

        await service.delete_trip(db_session, "user-1", trip.id)

        assert await service.list_trips(db_session, "user-1") == []
        with pytest.raises(TripNotFoundError):
            await service.get_trip(db_session, "user-1", trip.id)


@pytest.mark.asyncio
async def test_close_releases_generator_client(stub_llm_factory) -> None:
    llm = stub_llm_factory()
    await _service(llm).close()
    assert llm.closed
