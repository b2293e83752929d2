"""Flight search adapter — live SerpApi Google Flights results with synthetic fallback."""

import logging
import random
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.config import Settings, settings
from app.data.airlines import (
    AIRCRAFT_TYPES,
    AIRLINE_ROSTER,
    SYNTHETIC_FARE_MAX,
    SYNTHETIC_FARE_MIN,
)
from app.exceptions import ConfigurationError, ParseError, ProviderError, ValidationError
from app.schemas.flight import FlightListing
from app.services.date_normalizer import normalize_date
from app.services.listing_ranker import rank_by_price
from app.services.location_resolver import resolve_city_code
from app.services.serpapi_client import SerpApiClient

logger = logging.getLogger(__name__)

MAX_RESULTS = 6

# Synthetic flights land 2 to 4 hours after departure
MOCK_MIN_DURATION = 120
MOCK_MAX_DURATION = 240

# SerpApi google_flights "type": 1 = round trip, 2 = one way
ROUND_TRIP = "1"
ONE_WAY = "2"


def _clock(value: Any) -> str:
    """Reduce a provider time ('2025-01-10 06:05', '06:05', 365) to HH:MM."""
    if isinstance(value, bool):
        return "--:--"
    if isinstance(value, (int, float)):
        minutes = int(value) % (24 * 60)
        return f"{minutes // 60:02d}:{minutes % 60:02d}"
    if isinstance(value, str) and value.strip():
        return value.strip().split(" ")[-1]
    return "--:--"


def _int_or(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class FlightSearchService:
    """Searches flights; never raises, degrading to synthetic listings instead."""

    def __init__(
        self,
        provider: SerpApiClient,
        currency: str = "INR",
        rng: random.Random | None = None,
    ):
        self._provider = provider
        self._currency = currency
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings) -> "FlightSearchService":
        return cls(
            provider=SerpApiClient.from_settings(settings),
            currency=settings.search_currency,
            rng=random.Random(settings.mock_seed),
        )

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        return_date: str | None = None,
        passengers: int = 1,
    ) -> list[FlightListing]:
        """Search flights, ordered by total price ascending."""
        if not self._provider.configured:
            logger.warning("SerpApi key not configured, using mock flights")
            return self._generate_mock_flights(passengers)

        try:
            params = {
                "engine": "google_flights",
                "departure_id": resolve_city_code(origin),
                "arrival_id": resolve_city_code(destination),
                "outbound_date": normalize_date(departure_date),
                "type": ROUND_TRIP if return_date else ONE_WAY,
                "adults": str(passengers),
                "currency": self._currency,
            }
            if return_date:
                params["return_date"] = normalize_date(return_date)

            data = await self._provider.search(params)
            flights = self._parse_results(data, passengers)
        except (ConfigurationError, ProviderError, ParseError, ValidationError) as e:
            logger.warning(f"Flight search failed for {origin}-{destination}, using mock flights: {e}")
            return self._generate_mock_flights(passengers)
        except Exception as e:
            logger.error(f"Unexpected flight search error, falling back to mock: {e}")
            return self._generate_mock_flights(passengers)

        if not flights:
            logger.warning(f"No usable flights for {origin}-{destination}, using mock flights")
            return self._generate_mock_flights(passengers)

        return rank_by_price(flights)

    def _parse_results(self, data: dict, passengers: int) -> list[FlightListing]:
        """Parse best_flights, or other_flights when best_flights yields nothing."""
        flights = self._parse_list(data.get("best_flights"), passengers)
        if not flights:
            flights = self._parse_list(data.get("other_flights"), passengers)
        return flights

    def _parse_list(self, items: Any, passengers: int) -> list[FlightListing]:
        if not isinstance(items, list):
            return []

        flights = []
        for index, item in enumerate(items[:MAX_RESULTS]):
            try:
                listing = self._parse_item(item, index, passengers)
            except (PydanticValidationError, TypeError, AttributeError) as e:
                logger.debug(f"Skipping malformed flight record {index}: {e}")
                continue
            if listing is not None:
                flights.append(listing)
        return flights

    def _parse_item(self, item: Any, index: int, passengers: int) -> FlightListing | None:
        if not isinstance(item, dict):
            return None
        legs = item.get("flights")
        if not isinstance(legs, list) or not legs or not isinstance(legs[0], dict):
            return None

        first_leg = legs[0]
        last_leg = legs[-1] if isinstance(legs[-1], dict) else first_leg

        departure = (first_leg.get("departure_airport") or {}).get("time") or first_leg.get(
            "departure_time"
        )
        arrival = (last_leg.get("arrival_airport") or {}).get("time") or last_leg.get(
            "arrival_time"
        )

        duration = _int_or(item.get("total_duration"), -1)
        if duration < 0:
            duration = sum(_int_or(leg.get("duration"), 0) for leg in legs if isinstance(leg, dict))

        stops = item.get("stop_count")
        if not isinstance(stops, int):
            layovers = item.get("layovers")
            stops = len(layovers) if isinstance(layovers, list) else len(legs) - 1

        price = item.get("price")
        if not isinstance(price, (int, float)) or isinstance(price, bool):
            price = 0

        return FlightListing(
            id=f"flight-{index}",
            airline=first_leg.get("airline") or "Airline",
            departure_time=_clock(departure),
            arrival_time=_clock(arrival),
            duration_minutes=max(duration, 0),
            price_total=round(max(price, 0) * passengers),
            stop_count=max(stops, 0),
            flight_number=first_leg.get("flight_number") or "N/A",
            aircraft=first_leg.get("airplane") or first_leg.get("aircraft") or "Aircraft",
        )

    # --- Mock data generation for demo mode ---

    def _generate_mock_flights(self, passengers: int) -> list[FlightListing]:
        """Generate plausible flights when live search is unavailable."""
        rng = self._rng
        flights = []

        for i in range(MAX_RESULTS):
            dep_hour = rng.randint(4, 23)
            dep_minute = rng.randint(0, 59)
            duration = rng.randint(MOCK_MIN_DURATION, MOCK_MAX_DURATION)
            # Arrival may wrap past midnight
            arrival = (dep_hour * 60 + dep_minute + duration) % (24 * 60)
            arr_hour, arr_minute = divmod(arrival, 60)

            airline = rng.choice(AIRLINE_ROSTER)
            flights.append(FlightListing(
                id=f"flight-{i}",
                airline=airline,
                departure_time=f"{dep_hour:02d}:{dep_minute:02d}",
                arrival_time=f"{arr_hour:02d}:{arr_minute:02d}",
                duration_minutes=duration,
                price_total=rng.randint(SYNTHETIC_FARE_MIN, SYNTHETIC_FARE_MAX) * passengers,
                stop_count=rng.randint(0, 2),
                flight_number=f"{airline[:2].upper()}{rng.randint(1000, 9999)}",
                aircraft=rng.choice(AIRCRAFT_TYPES),
            ))

        return rank_by_price(flights)

    async def close(self):
        await self._provider.close()


flight_search_service = FlightSearchService.from_settings(settings)
