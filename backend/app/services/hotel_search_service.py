"""Hotel search adapter — live SerpApi Google Hotels results with a fixed fallback catalog."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.config import Settings, settings
from app.data.currency import parse_price_text
from app.data.hotels import SYNTHETIC_HOTELS
from app.exceptions import ConfigurationError, ParseError, ProviderError, ValidationError
from app.schemas.hotel import HotelListing
from app.services.date_normalizer import normalize_date
from app.services.listing_ranker import rank_by_price
from app.services.serpapi_client import SerpApiClient

logger = logging.getLogger(__name__)

MAX_RESULTS = 8
DEFAULT_RATING = 4.0


def _float_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class HotelSearchService:
    """Searches hotels; never raises, degrading to the synthetic catalog instead."""

    def __init__(self, provider: SerpApiClient, currency: str = "INR"):
        self._provider = provider
        self._currency = currency

    @classmethod
    def from_settings(cls, settings: Settings) -> "HotelSearchService":
        return cls(
            provider=SerpApiClient.from_settings(settings),
            currency=settings.search_currency,
        )

    async def search(
        self,
        destination: str,
        check_in: str,
        check_out: str,
        guests: int = 2,
    ) -> list[HotelListing]:
        """Search hotels, ordered by nightly price ascending."""
        if not self._provider.configured:
            logger.warning("SerpApi key not configured, using mock hotels")
            return self._generate_mock_hotels(destination)

        try:
            params = {
                "engine": "google_hotels",
                "q": destination,
                "check_in_date": normalize_date(check_in),
                "check_out_date": normalize_date(check_out),
                "adults": str(guests),
                "currency": self._currency,
            }
            data = await self._provider.search(params)
            hotels = self._parse_properties(data.get("properties"), destination)
        except (ConfigurationError, ProviderError, ParseError, ValidationError) as e:
            logger.warning(f"Hotel search failed for {destination}, using mock hotels: {e}")
            return self._generate_mock_hotels(destination)
        except Exception as e:
            logger.error(f"Unexpected hotel search error, falling back to mock: {e}")
            return self._generate_mock_hotels(destination)

        if not hotels:
            logger.warning(f"No usable hotels for {destination}, using mock hotels")
            return self._generate_mock_hotels(destination)

        return rank_by_price(hotels)

    def _parse_properties(self, properties: Any, destination: str) -> list[HotelListing]:
        if not isinstance(properties, list):
            return []

        hotels = []
        for index, prop in enumerate(properties[:MAX_RESULTS]):
            try:
                hotel = self._parse_property(prop, index, destination)
            except (PydanticValidationError, TypeError, AttributeError) as e:
                logger.debug(f"Skipping malformed hotel record {index}: {e}")
                continue
            if hotel is not None:
                hotels.append(hotel)
        return hotels

    def _parse_property(self, prop: Any, index: int, destination: str) -> HotelListing | None:
        if not isinstance(prop, dict):
            return None

        name = prop.get("name") or prop.get("title")
        rate = prop.get("rate_per_night") if isinstance(prop.get("rate_per_night"), dict) else {}
        price_text = prop.get("price") or rate.get("lowest")
        if not name or not price_text:
            return None

        rating = _float_or_none(prop.get("overall_rating", prop.get("rating")))
        if rating is None:
            rating = DEFAULT_RATING

        try:
            review_count = int(prop.get("reviews", prop.get("review_count")) or 0)
        except (TypeError, ValueError):
            review_count = 0

        original = prop.get("original_price")
        if original is None and isinstance(prop.get("serpapi_pagination"), dict):
            original = prop["serpapi_pagination"].get("original_price")
        original_price = parse_price_text(original) if original is not None else None

        image = prop.get("image")
        images = prop.get("images")
        if not image and isinstance(images, list) and images and isinstance(images[0], dict):
            image = images[0].get("thumbnail") or images[0].get("original_image")

        location = prop.get("location")
        if not isinstance(location, str) or not location.strip():
            location = destination

        amenities = prop.get("amenities")
        if not isinstance(amenities, list):
            amenities = []

        return HotelListing(
            id=f"hotel-{index}",
            name=str(name),
            rating=min(max(rating, 0.0), 5.0),
            review_count=max(review_count, 0),
            location=location,
            price_per_night=parse_price_text(price_text),
            original_price_per_night=original_price or None,
            image_url=image or None,
            amenities=[str(a) for a in amenities],
        )

    # --- Mock data for demo mode ---

    def _generate_mock_hotels(self, destination: str) -> list[HotelListing]:
        """The fixed catalog, relabeled with the requested destination."""
        return rank_by_price(
            HotelListing(location=destination, **hotel) for hotel in SYNTHETIC_HOTELS
        )

    async def close(self):
        await self._provider.close()


hotel_search_service = HotelSearchService.from_settings(settings)
