"""Listing ranker — one price ordering for flight and hotel results."""

from collections.abc import Iterable
from typing import TypeVar

from app.schemas.flight import FlightListing
from app.schemas.hotel import HotelListing

L = TypeVar("L", FlightListing, HotelListing)


def listing_price(listing: FlightListing | HotelListing) -> float:
    """Total fare for flights, nightly rate for hotels."""
    if isinstance(listing, FlightListing):
        return listing.price_total
    return listing.price_per_night


def rank_by_price(listings: Iterable[L]) -> list[L]:
    """Stable ascending sort by price."""
    return sorted(listings, key=listing_price)
