"""Airline roster and aircraft types used for synthetic flight listings."""

# Domestic carriers
AIRLINE_ROSTER: tuple[str, ...] = (
    "Air India",
    "SpiceJet",
    "IndiGo",
    "Vistara",
    "GoAir",
    "AirAsia",
)

AIRCRAFT_TYPES: tuple[str, ...] = ("Airbus A320", "Airbus A321", "Airbus A380")

# Per-passenger fare band for synthetic listings, in the search currency
SYNTHETIC_FARE_MIN = 3000
SYNTHETIC_FARE_MAX = 7999
