"""Known city → location code mappings for the domestic markets served."""

from types import MappingProxyType

CITY_CODES = MappingProxyType({
    "delhi": "DEL",
    "mumbai": "BOM",
    "bangalore": "BLR",
    "kolkata": "CCU",
    "chennai": "MAA",
    "hyderabad": "HYD",
    "pune": "PNQ",
    "goa": "GOI",
    "jaipur": "JAI",
    "kerala": "COK",  # Cochin
    "manali": "KUU",  # Kullu-Manali
    "rishikesh": "DED",  # Dehradun, nearest airport
    "shimla": "SLV",
    "udaipur": "UDR",
})
