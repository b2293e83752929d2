"""Fixed hotel catalog served when live hotel search is unavailable.

`location` is filled in with the requested destination at search time.
"""

SYNTHETIC_HOTELS: tuple[dict, ...] = (
    {
        "id": "hotel-1",
        "name": "The Grand Palace",
        "rating": 4.8,
        "review_count": 1250,
        "price_per_night": 4500,
        "original_price_per_night": 5500,
        "amenities": ["WiFi", "Pool", "Gym", "Restaurant", "AC"],
        "image_url": "https://images.unsplash.com/photo-1631049307264-da0ec9d70304?w=400",
    },
    {
        "id": "hotel-2",
        "name": "Sunset Resort",
        "rating": 4.6,
        "review_count": 892,
        "price_per_night": 3200,
        "original_price_per_night": 4000,
        "amenities": ["WiFi", "Beach Access", "Restaurant", "Spa", "AC"],
        "image_url": "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=400",
    },
    {
        "id": "hotel-3",
        "name": "Royal Heritage Hotel",
        "rating": 4.5,
        "review_count": 756,
        "price_per_night": 2800,
        "original_price_per_night": None,
        "amenities": ["WiFi", "Gym", "Restaurant", "AC", "Parking"],
        "image_url": "https://images.unsplash.com/photo-1583422409516-2895a77efded?w=400",
    },
    {
        "id": "hotel-4",
        "name": "Budget Stay Inn",
        "rating": 4.2,
        "review_count": 543,
        "price_per_night": 1500,
        "original_price_per_night": None,
        "amenities": ["WiFi", "Restaurant", "AC", "Parking"],
        "image_url": "https://images.unsplash.com/photo-1570129477492-45f003313e78?w=400",
    },
    {
        "id": "hotel-5",
        "name": "Luxury Towers",
        "rating": 4.9,
        "review_count": 2100,
        "price_per_night": 7500,
        "original_price_per_night": 9000,
        "amenities": ["WiFi", "Pool", "Gym", "Spa", "Restaurant", "Valet"],
        "image_url": "https://images.unsplash.com/photo-1561501900-d3fee871d55e?w=400",
    },
    {
        "id": "hotel-6",
        "name": "Comfort Plaza",
        "rating": 4.4,
        "review_count": 634,
        "price_per_night": 2200,
        "original_price_per_night": None,
        "amenities": ["WiFi", "Restaurant", "AC", "TV"],
        "image_url": "https://images.unsplash.com/photo-1578898657097-f4ae319b0359?w=400",
    },
    {
        "id": "hotel-7",
        "name": "Mountain View Resort",
        "rating": 4.7,
        "review_count": 1456,
        "price_per_night": 5800,
        "original_price_per_night": 7200,
        "amenities": ["WiFi", "Mountain View", "Restaurant", "Gym", "AC"],
        "image_url": "https://images.unsplash.com/photo-1582719508461-905a9c344e3b?w=400",
    },
    {
        "id": "hotel-8",
        "name": "City Central Hotel",
        "rating": 4.3,
        "review_count": 789,
        "price_per_night": 2600,
        "original_price_per_night": None,
        "amenities": ["WiFi", "Restaurant", "AC", "Business Center"],
        "image_url": "https://images.unsplash.com/photo-1515877152452-18e92d2b26b2?w=400",
    },
)
