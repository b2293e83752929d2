"""Curated destination content for the explore page."""

DESTINATIONS: tuple[dict, ...] = (
    {
        "name": "Delhi",
        "description": "India's capital - a blend of ancient monuments and modern culture",
        "avg_cost": "₹15,000 - ₹25,000",
        "best_time": "October - March",
        "image_url": "https://images.unsplash.com/photo-1587474260584-136574528ed5?w=800",
        "highlights": ["Red Fort", "India Gate", "Qutub Minar"],
    },
    {
        "name": "Jaipur",
        "description": "The Pink City - magnificent forts and royal palaces",
        "avg_cost": "₹12,000 - ₹20,000",
        "best_time": "November - February",
        "image_url": "https://images.unsplash.com/photo-1599661046289-e31897846e41?w=800",
        "highlights": ["Hawa Mahal", "Amber Fort", "City Palace"],
    },
    {
        "name": "Goa",
        "description": "Beach paradise - Portuguese heritage and vibrant nightlife",
        "avg_cost": "₹20,000 - ₹35,000",
        "best_time": "November - February",
        "image_url": "https://images.unsplash.com/photo-1512343879784-a960bf40e7f2?w=800",
        "highlights": ["Beaches", "Dudhsagar Falls", "Old Goa Churches"],
    },
    {
        "name": "Kerala",
        "description": "God's Own Country - backwaters, beaches, and hill stations",
        "avg_cost": "₹18,000 - ₹30,000",
        "best_time": "September - March",
        "image_url": "https://images.unsplash.com/photo-1602216056096-3b40cc0c9944?w=800",
        "highlights": ["Backwaters", "Munnar", "Kovalam Beach"],
    },
    {
        "name": "Manali",
        "description": "Mountain retreat - adventure sports and scenic beauty",
        "avg_cost": "₹15,000 - ₹28,000",
        "best_time": "March - June, September - January",
        "image_url": "https://images.unsplash.com/photo-1626621341517-bbf3d9990a23?w=800",
        "highlights": ["Rohtang Pass", "Solang Valley", "Hidimba Temple"],
    },
    {
        "name": "Rishikesh",
        "description": "Yoga capital - spiritual retreat and adventure hub",
        "avg_cost": "₹10,000 - ₹18,000",
        "best_time": "September - November, March - May",
        "image_url": "https://images.unsplash.com/photo-1591995930744-d92b1e80b0c3?w=800",
        "highlights": ["Laxman Jhula", "River Rafting", "Beatles Ashram"],
    },
    {
        "name": "Shimla",
        "description": "Queen of Hills - colonial charm and pine forests",
        "avg_cost": "₹12,000 - ₹22,000",
        "best_time": "March - June, December - January",
        "image_url": "https://images.unsplash.com/photo-1605649487212-47bdab064df7?w=800",
        "highlights": ["The Ridge", "Mall Road", "Jakhu Temple"],
    },
    {
        "name": "Udaipur",
        "description": "City of Lakes - romantic palaces and heritage",
        "avg_cost": "₹14,000 - ₹24,000",
        "best_time": "September - March",
        "image_url": "https://images.unsplash.com/photo-1609137144813-7d9921338f24?w=800",
        "highlights": ["Lake Palace", "City Palace", "Fateh Sagar Lake"],
    },
)
