DEFAULT_REGION = "united_states"

REGIONS = {
    "united_states": {"name": "United States", "multiplier": 1.0},
    "united_kingdom": {"name": "United Kingdom", "multiplier": 0.95},
    "canada": {"name": "Canada", "multiplier": 0.9},
    "australia": {"name": "Australia", "multiplier": 0.9},
    "western_europe": {"name": "Western Europe", "multiplier": 0.85},
    "uae_gulf": {"name": "UAE/Gulf States", "multiplier": 1.1},
    "singapore_hk": {"name": "Singapore/Hong Kong", "multiplier": 0.95},
    "japan": {"name": "Japan", "multiplier": 0.8},
    "south_korea": {"name": "South Korea", "multiplier": 0.75},
    "brazil": {"name": "Brazil", "multiplier": 0.6},
    "mexico": {"name": "Mexico", "multiplier": 0.55},
    "india": {"name": "India", "multiplier": 0.4},
    "southeast_asia": {"name": "Southeast Asia", "multiplier": 0.5},
    "eastern_europe": {"name": "Eastern Europe", "multiplier": 0.5},
    "africa": {"name": "Africa", "multiplier": 0.4},
    "other": {"name": "Other", "multiplier": 0.7},
}

DEFAULT_NICHE = "lifestyle"
DEFAULT_NICHE_PREMIUM = 1.0

# niche -> (premium multiplier, display category)
NICHE_PREMIUMS = {
    "finance": (2.0, "Finance/Investing"),
    "investing": (2.0, "Finance/Investing"),
    "b2b": (1.8, "B2B/Business"),
    "business": (1.8, "B2B/Business"),
    "tech": (1.7, "Tech/Software"),
    "software": (1.7, "Tech/Software"),
    "technology": (1.7, "Tech/Software"),
    "legal": (1.7, "Legal/Medical"),
    "medical": (1.7, "Legal/Medical"),
    "healthcare": (1.7, "Legal/Medical"),
    "luxury": (1.5, "Luxury/High-end Fashion"),
    "high-end fashion": (1.5, "Luxury/High-end Fashion"),
    "beauty": (1.3, "Beauty/Skincare"),
    "skincare": (1.3, "Beauty/Skincare"),
    "cosmetics": (1.3, "Beauty/Skincare"),
    "fitness": (1.2, "Fitness/Wellness"),
    "wellness": (1.2, "Fitness/Wellness"),
    "health": (1.2, "Fitness/Wellness"),
    "food": (1.15, "Food/Cooking"),
    "cooking": (1.15, "Food/Cooking"),
    "recipes": (1.15, "Food/Cooking"),
    "travel": (1.15, "Travel"),
    "parenting": (1.1, "Parenting/Family"),
    "family": (1.1, "Parenting/Family"),
    "motherhood": (1.1, "Parenting/Family"),
    "lifestyle": (1.0, "Lifestyle"),
    "entertainment": (1.0, "Entertainment/Comedy"),
    "comedy": (1.0, "Entertainment/Comedy"),
    "music": (1.0, "Entertainment/Comedy"),
    "gaming": (0.95, "Gaming"),
    "esports": (0.95, "Gaming"),
}

# Engagement rate (%) breakpoints: first row whose ceiling is strictly above the rate wins
ENGAGEMENT_THRESHOLDS = [
    (1.0, 0.8),
    (3.0, 1.0),
    (5.0, 1.3),
    (8.0, 1.6),
    (float("inf"), 2.0),
]

ASSUMED_ENGAGEMENT_RATE = 3.0

CURRENCIES = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "CAD": "C$",
    "AUD": "A$",
    "BRL": "R$",
    "INR": "₹",
    "MXN": "MX$",
}
DEFAULT_CURRENCY = "USD"

SEASONAL_PERIODS = {
    "q4_holiday": {"name": "Q4 Holiday Season (Nov-Dec)", "premium": 0.25},
    "back_to_school": {"name": "Back to School (Aug-Sep)", "premium": 0.15},
    "valentines": {"name": "Valentine's Day (Feb)", "premium": 0.10},
    "summer": {"name": "Summer Season (Jun-Aug)", "premium": 0.05},
    "default": {"name": "Standard Period", "premium": 0.0},
}

# (month, last day inclusive or None for the whole month, period). First match wins.
SEASONAL_CALENDAR = [
    (11, None, "q4_holiday"),
    (12, None, "q4_holiday"),
    (8, None, "back_to_school"),
    (9, 15, "back_to_school"),
    (2, 14, "valentines"),
    (6, None, "summer"),
    (7, None, "summer"),
]
