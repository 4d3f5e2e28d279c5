# Points available per scoring dimension (sums to 100)
MAX_POINTS = {
    "rate_fairness": 25,
    "brand_legitimacy": 20,
    "portfolio_value": 20,
    "growth_potential": 15,
    "terms_fairness": 10,
    "creative_freedom": 10,
}

# Checked highest first
QUALITY_LEVELS = [
    {
        "min_score": 85,
        "level": "excellent",
        "adjustment": 0.25,
        "recommendation": "take_deal",
        "recommendation_text": "Excellent opportunity! This deal is worth pursuing.",
    },
    {
        "min_score": 70,
        "level": "good",
        "adjustment": 0.15,
        "recommendation": "good_deal",
        "recommendation_text": "Good deal. Consider accepting with minor negotiations.",
    },
    {
        "min_score": 50,
        "level": "fair",
        "adjustment": 0.0,
        "recommendation": "negotiate",
        "recommendation_text": "Fair deal. Negotiate for better terms before accepting.",
    },
    {
        "min_score": 0,
        "level": "caution",
        "adjustment": -0.1,
        "recommendation": "decline",
        "recommendation_text": "Proceed with caution. Consider declining or major renegotiation.",
    },
]

# Fit level -> price adjustment. "low" is the floor.
FIT_ADJUSTMENTS = {
    "perfect": 0.25,
    "high": 0.15,
    "medium": 0.0,
    "low": -0.10,
}

QUALITY_TO_FIT_LEVEL = {
    "excellent": "perfect",
    "good": "high",
    "fair": "medium",
    "caution": "low",
}

# (minimum offered/market ratio, share of max points). First match wins.
RATE_FAIRNESS_BANDS = [
    (1.2, 1.0),
    (1.0, 0.85),
    (0.8, 0.6),
    (0.6, 0.35),
    (0.0, 0.1),
]

INDUSTRY_NICHES = {
    "fashion": ["fashion", "style", "clothing", "beauty", "lifestyle", "luxury"],
    "fitness": ["fitness", "health", "wellness", "sports", "gym", "nutrition"],
    "technology": ["tech", "gaming", "gadgets", "software", "apps", "ai"],
    "food": ["food", "cooking", "recipes", "restaurants", "foodie", "chef"],
    "travel": ["travel", "adventure", "destinations", "hotels", "wanderlust"],
    "beauty": ["beauty", "makeup", "skincare", "cosmetics", "hair", "nails"],
    "finance": ["finance", "investing", "money", "business", "crypto", "stocks"],
    "education": ["education", "learning", "tutorials", "courses", "teaching"],
    "entertainment": ["entertainment", "movies", "music", "celebrity", "pop culture"],
    "parenting": ["parenting", "family", "kids", "motherhood", "fatherhood"],
    "automotive": ["automotive", "cars", "vehicles", "racing", "motorcycles"],
    "gaming": ["gaming", "esports", "games", "streaming", "twitch"],
    "home": ["home", "decor", "diy", "interior", "garden", "renovation"],
    "pets": ["pets", "dogs", "cats", "animals", "pet care"],
}

HIGH_PRESTIGE_INDUSTRIES = ["luxury", "fashion", "beauty", "technology", "finance", "automotive"]

PAYMENT_TERM_POINTS = {
    "upfront": (4, "upfront payment", None),
    "net_15": (4, "Net-15 payment", None),
    "net_30": (3, "Net-30 payment", None),
    "net_60": (1, None, "Net-60 is slow - request Net-30 or faster"),
    "net_90": (0, None, "Net-90 is unreasonable - negotiate faster payment"),
}

APPROVAL_PROCESS_POINTS = {
    "simple": 3,
    "moderate": 2,
    "complex": 0,
}

RETAINER_GROWTH_POINTS = {
    "12_month": (4, "12-month ambassador"),
    "6_month": (3, "6-month retainer"),
    "3_month": (2, "3-month retainer"),
}

# Fit score view: (fit component, weight)
FIT_SCORE_WEIGHTS = {
    "niche_match": 0.3,
    "demographic_match": 0.25,
    "platform_match": 0.2,
    "engagement_quality": 0.15,
    "content_capability": 0.1,
}
