HYBRID_BASE_FEE_SHARE = 0.5

AFFILIATE_CATEGORIES = {
    "fashion_apparel": {"name": "Fashion/Apparel", "min": 10, "max": 20, "default": 15},
    "beauty_skincare": {"name": "Beauty/Skincare", "min": 15, "max": 25, "default": 20},
    "tech_electronics": {"name": "Tech/Electronics", "min": 5, "max": 10, "default": 7},
    "home_lifestyle": {"name": "Home/Lifestyle", "min": 8, "max": 15, "default": 12},
    "food_beverage": {"name": "Food/Beverage", "min": 10, "max": 15, "default": 12},
    "health_supplements": {"name": "Health/Supplements", "min": 15, "max": 30, "default": 22},
    "digital_products": {"name": "Digital Products/Courses", "min": 20, "max": 40, "default": 30},
    "services_subscriptions": {"name": "Services/Subscriptions", "min": 15, "max": 25, "default": 20},
    "other": {"name": "Other", "min": 10, "max": 15, "default": 12},
}

# deal length -> (volume discount, contract months)
DEAL_LENGTHS = {
    "one_time": (0.0, 1),
    "monthly": (0.0, 1),
    "3_month": (0.15, 3),
    "6_month": (0.25, 6),
    "12_month": (0.35, 12),
}

DELIVERABLE_MULTIPLIERS = {
    "posts": 1.0,
    "stories": 0.3,
    "reels": 1.25,
    "videos": 1.5,
}

AMBASSADOR_EXCLUSIVITY_PREMIUMS = {
    "none": 0.0,
    "category": 0.5,
    "full": 1.0,
}
