# (max days inclusive, premium). First row whose ceiling covers the duration wins.
DURATION_TIERS = [
    (0, 0.0),
    (30, 0.25),
    (60, 0.35),
    (90, 0.45),
    (180, 0.60),
    (365, 0.80),
    (float("inf"), 1.0),
]

EXCLUSIVITY_PREMIUMS = {
    "none": 0.0,
    "category": 0.30,
    "full": 0.50,
}

WHITELISTING = {
    "none": {"name": "No whitelisting", "premium": 0.0},
    "organic": {"name": "Organic reposts only", "premium": 0.5},
    "paid_social": {"name": "Paid social ads", "premium": 1.0},
    "full_media": {"name": "Full media buy (TV, OOH, digital)", "premium": 2.0},
}
DEFAULT_WHITELISTING = "none"
