# Profile details the quick estimate cannot see. Always shown, in this order.
MISSING_FACTORS = [
    {
        "icon": "TrendingUp",
        "name": "Your Actual Engagement",
        "description": "High engagement = higher rates. We assumed 3% average.",
        "impact": "±30%",
    },
    {
        "icon": "Globe",
        "name": "Audience Location",
        "description": "US/UK audiences pay significantly more than global average.",
        "impact": "+40%",
    },
    {
        "icon": "FileText",
        "name": "Usage Rights",
        "description": "Brands using your content in paid ads or for longer periods pay more.",
        "impact": "+25-100%",
    },
    {
        "icon": "Camera",
        "name": "Production Complexity",
        "description": "Multi-location shoots and professional editing command higher rates.",
        "impact": "+15-50%",
    },
]

RATE_INFLUENCERS = {
    "high_engagement": {
        "name": "High Engagement",
        "description": "Engagement rate above 5% commands premium rates",
        "potential_increase": "+20-60%",
    },
    "usage_rights": {
        "name": "Usage Rights",
        "description": "Brands using your content in ads pay more",
        "potential_increase": "+25-100%",
    },
    "exclusivity": {
        "name": "Exclusivity",
        "description": "Not working with competitors justifies higher rates",
        "potential_increase": "+30-50%",
    },
    "whitelisting": {
        "name": "Whitelisting",
        "description": "Allowing brands to run your content as ads",
        "potential_increase": "+50-200%",
    },
    "q4_holiday": {
        "name": "Q4 Holiday Season",
        "description": "Brands pay more during peak shopping seasons",
        "potential_increase": "+15-25%",
    },
    "complex_production": {
        "name": "Complex Production",
        "description": "Multi-location shoots or professional editing",
        "potential_increase": "+15-50%",
    },
}

MAX_RATE_INFLUENCERS = 4

# Multipliers a fully filled-in profile can unlock: high engagement, usage rights, exclusivity
FULL_PROFILE_UPLIFT = 1.6 * 1.5 * 1.3

ESTIMATE_BAND = 0.2
