# Gift offer tables. Hourly rates per tier live in data/tiers.py.

ESTIMATED_CPM = 5
ENGAGEMENT_VALUE_MULTIPLIER = 0.001

CONTENT_EFFORT_MULTIPLIERS = {
    "organic_mention": 0.5,
    "dedicated_post": 1.0,
    "multiple_posts": 2.0,
    "video_content": 1.5,
}

CONTENT_TYPE_DISPLAY = {
    "organic_mention": "organic story/mention",
    "dedicated_post": "dedicated post",
    "multiple_posts": "multiple posts",
    "video_content": "video content",
}

# Share of the stated product value a creator can count on
CREDIBILITY_FACTORS = {
    "major_brand": 1.0,
    "established_indie": 0.9,
    "new_unknown": 0.7,
    "suspicious": 0.25,
}

BRAND_QUALITY_STRATEGIC_POINTS = {
    "major_brand": 3,
    "established_indie": 2,
    "new_unknown": 0,
    "suspicious": -5,
}

LARGE_BRAND_FOLLOWING = 100_000
INDIE_CONVERSION_FOLLOWING = 50_000

# Worth score bands, checked highest first
RECOMMENDATION_BANDS = [
    (70, "accept"),
    (50, "negotiate"),
    (0, "decline"),
]

WALK_AWAY_POINTS = {
    "run_away": "This deal has too many red flags. Politely decline and move on.",
    "decline_politely": "If they won't add any budget, thank them and decline. Your time is worth more.",
    "counter_hybrid": "If they reject the hybrid offer and insist on gift-only, limit your deliverable to a story mention.",
    "ask_budget_first": "If there's no budget at all and the product value doesn't justify your time, politely pass.",
    "accept_with_hook": "If they become demanding about deliverables or usage rights, revisit the conversation about paid work.",
}

RESPONSE_TYPE_INFO = {
    "accept_with_hook": {
        "title": "Accept & Position for Paid",
        "description": "Accept the gift and share genuinely, while planting seeds for a future paid partnership.",
    },
    "counter_hybrid": {
        "title": "Counter with Hybrid Offer",
        "description": "Ask for product + reduced payment to make the deal worthwhile for both parties.",
    },
    "ask_budget_first": {
        "title": "Ask Clarifying Questions",
        "description": "Get more information about their budget and expectations before committing.",
    },
    "decline_politely": {
        "title": "Politely Decline",
        "description": "Pass on this opportunity but keep the door open for future paid work.",
    },
    "run_away": {
        "title": "Decline (Red Flags)",
        "description": "Red flags detected. Politely disengage without leaving the door open.",
    },
}
