from fastapi import APIRouter, HTTPException

from data.tiers import TIERS, TIER_ORDER, TIER_RATE_BENCHMARKS
from data.platforms import PLATFORMS, CONTENT_FORMATS
from data.markets import REGIONS
from data.deal_quality import QUALITY_LEVELS
from data.brand_trust import TRUST_LEVELS, TRUST_LEVEL_INFO
from data.gifts import RESPONSE_TYPE_INFO
from services.numbers import format_premium
from services.tiers import get_tier_band

router = APIRouter(prefix="/api/reference", tags=["reference"])


@router.get("/tiers")
async def get_tiers():
    """Follower tiers with their bands, base rates and market benchmarks"""
    tiers = []
    for key in TIER_ORDER:
        lower, upper = get_tier_band(key)
        tiers.append({
            "tier": key,
            "name": TIERS[key]["name"],
            "min_followers": lower,
            "max_followers": upper - 1 if upper else None,
            "base_rate": f"${TIERS[key]['base_rate']:,}",
            "benchmarks": TIER_RATE_BENCHMARKS[key],
        })
    return tiers


@router.get("/tier/{tier}")
async def get_tier_details(tier: str):
    key = tier.lower()
    if key not in TIERS:
        raise HTTPException(status_code=404, detail=f"Tier {tier} not found")

    lower, upper = get_tier_band(key)
    return {
        "tier": key,
        **TIERS[key],
        "min_followers": lower,
        "max_followers": upper - 1 if upper else None,
        "benchmarks": TIER_RATE_BENCHMARKS[key],
    }


@router.get("/platforms")
async def get_platforms():
    return [
        {"code": key, "name": val["name"], "multiplier": val["multiplier"]}
        for key, val in PLATFORMS.items()
    ]


@router.get("/content-formats")
async def get_content_formats():
    return [
        {
            "code": key,
            "name": val["name"],
            "premium": format_premium(val["premium"]),
            "complexity": val["complexity"],
        }
        for key, val in CONTENT_FORMATS.items()
    ]


@router.get("/regions")
async def get_regions():
    return [
        {"code": key, "name": val["name"], "multiplier": val["multiplier"]}
        for key, val in REGIONS.items()
    ]


@router.get("/deal-quality-levels")
async def get_deal_quality_levels():
    return [
        {
            "level": level["level"],
            "min_score": level["min_score"],
            "recommendation": level["recommendation"],
            "recommendation_text": level["recommendation_text"],
        }
        for level in QUALITY_LEVELS
    ]


@router.get("/trust-levels")
async def get_trust_levels():
    """Brand trust levels, highest first"""
    return [
        {"level": level, "min_score": min_score, **TRUST_LEVEL_INFO[level]}
        for min_score, level in TRUST_LEVELS
    ]


@router.get("/gift-response-types")
async def get_gift_response_types():
    return {key: dict(val) for key, val in RESPONSE_TYPE_INFO.items()}
