import logging

from data.estimate_factors import (
    MISSING_FACTORS, RATE_INFLUENCERS, MAX_RATE_INFLUENCERS, FULL_PROFILE_UPLIFT, ESTIMATE_BAND,
)
from data.markets import ASSUMED_ENGAGEMENT_RATE, DEFAULT_NICHE
from data.tiers import TIER_RATE_BENCHMARKS, CELEBRITY_BAND_CEILING
from schemas.quick_estimate import (
    QuickEstimateInput, QuickEstimateResult, RateRange, MissingFactor, RateInfluencer,
)
from services.numbers import round_half_up, round_to_nearest_five, clamp
from services.rate_tables import get_niche_premium, get_format_premium
from services.tiers import classify_tier, get_tier_band

logger = logging.getLogger(__name__)


def get_assumed_engagement_multiplier(engagement_rate: float = ASSUMED_ENGAGEMENT_RATE) -> float:
    # The 1-3% band includes 3% here, unlike the full pricing scan.
    if engagement_rate < 1:
        return 0.8
    if engagement_rate <= 3:
        return 1.0
    if engagement_rate < 5:
        return 1.3
    if engagement_rate < 8:
        return 1.6
    return 2.0


def calculate_percentile(follower_count: int, tier: str) -> int:
    """Position of the follower count inside its tier band, 0-99."""
    lower, upper = get_tier_band(tier)
    if upper is None:
        upper = CELEBRITY_BAND_CEILING
    position = (follower_count - lower) / (upper - lower) * 100
    return clamp(round_half_up(position), 0, 99)


def get_top_performer_range(tier: str) -> RateRange:
    benchmarks = TIER_RATE_BENCHMARKS[tier]
    return RateRange(min=benchmarks["p75"], max=benchmarks["p90"])


def calculate_potential_rate(base_rate: int, max_rate: int) -> int:
    return max(max_rate, round_half_up(base_rate * FULL_PROFILE_UPLIFT))


def get_missing_factors() -> list[MissingFactor]:
    return [MissingFactor(**factor) for factor in MISSING_FACTORS]


def get_relevant_factors(tier: str, content_format: str) -> list[RateInfluencer]:
    keys = ["high_engagement", "usage_rights"]
    if tier != "nano":
        keys.append("exclusivity")
    if content_format in ("reel", "video"):
        keys.append("whitelisting")
    keys.append("q4_holiday")
    if content_format in ("video", "live"):
        keys.append("complex_production")
    return [RateInfluencer(**RATE_INFLUENCERS[key]) for key in keys[:MAX_RATE_INFLUENCERS]]


def get_all_rate_influencers() -> list[RateInfluencer]:
    return [RateInfluencer(**entry) for entry in RATE_INFLUENCERS.values()]


def calculate_quick_estimate(input: QuickEstimateInput) -> QuickEstimateResult:
    """Rate range for a creator from follower count, platform, format and niche alone.

    Assumes a 3% engagement rate. The caller validates ranges and enum values.
    """
    niche = input.niche or DEFAULT_NICHE
    tier_info = classify_tier(input.follower_count)

    rate = tier_info.base_rate(input.platform)
    rate *= get_assumed_engagement_multiplier()
    rate *= get_niche_premium(niche)
    rate *= 1 + get_format_premium(input.content_format)

    base_rate = round_to_nearest_five(rate)
    min_rate = round_half_up(base_rate * (1 - ESTIMATE_BAND))
    max_rate = round_half_up(base_rate * (1 + ESTIMATE_BAND))

    logger.debug(
        "Quick estimate %s followers on %s: tier=%s base=%s",
        input.follower_count, input.platform, tier_info.tier, base_rate,
    )

    return QuickEstimateResult(
        tier=tier_info.tier,
        tier_name=tier_info.tier_name,
        base_rate=base_rate,
        min_rate=min_rate,
        max_rate=max_rate,
        percentile=calculate_percentile(input.follower_count, tier_info.tier),
        top_performer_range=get_top_performer_range(tier_info.tier),
        potential_with_full_profile=calculate_potential_rate(base_rate, max_rate),
        missing_factors=get_missing_factors(),
        factors=get_relevant_factors(tier_info.tier, input.content_format),
        platform=input.platform,
        content_format=input.content_format,
        niche=niche,
    )
