import logging
import math

from data.tiers import TIER_BREAKPOINTS, TIERS
from schemas.creator import CreatorProfile
from schemas.tier import TierInfo
from services.errors import ValidationError

logger = logging.getLogger(__name__)


def calculate_tier(followers) -> str:
    """Map a follower count to its tier. Total: anything below the first breakpoint is nano."""
    for lower_bound, tier in TIER_BREAKPOINTS:
        if followers >= lower_bound:
            return tier
    return "nano"


def classify_tier(follower_count) -> TierInfo:
    if isinstance(follower_count, bool) or not isinstance(follower_count, (int, float)):
        raise ValidationError("Follower count must be a number", field="follower_count")
    if not math.isfinite(follower_count) or follower_count <= 0:
        raise ValidationError("Follower count must be a positive number", field="follower_count")

    tier = calculate_tier(follower_count)
    entry = TIERS[tier]
    return TierInfo(tier=tier, tier_name=entry["name"], tier_base_rate=entry["base_rate"])


def get_tier_display_name(tier: str) -> str:
    entry = TIERS.get(tier)
    return entry["name"] if entry else tier


def get_tier_band(tier: str) -> tuple:
    """(lower, upper) follower bounds of a tier; upper is None for the open top band."""
    bounds = sorted(TIER_BREAKPOINTS)
    for index, (lower, name) in enumerate(bounds):
        if name == tier:
            upper = bounds[index + 1][0] if index + 1 < len(bounds) else None
            return lower, upper
    raise KeyError(tier)


def resolve_profile_reach(profile: CreatorProfile) -> int:
    """Total reach if set, otherwise the sum of per-platform followers."""
    if profile.total_reach > 0:
        return profile.total_reach
    return sum(
        metrics.followers
        for metrics in (profile.instagram, profile.tiktok, profile.youtube, profile.twitter)
        if metrics is not None
    )


def resolve_profile_tier(profile: CreatorProfile) -> str:
    """Stored tier if the profile has one, otherwise derived from reach."""
    if profile.tier in TIERS:
        return profile.tier
    reach = resolve_profile_reach(profile)
    tier = calculate_tier(reach)
    logger.debug("Derived tier %s from reach %s", tier, reach)
    return tier
