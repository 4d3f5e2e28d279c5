from pydantic import BaseModel

from data.platforms import PLATFORMS, DEFAULT_PLATFORM_MULTIPLIER, normalize_platform


class TierInfo(BaseModel):
    tier: str
    tier_name: str
    tier_base_rate: int

    def base_rate(self, platform: str = None) -> float:
        """Tier base rate scaled by the platform multiplier (unknown platforms use 1.0)."""
        entry = PLATFORMS.get(normalize_platform(platform))
        multiplier = entry["multiplier"] if entry else DEFAULT_PLATFORM_MULTIPLIER
        return self.tier_base_rate * multiplier
