from pydantic import BaseModel
from typing import Any, Optional


class QuickEstimateRequest(BaseModel):
    """Raw request body. Checked by services.validation before scoring."""
    follower_count: Any = None
    platform: Any = None
    content_format: Any = None
    niche: Optional[str] = None


class QuickEstimateInput(BaseModel):
    follower_count: int
    platform: str
    content_format: str
    niche: str = "lifestyle"


class RateRange(BaseModel):
    min: int
    max: int


class MissingFactor(BaseModel):
    icon: str
    name: str
    description: str
    impact: str


class RateInfluencer(BaseModel):
    name: str
    description: str
    potential_increase: str


class QuickEstimateResult(BaseModel):
    tier: str
    tier_name: str
    base_rate: int
    min_rate: int
    max_rate: int
    percentile: int
    top_performer_range: RateRange
    potential_with_full_profile: int
    missing_factors: list[MissingFactor]
    factors: list[RateInfluencer] = []
    platform: str
    content_format: str
    niche: str
