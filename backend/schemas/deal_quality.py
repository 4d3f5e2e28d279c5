from pydantic import BaseModel
from typing import Optional


class DealQualityInput(BaseModel):
    brand_followers: Optional[int] = None
    brand_has_website: Optional[bool] = None
    brand_has_creator_history: Optional[bool] = None
    payment_terms: Optional[str] = None  # "upfront", "net_15", "net_30", "net_60", "net_90", "unknown"
    mentions_ongoing_partnership: Optional[bool] = None
    has_strict_script: Optional[bool] = None
    revision_rounds: Optional[int] = None
    approval_process: Optional[str] = None  # "simple", "moderate", "complex"
    offered_rate: Optional[float] = None
    is_category_leader: Optional[bool] = None
    brand_tier: Optional[str] = None  # "major", "established", "emerging", "unknown"


class DealQualityComponent(BaseModel):
    name: str
    score: int
    max_points: int
    weight: float
    insight: str
    tips: Optional[list[str]] = None


class DealQualityBreakdown(BaseModel):
    rate_fairness: DealQualityComponent
    brand_legitimacy: DealQualityComponent
    portfolio_value: DealQualityComponent
    growth_potential: DealQualityComponent
    terms_fairness: DealQualityComponent
    creative_freedom: DealQualityComponent


class DealQualityResult(BaseModel):
    total_score: int
    quality_level: str
    price_adjustment: float
    recommendation: str
    recommendation_text: str
    breakdown: DealQualityBreakdown
    insights: list[str]
    red_flags: list[str]
    green_flags: list[str]


class FitScoreComponent(BaseModel):
    score: int
    weight: float
    insight: str


class FitScoreBreakdown(BaseModel):
    niche_match: FitScoreComponent
    demographic_match: FitScoreComponent
    platform_match: FitScoreComponent
    engagement_quality: FitScoreComponent
    content_capability: FitScoreComponent


class FitScoreResult(BaseModel):
    """Legacy shape. Only ever produced from a DealQualityResult."""
    total_score: int
    fit_level: str
    price_adjustment: float
    breakdown: FitScoreBreakdown
    insights: list[str]


class DealQualityWithCompat(BaseModel):
    deal_quality: DealQualityResult
    fit_score: FitScoreResult
