from pydantic import BaseModel
from typing import Any, Optional

from schemas.creator import CreatorProfile


class GiftEvaluationInput(BaseModel):
    product_description: Any = None
    estimated_product_value: Any = None
    estimated_hours_to_create: Any = None
    content_required: Any = None  # organic_mention, dedicated_post, multiple_posts, video_content
    brand_quality: Any = None  # major_brand, established_indie, new_unknown, suspicious
    would_you_buy_it: bool = False
    previous_creator_collabs: bool = False
    has_website: bool = False
    brand_followers: Optional[int] = None
    brand_name: Optional[str] = None


class GiftAnalysisBreakdown(BaseModel):
    product_value: float
    credibility_factor: float
    discounted_product_value: int
    your_time_value: int
    audience_value: int
    effort_multiplier: float
    effort_cost: int
    value_gap: int  # discounted product value minus effort cost
    effective_hourly_rate: int


class GiftStrategicValue(BaseModel):
    score: int
    portfolio_worth: bool
    conversion_potential: str  # "high", "medium", "low"
    brand_reputation_boost: bool
    reasons: list[str]


class GiftAcceptanceBoundaries(BaseModel):
    max_content_type: str
    time_limit: str
    rights_limit: str


class GiftEvaluation(BaseModel):
    worth_score: int
    recommendation: str  # "accept", "negotiate", "decline"
    response_type: str
    analysis: GiftAnalysisBreakdown
    strategic_value: GiftStrategicValue
    minimum_acceptable_add_on: int
    suggested_counter_offer: str
    walk_away_point: str
    acceptance_boundaries: GiftAcceptanceBoundaries


class GiftResponseContext(BaseModel):
    brand_name: Optional[str] = None
    product_name: Optional[str] = None
    creator_rate: Optional[int] = None
    hybrid_rate: Optional[int] = None
    content_type: Optional[str] = None


class GiftResponse(BaseModel):
    response_type: str
    message: str
    follow_up_reminder: Optional[str] = None
    conversion_script: Optional[str] = None


class EvaluateGiftRequest(BaseModel):
    gift: GiftEvaluationInput
    profile: CreatorProfile
    context: Optional[GiftResponseContext] = None
    save: bool = False
