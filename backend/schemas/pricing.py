from pydantic import BaseModel
from typing import Optional

from schemas.creator import CreatorProfile
from schemas.brief import ParsedBrief, MonthlyDeliverables
from schemas.deal_quality import DealQualityInput


class PricingLayer(BaseModel):
    name: str
    description: str
    base_value: str
    multiplier: float
    adjustment: float  # signed fractional delta, 0.25 = +25%
    amount: float  # currency delta contributed at this step


class AffiliateEarningsBreakdown(BaseModel):
    commission_rate: float
    estimated_sales: int
    average_order_value: float
    estimated_earnings: int
    category_rate_range: Optional[dict[str, float]] = None


class HybridPricingBreakdown(BaseModel):
    base_fee: int
    full_rate: int
    base_discount: float
    affiliate_earnings: AffiliateEarningsBreakdown
    combined_estimate: int


class PerformanceBonusBreakdown(BaseModel):
    base_fee: int
    bonus_threshold: int
    bonus_metric: str
    bonus_amount: int
    potential_total: int


class DeliverableRates(BaseModel):
    post_rate: int
    story_rate: int
    reel_rate: int
    video_rate: int


class AmbassadorPerksBreakdown(BaseModel):
    exclusivity_premium: int
    exclusivity_type: str
    product_seeding_value: float
    events_included: int
    event_day_rate: float
    event_appearances_value: int
    total_perks_value: int


class RetainerPricingBreakdown(BaseModel):
    deal_length: str
    contract_months: int
    volume_discount: float
    full_rates: DeliverableRates
    discounted_rates: DeliverableRates
    monthly_deliverables: MonthlyDeliverables
    monthly_content_value_full: int
    monthly_content_value_discounted: int
    monthly_savings: int
    monthly_rate: int
    total_contract_value: int
    ambassador_breakdown: Optional[AmbassadorPerksBreakdown] = None


class PricingResult(BaseModel):
    price_per_deliverable: int
    quantity: int
    total_price: int
    currency: str
    currency_symbol: str
    valid_days: int = 14
    layers: list[PricingLayer]
    formula: str = ""
    pricing_model: Optional[str] = None
    original_total: Optional[int] = None  # set when a human overrides total_price
    affiliate_breakdown: Optional[AffiliateEarningsBreakdown] = None
    hybrid_breakdown: Optional[HybridPricingBreakdown] = None
    performance_breakdown: Optional[PerformanceBonusBreakdown] = None
    retainer_breakdown: Optional[RetainerPricingBreakdown] = None


class CalculateInput(BaseModel):
    profile: CreatorProfile
    brief: ParsedBrief
    deal_quality_input: Optional[DealQualityInput] = None


class RateCardInput(BaseModel):
    profile: CreatorProfile
    brief: ParsedBrief
    deal_quality_input: Optional[DealQualityInput] = None
    override_total: Optional[int] = None
