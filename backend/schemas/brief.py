from datetime import date
from pydantic import BaseModel
from typing import Optional


class BriefBrand(BaseModel):
    name: str
    industry: str = ""
    product: str = ""


class BriefCampaign(BaseModel):
    objective: str = ""
    target_audience: str = ""
    budget_range: str = ""


class BriefContent(BaseModel):
    platform: str
    format: str
    quantity: int = 1
    creative_direction: str = ""


class BriefUsageRights(BaseModel):
    duration_days: int = 0  # 0 = content only, over 365 = perpetual
    exclusivity: str = "none"  # "none", "category", "full"
    paid_amplification: bool = False
    whitelisting_type: Optional[str] = None  # "none", "organic", "paid_social", "full_media"


class BriefTimeline(BaseModel):
    deadline: str = ""


class AffiliateConfig(BaseModel):
    affiliate_rate: float
    estimated_sales: int
    average_order_value: float
    category: Optional[str] = None


class PerformanceConfig(BaseModel):
    bonus_threshold: int
    bonus_metric: str  # "clicks", "sales", "conversions", "views"
    bonus_amount: float


class MonthlyDeliverables(BaseModel):
    posts: int = 0
    stories: int = 0
    reels: int = 0
    videos: int = 0


class AmbassadorPerks(BaseModel):
    exclusivity_required: bool = False
    exclusivity_type: str = "none"
    product_seeding: bool = False
    product_value: float = 0
    events_included: int = 0
    event_day_rate: Optional[float] = None


class RetainerConfig(BaseModel):
    deal_length: str  # "one_time", "monthly", "3_month", "6_month", "12_month"
    monthly_deliverables: MonthlyDeliverables
    ambassador_perks: Optional[AmbassadorPerks] = None


class ParsedBrief(BaseModel):
    id: Optional[str] = None
    deal_type: str = "sponsored"  # "sponsored" or "ugc"
    ugc_format: Optional[str] = None  # "video" or "photo"
    pricing_model: Optional[str] = None  # "flat_fee", "affiliate", "hybrid", "performance"
    affiliate_config: Optional[AffiliateConfig] = None
    performance_config: Optional[PerformanceConfig] = None
    retainer_config: Optional[RetainerConfig] = None
    brand: BriefBrand
    campaign: BriefCampaign = BriefCampaign()
    content: BriefContent
    usage_rights: BriefUsageRights = BriefUsageRights()
    timeline: Optional[BriefTimeline] = None
    campaign_date: Optional[date] = None
    disable_seasonal_pricing: bool = False
    raw_text: str = ""
