from datetime import datetime
from pydantic import BaseModel
from typing import Optional


class BrandVettingInput(BaseModel):
    brand_name: str = ""
    brand_handle: Optional[str] = None
    brand_website: Optional[str] = None
    brand_email: Optional[str] = None
    platform: str = ""


class SocialSignals(BaseModel):
    followers: Optional[int] = None
    account_age_years: Optional[float] = None
    posting_frequency: Optional[str] = None  # "active", "moderate", "inactive", "unknown"
    is_verified: Optional[bool] = None
    real_engagement: Optional[bool] = None


class WebsiteSignals(BaseModel):
    has_website: bool = True
    domain_quality: Optional[str] = None  # "premium", "standard", "free_hosting", "suspicious", "unknown"
    reachable: Optional[bool] = None
    is_https: Optional[bool] = None
    has_contact_page: Optional[bool] = None
    has_about_page: Optional[bool] = None
    professional_design: Optional[bool] = None


class CollaborationSignals(BaseModel):
    known_collabs: Optional[int] = None
    has_ambassador_program: Optional[bool] = None
    creator_testimonials: Optional[bool] = None
    reposts_creators: Optional[bool] = None
    is_major_brand: bool = False


class BrandSignals(BaseModel):
    """Raw signals gathered outside the scorer. A missing group means the lookup found nothing."""
    social: Optional[SocialSignals] = None
    website: Optional[WebsiteSignals] = None
    collaborations: Optional[CollaborationSignals] = None
    scam_indicators: Optional[list[str]] = None
    data_sources: list[str] = []


class CategoryScore(BaseModel):
    score: int
    confidence: str  # "high", "medium", "low"
    details: list[str]


class BrandVettingBreakdown(BaseModel):
    social_presence: CategoryScore
    website_verification: CategoryScore
    collaboration_history: CategoryScore
    scam_indicators: CategoryScore


class BrandFinding(BaseModel):
    category: str  # "social", "website", "collabs", "scam_check"
    finding: str
    evidence: Optional[str] = None
    sentiment: str  # "positive", "neutral", "negative"


class BrandRedFlag(BaseModel):
    severity: str
    flag: str
    explanation: str
    source: Optional[str] = None


class BrandVettingResult(BaseModel):
    trust_score: int
    trust_level: str
    breakdown: BrandVettingBreakdown
    findings: list[BrandFinding] = []
    red_flags: list[BrandRedFlag] = []
    recommendations: list[str] = []
    checked_at: datetime
    data_sources: list[str] = []
    cached: bool = False


class VetBrandRequest(BrandVettingInput):
    signals: Optional[BrandSignals] = None
