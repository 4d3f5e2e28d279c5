from pydantic import BaseModel
from typing import Optional


class PlatformMetrics(BaseModel):
    followers: int = 0
    engagement_rate: float = 0.0  # percent, 4.2 means 4.2%
    avg_likes: int = 0
    avg_comments: int = 0
    avg_views: int = 0


class GenderSplit(BaseModel):
    male: float = 0
    female: float = 0
    other: float = 0


class AudienceDemographics(BaseModel):
    age_range: Optional[str] = None
    gender_split: Optional[GenderSplit] = None
    top_locations: list[str] = []
    interests: list[str] = []


class CreatorProfile(BaseModel):
    id: Optional[str] = None
    display_name: str = ""
    handle: Optional[str] = None
    location: Optional[str] = None
    region: Optional[str] = None
    niches: list[str] = []
    instagram: Optional[PlatformMetrics] = None
    tiktok: Optional[PlatformMetrics] = None
    youtube: Optional[PlatformMetrics] = None
    twitter: Optional[PlatformMetrics] = None
    audience: Optional[AudienceDemographics] = None
    tier: Optional[str] = None  # derived from total_reach when absent
    total_reach: int = 0
    avg_engagement_rate: float = 0.0
    currency: str = "USD"
