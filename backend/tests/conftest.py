import pytest

from schemas.brief import ParsedBrief, BriefBrand, BriefContent, BriefUsageRights
from schemas.creator import CreatorProfile, PlatformMetrics
from services.cache import brand_vet_cache
from services.rate_limiter import quick_estimate_limiter


@pytest.fixture
def micro_profile():
    """25K-follower lifestyle creator with 4% engagement."""
    return CreatorProfile(
        display_name="Maya Chen",
        handle="@mayamakes",
        niches=["lifestyle"],
        instagram=PlatformMetrics(followers=25_000, engagement_rate=4.0),
        tier="micro",
        total_reach=25_000,
        avg_engagement_rate=4.0,
    )


@pytest.fixture
def reel_brief():
    return ParsedBrief(
        brand=BriefBrand(name="Glow Skincare", industry="fashion", product="Vitamin C serum"),
        content=BriefContent(platform="instagram", format="reel", quantity=2),
        usage_rights=BriefUsageRights(duration_days=30, exclusivity="none"),
    )


@pytest.fixture
def brief_factory(reel_brief):
    def make(**updates):
        usage = updates.pop("usage_rights", None)
        brief = reel_brief.model_copy(update=updates, deep=True)
        if usage:
            brief.usage_rights = brief.usage_rights.model_copy(update=usage)
        return brief
    return make


@pytest.fixture(autouse=True)
def reset_shared_state():
    quick_estimate_limiter.reset()
    brand_vet_cache.clear()
    yield
    quick_estimate_limiter.reset()
    brand_vet_cache.clear()
