import pytest

from data.platforms import PLATFORMS, CONTENT_FORMATS
from schemas.quick_estimate import QuickEstimateInput, QuickEstimateRequest
from services.errors import ValidationError
from services.quick_estimate import calculate_quick_estimate, calculate_percentile
from services.validation import validate_quick_estimate_input


def estimate(followers, platform="instagram", content_format="static", niche="lifestyle"):
    return calculate_quick_estimate(QuickEstimateInput(
        follower_count=followers, platform=platform, content_format=content_format, niche=niche,
    ))


class TestQuickEstimate:
    def test_micro_instagram_static(self):
        result = estimate(25_000)
        assert result.tier == "micro"
        assert result.tier_name == "Micro"
        assert result.base_rate == 400
        assert result.min_rate == 320
        assert result.max_rate == 480

    def test_youtube_platform_multiplier(self):
        assert estimate(25_000, platform="youtube").base_rate == 560

    def test_percentile_is_position_in_band(self):
        assert estimate(25_000).percentile == 38
        assert calculate_percentile(10_000, "micro") == 0
        assert calculate_percentile(49_999, "micro") == 99

    def test_celebrity_percentile_capped(self):
        assert calculate_percentile(10_000_000, "celebrity") == 99

    def test_top_performer_range(self):
        top = estimate(25_000).top_performer_range
        assert (top.min, top.max) == (550, 750)

    def test_potential_with_full_profile(self):
        assert estimate(25_000).potential_with_full_profile == 1248

    def test_missing_factors_fixed_set(self):
        names = [f.name for f in estimate(25_000).missing_factors]
        assert len(names) == 4
        assert "Usage Rights" in names

    def test_relevant_factors_capped_at_four(self):
        names = [f.name for f in estimate(25_000, content_format="video").factors]
        assert names == ["High Engagement", "Usage Rights", "Exclusivity", "Whitelisting"]

    def test_nano_creators_skip_exclusivity(self):
        names = [f.name for f in estimate(5_000).factors]
        assert "Exclusivity" not in names
        assert "Q4 Holiday Season" in names

    def test_finance_niche_premium(self):
        assert estimate(25_000, niche="finance").base_rate == 800

    @pytest.mark.parametrize("platform", list(PLATFORMS))
    @pytest.mark.parametrize("content_format", list(CONTENT_FORMATS))
    def test_range_brackets_base_rate(self, platform, content_format):
        result = estimate(120_000, platform=platform, content_format=content_format)
        assert result.min_rate <= result.base_rate <= result.max_rate
        assert result.base_rate % 5 == 0

    def test_estimate_is_deterministic(self):
        assert estimate(75_000, "tiktok", "reel") == estimate(75_000, "tiktok", "reel")


class TestQuickEstimateValidation:
    def test_valid_request_defaults_niche(self):
        parsed = validate_quick_estimate_input(QuickEstimateRequest(
            follower_count=25_000, platform="instagram", content_format="static",
        ))
        assert parsed.niche == "lifestyle"

    @pytest.mark.parametrize("followers,message", [
        (999, "Minimum follower count is 1,000"),
        (10_000_001, "custom consultation"),
        ("lots", "must be a number"),
    ])
    def test_follower_bounds(self, followers, message):
        with pytest.raises(ValidationError, match=message):
            validate_quick_estimate_input(QuickEstimateRequest(
                follower_count=followers, platform="instagram", content_format="static",
            ))

    def test_collects_every_problem(self):
        with pytest.raises(ValidationError) as exc:
            validate_quick_estimate_input(QuickEstimateRequest(
                follower_count=500, platform="myspace", content_format="hologram",
            ))
        message = str(exc.value)
        assert "Minimum follower count" in message
        assert "Invalid platform" in message
        assert "Invalid content format" in message
        assert exc.value.field == "follower_count"
