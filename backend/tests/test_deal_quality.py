import pytest

from schemas.brief import RetainerConfig, MonthlyDeliverables
from schemas.deal_quality import DealQualityInput
from services.deal_quality import (
    calculate_deal_quality, calculate_deal_quality_with_compat, deal_quality_to_fit_score,
    get_quality_level_info, has_niche_match,
)

STRONG_INPUT = DealQualityInput(
    brand_tier="major",
    brand_has_website=True,
    brand_followers=500_000,
    brand_has_creator_history=True,
    payment_terms="upfront",
    mentions_ongoing_partnership=True,
    has_strict_script=False,
    revision_rounds=1,
    approval_process="simple",
    is_category_leader=True,
    offered_rate=600,
)

WEAK_INPUT = DealQualityInput(
    brand_has_website=False,
    brand_followers=500,
    brand_has_creator_history=False,
    payment_terms="net_90",
    has_strict_script=True,
    revision_rounds=5,
    approval_process="complex",
    offered_rate=100,
)


class TestDealQuality:
    def test_defaults_score_fair(self, micro_profile, reel_brief):
        result = calculate_deal_quality(micro_profile, reel_brief)
        b = result.breakdown
        assert b.rate_fairness.score == 21
        assert b.brand_legitimacy.score == 7
        assert b.portfolio_value.score == 15
        assert b.growth_potential.score == 4
        assert b.terms_fairness.score == 7
        assert b.creative_freedom.score == 5
        assert result.total_score == 59
        assert result.quality_level == "fair"
        assert result.recommendation == "negotiate"
        assert result.price_adjustment == 0

    def test_strong_deal(self, micro_profile, reel_brief):
        result = calculate_deal_quality(micro_profile, reel_brief, STRONG_INPUT)
        assert result.total_score == 96
        assert result.quality_level == "excellent"
        assert result.recommendation == "take_deal"
        assert result.red_flags == []
        assert "Major brand opportunity" in result.green_flags
        assert "Fast payment terms" in result.green_flags
        assert result.insights[0].startswith("Excellent deal!")

    def test_weak_deal_flags(self, micro_profile, brief_factory):
        brief = brief_factory(usage_rights={"duration_days": 400, "exclusivity": "full"})
        result = calculate_deal_quality(micro_profile, brief, WEAK_INPUT)
        assert result.total_score == 25
        assert result.quality_level == "caution"
        assert result.price_adjustment == pytest.approx(-0.1)
        assert result.red_flags == [
            "Rate significantly below market value",
            "Unverified or suspicious brand",
            "Payment terms beyond Net-60",
            "Perpetual usage with exclusivity",
            "Unlimited or excessive revision rounds",
            "Full exclusivity restricts all other brand work",
        ]

    def test_components_within_max(self, micro_profile, reel_brief):
        for input in (None, STRONG_INPUT, WEAK_INPUT):
            result = calculate_deal_quality(micro_profile, reel_brief, input)
            for name in ("rate_fairness", "brand_legitimacy", "portfolio_value",
                         "growth_potential", "terms_fairness", "creative_freedom"):
                component = getattr(result.breakdown, name)
                assert 0 <= component.score <= component.max_points

    def test_retainer_adds_growth(self, micro_profile, brief_factory):
        brief = brief_factory(retainer_config=RetainerConfig(
            deal_length="12_month", monthly_deliverables=MonthlyDeliverables(posts=1),
        ))
        result = calculate_deal_quality(micro_profile, brief)
        assert result.breakdown.growth_potential.score == 7
        assert "Long-term partnership commitment" in result.green_flags

    def test_insights_capped(self, micro_profile, reel_brief):
        assert len(calculate_deal_quality(micro_profile, reel_brief, WEAK_INPUT).insights) <= 5

    def test_niche_match_uses_related_niches(self):
        assert has_niche_match(["Skincare"], "beauty")
        assert not has_niche_match(["gaming"], "food")

    @pytest.mark.parametrize("score,level", [(85, "excellent"), (84, "good"), (70, "good"), (69, "fair"),
                                             (50, "fair"), (49, "caution"), (0, "caution")])
    def test_level_boundaries(self, score, level):
        assert get_quality_level_info(score)["level"] == level


class TestFitScoreView:
    def test_fit_view_shares_total_and_adjustment(self, micro_profile, reel_brief):
        compat = calculate_deal_quality_with_compat(micro_profile, reel_brief, STRONG_INPUT)
        assert compat.fit_score.total_score == compat.deal_quality.total_score
        assert compat.fit_score.price_adjustment == compat.deal_quality.price_adjustment
        assert compat.fit_score.fit_level == "perfect"

    def test_fit_components_are_percentages(self, micro_profile, reel_brief):
        fit = deal_quality_to_fit_score(calculate_deal_quality(micro_profile, reel_brief, STRONG_INPUT))
        # rate 25/25 and terms 9/10 averaged
        assert fit.breakdown.niche_match.score == 95
        assert fit.breakdown.niche_match.weight == pytest.approx(0.3)
        assert fit.breakdown.demographic_match.score == 100
        assert fit.breakdown.engagement_quality.score == 80

    def test_weak_deal_maps_to_low_fit(self, micro_profile, reel_brief):
        fit = deal_quality_to_fit_score(calculate_deal_quality(micro_profile, reel_brief, WEAK_INPUT))
        assert fit.fit_level == "low"
