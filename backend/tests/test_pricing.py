from datetime import date

import pytest

from schemas.brief import (
    AffiliateConfig, PerformanceConfig, RetainerConfig, MonthlyDeliverables, AmbassadorPerks,
)
from schemas.deal_quality import DealQualityInput
from services.deal_quality import calculate_deal_quality, deal_quality_to_fit_score
from services.errors import ValidationError
from services.pricing import (
    calculate_price, apply_price_override, calculate_affiliate_earnings, calculate_hybrid_price,
    calculate_retainer_price, describe_usage_rights,
)

EXCELLENT_DEAL = DealQualityInput(
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


@pytest.fixture
def fair_quality(micro_profile, reel_brief):
    return calculate_deal_quality(micro_profile, reel_brief)


class TestSponsoredPricing:
    def test_layer_chain(self, micro_profile, reel_brief, fair_quality):
        result = calculate_price(micro_profile, reel_brief, fair_quality)

        assert [layer.name for layer in result.layers] == [
            "Base Rate", "Engagement Multiplier", "Format Premium", "Fit Score", "Usage Rights", "Complexity",
        ]
        assert result.price_per_deliverable == 935
        assert result.quantity == 2
        assert result.total_price == 1870
        assert result.currency == "USD"
        assert result.currency_symbol == "$"
        assert result.valid_days == 14
        assert result.pricing_model == "flat_fee"

    def test_layer_amounts(self, micro_profile, reel_brief, fair_quality):
        layers = {layer.name: layer for layer in calculate_price(micro_profile, reel_brief, fair_quality).layers}
        assert layers["Base Rate"].amount == pytest.approx(400)
        assert layers["Engagement Multiplier"].multiplier == pytest.approx(1.3)
        assert layers["Engagement Multiplier"].amount == pytest.approx(120)
        assert layers["Format Premium"].adjustment == pytest.approx(0.25)
        assert layers["Fit Score"].adjustment == 0
        assert layers["Usage Rights"].description == "30-day usage rights"

    def test_excellent_deal_raises_fit_layer(self, micro_profile, reel_brief):
        quality = calculate_deal_quality(micro_profile, reel_brief, EXCELLENT_DEAL)
        result = calculate_price(micro_profile, reel_brief, quality)
        fit = next(layer for layer in result.layers if layer.name == "Fit Score")
        assert fit.adjustment == pytest.approx(0.25)
        assert result.price_per_deliverable == 1170

    def test_legacy_fit_score_prices_the_same(self, micro_profile, reel_brief):
        quality = calculate_deal_quality(micro_profile, reel_brief, EXCELLENT_DEAL)
        via_quality = calculate_price(micro_profile, reel_brief, quality)
        via_fit = calculate_price(micro_profile, reel_brief, deal_quality_to_fit_score(quality))
        assert via_fit.total_price == via_quality.total_price

    def test_market_layers_only_when_not_neutral(self, micro_profile, reel_brief, fair_quality):
        profile = micro_profile.model_copy(update={"region": "india", "niches": ["finance"]})
        names = [layer.name for layer in calculate_price(profile, reel_brief, fair_quality).layers]
        assert names[:4] == ["Base Rate", "Regional", "Engagement Multiplier", "Niche Premium"]

    def test_whitelisting_layer_sits_between_rights_and_complexity(
        self, micro_profile, brief_factory, fair_quality,
    ):
        brief = brief_factory(usage_rights={"whitelisting_type": "paid_social"})
        result = calculate_price(micro_profile, brief, fair_quality)
        names = [layer.name for layer in result.layers]
        assert names[-3:] == ["Usage Rights", "Whitelisting", "Complexity"]
        assert result.price_per_deliverable == 1870

    def test_seasonal_layer_needs_campaign_date(self, micro_profile, brief_factory, fair_quality):
        q4 = calculate_price(micro_profile, brief_factory(campaign_date=date(2026, 11, 20)), fair_quality)
        assert q4.layers[-1].name == "Seasonal"
        assert q4.price_per_deliverable == 1170

        disabled = brief_factory(campaign_date=date(2026, 11, 20), disable_seasonal_pricing=True)
        assert calculate_price(micro_profile, disabled, fair_quality).price_per_deliverable == 935

    def test_unknown_currency_falls_back_to_usd(self, micro_profile, reel_brief, fair_quality):
        profile = micro_profile.model_copy(update={"currency": "XYZ"})
        assert calculate_price(profile, reel_brief, fair_quality).currency == "USD"

    def test_gbp_symbol(self, micro_profile, reel_brief, fair_quality):
        profile = micro_profile.model_copy(update={"currency": "GBP"})
        result = calculate_price(profile, reel_brief, fair_quality)
        assert result.currency_symbol == "£"
        assert result.formula.startswith("(£400")

    def test_usage_rights_descriptions(self):
        assert describe_usage_rights(0, "none") == "Content only, no paid usage"
        assert describe_usage_rights(400, "full") == "Perpetual usage rights, full exclusivity"


class TestAlternativeModels:
    def test_ugc_ignores_audience(self, micro_profile, brief_factory, fair_quality):
        brief = brief_factory(deal_type="ugc", ugc_format="video")
        result = calculate_price(micro_profile, brief, fair_quality)
        assert result.layers[0].name == "UGC Base Rate"
        # 175 x 1.25 usage x 1.15 standard complexity
        assert result.price_per_deliverable == 250

    def test_affiliate_requires_config(self, micro_profile, brief_factory, fair_quality):
        with pytest.raises(ValidationError, match="Affiliate configuration required"):
            calculate_price(micro_profile, brief_factory(pricing_model="affiliate"), fair_quality)

    def test_affiliate_earnings(self):
        earnings = calculate_affiliate_earnings(AffiliateConfig(
            affiliate_rate=10, estimated_sales=50, average_order_value=60,
        ))
        assert earnings.estimated_earnings == 300

    def test_hybrid_takes_half_base(self):
        hybrid = calculate_hybrid_price(1870, AffiliateConfig(
            affiliate_rate=10, estimated_sales=50, average_order_value=60,
        ))
        assert hybrid.base_fee == 935
        assert hybrid.combined_estimate == 1235

    def test_hybrid_wraps_sponsored_quote(self, micro_profile, brief_factory, fair_quality):
        brief = brief_factory(
            pricing_model="hybrid",
            affiliate_config=AffiliateConfig(affiliate_rate=10, estimated_sales=50, average_order_value=60),
        )
        result = calculate_price(micro_profile, brief, fair_quality)
        assert result.pricing_model == "hybrid"
        assert result.total_price == 1235
        assert [layer.name for layer in result.layers][-2:] == ["Hybrid Discount", "Affiliate Commission"]

    def test_performance_bonus(self, micro_profile, brief_factory, fair_quality):
        brief = brief_factory(
            pricing_model="performance",
            performance_config=PerformanceConfig(bonus_threshold=10_000, bonus_metric="clicks", bonus_amount=500),
        )
        result = calculate_price(micro_profile, brief, fair_quality)
        assert result.pricing_model == "performance"
        assert result.total_price == 1870
        assert result.performance_breakdown.potential_total == 2370

    def test_retainer_volume_discount(self):
        config = RetainerConfig(
            deal_length="6_month",
            monthly_deliverables=MonthlyDeliverables(posts=2, stories=4),
        )
        breakdown = calculate_retainer_price(1000, config, "micro")
        assert breakdown.contract_months == 6
        assert breakdown.volume_discount == 25
        assert breakdown.monthly_content_value_discounted < breakdown.monthly_content_value_full
        assert breakdown.total_contract_value == breakdown.monthly_rate * 6

    def test_ambassador_events_use_tier_day_rate(self):
        config = RetainerConfig(
            deal_length="12_month",
            monthly_deliverables=MonthlyDeliverables(posts=1),
            ambassador_perks=AmbassadorPerks(events_included=2),
        )
        perks = calculate_retainer_price(1000, config, "micro").ambassador_breakdown
        assert perks.event_day_rate == 750
        assert perks.event_appearances_value == 1500

    def test_retainer_keeps_flat_fee_model(self, micro_profile, brief_factory, fair_quality):
        brief = brief_factory(retainer_config=RetainerConfig(
            deal_length="3_month",
            monthly_deliverables=MonthlyDeliverables(reels=1),
        ))
        result = calculate_price(micro_profile, brief, fair_quality)
        assert result.pricing_model == "flat_fee"
        assert result.quantity == 3
        assert result.retainer_breakdown is not None


class TestOverride:
    def test_override_keeps_original_and_layers(self, micro_profile, reel_brief, fair_quality):
        result = calculate_price(micro_profile, reel_brief, fair_quality)
        overridden = apply_price_override(result, 2000)
        assert overridden.total_price == 2000
        assert overridden.original_total == 1870
        assert overridden.layers == result.layers
        assert result.original_total is None

    def test_second_override_keeps_first_original(self, micro_profile, reel_brief, fair_quality):
        result = apply_price_override(calculate_price(micro_profile, reel_brief, fair_quality), 2000)
        assert apply_price_override(result, 2500).original_total == 1870

    @pytest.mark.parametrize("new_total,stored", [(999.99, 1000), (999.4, 999), (999.5, 1000)])
    def test_fractional_override_rounds_half_up(self, micro_profile, reel_brief, fair_quality, new_total, stored):
        result = calculate_price(micro_profile, reel_brief, fair_quality)
        assert apply_price_override(result, new_total).total_price == stored

    def test_negative_override_rejected(self, micro_profile, reel_brief, fair_quality):
        with pytest.raises(ValidationError):
            apply_price_override(calculate_price(micro_profile, reel_brief, fair_quality), -1)
