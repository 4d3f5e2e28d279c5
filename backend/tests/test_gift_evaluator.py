import pytest

from schemas.creator import CreatorProfile, PlatformMetrics
from schemas.gift import GiftEvaluationInput, GiftResponseContext
from services.errors import ValidationError
from services.gift_evaluator import (
    evaluate_gift_deal, calculate_audience_value, get_response_type, get_recommendation,
)
from services.gift_responses import (
    generate_gift_response, generate_response_by_type, get_response_type_description,
    get_conversion_playbook_script,
)


def make_gift(**overrides):
    fields = dict(
        product_description="Vitamin C serum, full size",
        estimated_product_value=500,
        estimated_hours_to_create=2,
        content_required="dedicated_post",
        brand_quality="major_brand",
        would_you_buy_it=True,
        previous_creator_collabs=True,
        has_website=True,
        brand_followers=200_000,
        brand_name="Glow Skincare",
    )
    fields.update(overrides)
    return GiftEvaluationInput(**fields)


LOWBALL = dict(
    estimated_product_value=50,
    estimated_hours_to_create=5,
    content_required="video_content",
    brand_quality="new_unknown",
    would_you_buy_it=False,
    previous_creator_collabs=False,
    has_website=False,
    brand_followers=None,
)


class TestGiftEvaluation:
    def test_generous_major_brand_gift(self, micro_profile):
        result = evaluate_gift_deal(make_gift(), micro_profile)

        assert result.analysis.your_time_value == 100
        assert result.analysis.audience_value == 5
        assert result.analysis.effort_cost == 105
        assert result.analysis.discounted_product_value == 500
        assert result.minimum_acceptable_add_on == 0
        assert result.strategic_value.score == 9
        assert result.strategic_value.conversion_potential == "high"
        assert result.strategic_value.portfolio_worth
        assert result.worth_score == 100
        assert result.recommendation == "accept"
        assert result.response_type == "accept_with_hook"
        assert result.suggested_counter_offer.startswith("No counter needed")

    def test_lowball_gift(self, micro_profile):
        result = evaluate_gift_deal(make_gift(**LOWBALL), micro_profile)

        assert result.analysis.effort_cost == 383
        assert result.analysis.discounted_product_value == 35
        assert result.analysis.value_gap == -348
        assert result.minimum_acceptable_add_on == 348
        assert result.strategic_value.conversion_potential == "low"
        assert result.worth_score == 25
        assert result.recommendation == "decline"
        assert result.response_type == "run_away"
        assert "$348" in result.suggested_counter_offer
        assert result.acceptance_boundaries.max_content_type == "Organic story mention only (not a feed post)"

    def test_suspicious_brand_discounts_product(self, micro_profile):
        result = evaluate_gift_deal(make_gift(brand_quality="suspicious", estimated_product_value=100), micro_profile)
        assert result.analysis.discounted_product_value == 25
        assert "Suspicious brand signals detected - proceed with caution" in result.strategic_value.reasons

    @pytest.mark.parametrize("overrides", [
        {},
        LOWBALL,
        {"brand_quality": "suspicious"},
        {"content_required": "multiple_posts", "estimated_product_value": 0},
        {"content_required": "organic_mention", "estimated_hours_to_create": 0.5},
    ])
    def test_add_on_never_negative(self, micro_profile, overrides):
        result = evaluate_gift_deal(make_gift(**overrides), micro_profile)
        analysis = result.analysis
        assert result.minimum_acceptable_add_on >= 0
        if analysis.discounted_product_value >= analysis.effort_cost:
            assert result.minimum_acceptable_add_on == 0
        assert 0 <= result.worth_score <= 100

    def test_evaluation_is_deterministic(self, micro_profile):
        assert evaluate_gift_deal(make_gift(), micro_profile) == evaluate_gift_deal(make_gift(), micro_profile)

    def test_audience_value(self):
        assert calculate_audience_value(100_000, 5.0) == 25

    @pytest.mark.parametrize("worth,strategic,expected", [
        (20, 9, "run_away"),
        (45, 9, "decline_politely"),
        (60, 6, "counter_hybrid"),
        (60, 4, "ask_budget_first"),
        (80, 7, "accept_with_hook"),
        (80, 5, "counter_hybrid"),
        (80, 2, "ask_budget_first"),
    ])
    def test_response_type_rules(self, worth, strategic, expected):
        assert get_response_type(worth, strategic) == expected

    @pytest.mark.parametrize("worth,strategic,add_on,expected", [
        (60, 6, 0, "accept_with_hook"),
        (80, 5, 0, "accept_with_hook"),
        (60, 6, 120, "counter_hybrid"),
        (60, 4, 0, "ask_budget_first"),
        (40, 9, 0, "decline_politely"),
    ])
    def test_no_hybrid_counter_without_add_on(self, worth, strategic, add_on, expected):
        assert get_response_type(worth, strategic, add_on) == expected

    def test_fair_indie_gift_is_accepted_not_countered(self, micro_profile):
        gift = make_gift(brand_quality="established_indie", previous_creator_collabs=False, brand_followers=None)
        result = evaluate_gift_deal(gift, micro_profile)

        assert result.worth_score == 95
        assert result.recommendation == "accept"
        assert result.minimum_acceptable_add_on == 0
        assert result.response_type == "accept_with_hook"

    def test_audience_value_from_platform_followers(self):
        profile = CreatorProfile(
            instagram=PlatformMetrics(followers=200_000, engagement_rate=5.0),
            avg_engagement_rate=5.0,
        )
        result = evaluate_gift_deal(make_gift(), profile)

        assert result.analysis.audience_value == 50
        assert result.analysis.your_time_value == 200
        assert result.analysis.effort_cost == 250

    def test_recommendation_bands(self):
        assert get_recommendation(70) == "accept"
        assert get_recommendation(69) == "negotiate"
        assert get_recommendation(50) == "negotiate"
        assert get_recommendation(49) == "decline"


class TestGiftValidation:
    @pytest.mark.parametrize("overrides", [
        {"product_description": "   "},
        {"estimated_product_value": -1},
        {"estimated_product_value": "free"},
        {"estimated_hours_to_create": 0},
        {"content_required": "billboard"},
        {"brand_quality": "famous"},
    ])
    def test_invalid_fields_rejected(self, micro_profile, overrides):
        with pytest.raises(ValidationError, match="required"):
            evaluate_gift_deal(make_gift(**overrides), micro_profile)


class TestGiftResponses:
    def test_hybrid_rate_defaults_to_add_on(self, micro_profile):
        evaluation = evaluate_gift_deal(make_gift(**LOWBALL), micro_profile)
        evaluation = evaluation.model_copy(update={"response_type": "counter_hybrid"})
        reply = generate_gift_response(evaluation, GiftResponseContext(brand_name="Glow"))
        assert reply.response_type == "counter_hybrid"
        assert "Product gifted + $348" in reply.message
        assert reply.message.startswith("Hi Glow!")

    def test_zero_add_on_is_quoted_not_replaced(self, micro_profile):
        gift = make_gift(brand_quality="established_indie", previous_creator_collabs=False, brand_followers=None)
        evaluation = evaluate_gift_deal(gift, micro_profile).model_copy(update={"response_type": "counter_hybrid"})
        reply = generate_gift_response(evaluation, GiftResponseContext(brand_name="Glow"))
        assert "Product gifted + $0 " in reply.message
        assert "$250" not in reply.message

    def test_zero_creator_rate_is_kept(self):
        reply = generate_response_by_type("counter_hybrid", GiftResponseContext(creator_rate=0))
        assert "my rate is typically $0." in reply.message
        assert "Product gifted + $0 " in reply.message

    def test_explicit_rates_in_counter(self):
        reply = generate_response_by_type(
            "counter_hybrid", GiftResponseContext(brand_name="Glow", creator_rate=400, hybrid_rate=150),
        )
        assert "$400" in reply.message
        assert "$150" in reply.message
        assert "$720" in reply.conversion_script

    def test_accept_with_hook_has_follow_up(self):
        reply = generate_response_by_type("accept_with_hook", GiftResponseContext())
        assert reply.message.startswith("Hi there!")
        assert reply.follow_up_reminder
        assert reply.conversion_script

    def test_unknown_type_asks_budget(self):
        assert generate_response_by_type("ghost", GiftResponseContext()).response_type == "ask_budget_first"

    def test_response_type_description(self):
        assert get_response_type_description("counter_hybrid")["title"] == "Counter with Hybrid Offer"

    def test_playbook_script_mentions_brand(self):
        script = get_conversion_playbook_script("follow_up", GiftResponseContext(brand_name="Glow"))
        assert "Glow" in script
