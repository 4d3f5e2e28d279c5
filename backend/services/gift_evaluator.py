"""
Gift offer evaluation.

Compares what the creator gives (time plus audience reach, scaled by the
content asked for) against what the brand offers (product value discounted by
how credible the brand is), then layers strategic value on top to pick one of
five response strategies.
"""
import logging

from data.gifts import (
    ESTIMATED_CPM, ENGAGEMENT_VALUE_MULTIPLIER, CONTENT_EFFORT_MULTIPLIERS, CONTENT_TYPE_DISPLAY,
    CREDIBILITY_FACTORS, BRAND_QUALITY_STRATEGIC_POINTS, LARGE_BRAND_FOLLOWING,
    INDIE_CONVERSION_FOLLOWING, RECOMMENDATION_BANDS, WALK_AWAY_POINTS,
)
from data.tiers import TIERS
from schemas.creator import CreatorProfile
from schemas.gift import (
    GiftEvaluationInput, GiftEvaluation, GiftAnalysisBreakdown, GiftStrategicValue,
    GiftAcceptanceBoundaries,
)
from services.numbers import round_half_up, clamp
from services.tiers import resolve_profile_reach, resolve_profile_tier
from services.validation import validate_gift_input

logger = logging.getLogger(__name__)


def get_hourly_rate(tier: str) -> int:
    return TIERS.get(tier, TIERS["micro"])["hourly_rate"]


def calculate_time_value(hours: float, tier: str) -> int:
    return round_half_up(hours * get_hourly_rate(tier))


def calculate_audience_value(followers: int, engagement_rate: float) -> int:
    """(followers x engagement% x 0.001) at a $5 CPM."""
    reach_value = followers * (engagement_rate / 100) * ENGAGEMENT_VALUE_MULTIPLIER * ESTIMATED_CPM
    return round_half_up(reach_value)


def calculate_effective_hourly_rate(product_value: float, hours: float) -> int:
    if hours <= 0:
        return 0
    return round_half_up(product_value / hours)


def calculate_strategic_score(gift: GiftEvaluationInput) -> tuple:
    """Strategic score 0-10 and the reasons behind it."""
    score = 0
    reasons = []

    brand_points = BRAND_QUALITY_STRATEGIC_POINTS[gift.brand_quality]
    score += brand_points
    if brand_points > 0:
        if gift.brand_quality == "major_brand":
            reasons.append("Major brand adds portfolio credibility")
        else:
            reasons.append("Established indie brand is trustworthy")
    elif brand_points < 0:
        reasons.append("Suspicious brand signals detected - proceed with caution")

    if gift.would_you_buy_it:
        score += 2
        reasons.append("Product you'd genuinely use adds authenticity")

    if gift.previous_creator_collabs:
        score += 2
        reasons.append("Brand has creator collab history (higher conversion potential)")

    if gift.has_website:
        score += 1
        reasons.append("Legitimate website confirms brand credibility")

    if gift.brand_followers is not None and gift.brand_followers >= LARGE_BRAND_FOLLOWING:
        score += 1
        reasons.append("Large brand following suggests marketing budget")

    return clamp(score, 0, 10), reasons


def get_conversion_potential(gift: GiftEvaluationInput) -> str:
    if gift.brand_quality == "major_brand" and gift.has_website and gift.previous_creator_collabs:
        return "high"
    if (
        gift.brand_quality == "established_indie"
        and gift.has_website
        and (gift.previous_creator_collabs or (gift.brand_followers or 0) >= INDIE_CONVERSION_FOLLOWING)
    ):
        return "high"
    if gift.brand_quality == "suspicious" or (gift.brand_quality == "new_unknown" and not gift.has_website):
        return "low"
    return "medium"


def is_portfolio_worthy(gift: GiftEvaluationInput) -> bool:
    if gift.brand_quality == "major_brand":
        return True
    return gift.brand_quality == "established_indie" and gift.has_website and gift.previous_creator_collabs


def has_brand_reputation_boost(gift: GiftEvaluationInput) -> bool:
    return gift.brand_quality == "major_brand"


def get_recommendation(worth_score: int) -> str:
    for floor, recommendation in RECOMMENDATION_BANDS:
        if worth_score >= floor:
            return recommendation
    return "decline"


def get_response_type(worth_score: int, strategic_score: int, minimum_add_on: int = None) -> str:
    """
    Pick the reply template for a gift.

    A hybrid counter asks for cash on top of the product, so a gift that already
    covers the effort (add-on of 0) is accepted with a hook instead.
    """
    if worth_score < 30:
        return "run_away"
    if worth_score < 50:
        return "decline_politely"
    if worth_score >= 70 and strategic_score >= 7:
        return "accept_with_hook"
    if strategic_score < 5:
        return "ask_budget_first"
    if minimum_add_on == 0:
        return "accept_with_hook"
    return "counter_hybrid"


def get_acceptance_boundaries(gift: GiftEvaluationInput, value_gap_percentage: float) -> GiftAcceptanceBoundaries:
    """Limit what a gift-only deal gets, based on how far the gift falls short."""
    content_required = gift.content_required

    if value_gap_percentage > 50:
        max_content_type = "Organic story mention only (not a feed post)"
    elif value_gap_percentage > 25:
        if content_required == "video_content":
            max_content_type = "One short-form video (under 30 seconds)"
        else:
            max_content_type = "One story OR one feed post (not both)"
    else:
        max_content_type = f"{CONTENT_TYPE_DISPLAY[content_required]} as requested"

    if content_required == "organic_mention" or value_gap_percentage > 25:
        time_limit = "24-hour story only, not a permanent feed post"
    else:
        time_limit = "Standard post duration (can archive after 30 days if desired)"

    return GiftAcceptanceBoundaries(
        max_content_type=max_content_type,
        time_limit=time_limit,
        rights_limit="No usage rights beyond your own post. Brand cannot repost or use in ads.",
    )


def get_walk_away_point(response_type: str) -> str:
    return WALK_AWAY_POINTS[response_type]


def generate_counter_offer(gift: GiftEvaluationInput, minimum_add_on: int, tier: str) -> str:
    if minimum_add_on <= 0:
        return "No counter needed - this gift is fair value for the content requested."

    full_rate = calculate_time_value(gift.estimated_hours_to_create, tier)
    content_display = CONTENT_TYPE_DISPLAY[gift.content_required]
    return (
        f"I'd love to work together! For a {content_display}, I typically charge ${full_rate:,}. "
        f"I'd be happy to do a hybrid collaboration:\n\n"
        f"→ Product gifted + ${minimum_add_on:,} = {content_display} with my authentic review\n\n"
        f"This lets me create the quality content your brand deserves. Would that work?"
    )


def _score_value_gap(value_gap: int, effort_cost: int) -> float:
    if effort_cost <= 0:
        return 25 if value_gap > 0 else 0
    swing = min(25, abs(value_gap) / effort_cost * 50)
    return swing if value_gap >= 0 else -swing


def evaluate_gift_deal(gift: GiftEvaluationInput, profile: CreatorProfile) -> GiftEvaluation:
    """
    Evaluate a gift offer for a creator.

    Raises ValidationError when a required gift field is missing or invalid.
    """
    validate_gift_input(gift)

    tier = resolve_profile_tier(profile)
    hourly_rate = get_hourly_rate(tier)

    # What the creator gives
    time_value = calculate_time_value(gift.estimated_hours_to_create, tier)
    audience_value = calculate_audience_value(resolve_profile_reach(profile), profile.avg_engagement_rate)
    effort_multiplier = CONTENT_EFFORT_MULTIPLIERS[gift.content_required]
    effort_cost = round_half_up((time_value + audience_value) * effort_multiplier)

    # What the brand gives
    product_value = gift.estimated_product_value
    credibility = CREDIBILITY_FACTORS[gift.brand_quality]
    discounted_value = round_half_up(product_value * credibility)

    value_gap = discounted_value - effort_cost
    minimum_add_on = max(0, effort_cost - discounted_value)
    effective_hourly_rate = calculate_effective_hourly_rate(product_value, gift.estimated_hours_to_create)

    strategic_score, reasons = calculate_strategic_score(gift)
    conversion_potential = get_conversion_potential(gift)
    if conversion_potential == "high":
        reasons.append("High potential to convert to paid partnership")
    elif conversion_potential == "low":
        reasons.append("Low likelihood of becoming a paid partnership")

    worth = 50 + _score_value_gap(value_gap, effort_cost)
    worth += strategic_score * 2
    if gift.brand_quality == "suspicious":
        worth -= 30
    elif gift.brand_quality == "major_brand":
        worth += 10
    if effective_hourly_rate >= hourly_rate:
        worth += 10
    elif effective_hourly_rate >= hourly_rate * 0.5:
        worth += 5
    worth_score = clamp(round_half_up(worth), 0, 100)

    recommendation = get_recommendation(worth_score)
    response_type = get_response_type(worth_score, strategic_score, minimum_add_on)

    value_gap_percentage = (effort_cost - discounted_value) / effort_cost * 100 if effort_cost > 0 else 0

    logger.debug(
        "Gift evaluated: effort=%s discounted=%s worth=%s response=%s",
        effort_cost, discounted_value, worth_score, response_type,
    )

    return GiftEvaluation(
        worth_score=worth_score,
        recommendation=recommendation,
        response_type=response_type,
        analysis=GiftAnalysisBreakdown(
            product_value=product_value,
            credibility_factor=credibility,
            discounted_product_value=discounted_value,
            your_time_value=time_value,
            audience_value=audience_value,
            effort_multiplier=effort_multiplier,
            effort_cost=effort_cost,
            value_gap=value_gap,
            effective_hourly_rate=effective_hourly_rate,
        ),
        strategic_value=GiftStrategicValue(
            score=strategic_score,
            portfolio_worth=is_portfolio_worthy(gift),
            conversion_potential=conversion_potential,
            brand_reputation_boost=has_brand_reputation_boost(gift),
            reasons=reasons,
        ),
        minimum_acceptable_add_on=minimum_add_on,
        suggested_counter_offer=generate_counter_offer(gift, minimum_add_on, tier),
        walk_away_point=get_walk_away_point(response_type),
        acceptance_boundaries=get_acceptance_boundaries(gift, value_gap_percentage),
    )
