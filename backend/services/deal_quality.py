"""
Deal quality scoring: how good a brand opportunity is for the creator.

Six dimensions add up to 100 points. The legacy fit score is a view over the
same result (deal_quality_to_fit_score), never a separate computation.
"""
import logging
from typing import Optional

from data.deal_quality import (
    MAX_POINTS, QUALITY_LEVELS, QUALITY_TO_FIT_LEVEL, RATE_FAIRNESS_BANDS, INDUSTRY_NICHES,
    HIGH_PRESTIGE_INDUSTRIES, PAYMENT_TERM_POINTS, APPROVAL_PROCESS_POINTS,
    RETAINER_GROWTH_POINTS, FIT_SCORE_WEIGHTS,
)
from data.tiers import TIERS
from schemas.brief import ParsedBrief
from schemas.creator import CreatorProfile
from schemas.deal_quality import (
    DealQualityInput, DealQualityComponent, DealQualityBreakdown, DealQualityResult,
    FitScoreComponent, FitScoreBreakdown, FitScoreResult, DealQualityWithCompat,
)
from services.numbers import round_half_up, clamp
from services.tiers import resolve_profile_tier

logger = logging.getLogger(__name__)


def _normalize(value: str) -> str:
    return (value or "").strip().lower()


def _component(key: str, name: str, score: float, insight: str, tips: list) -> DealQualityComponent:
    max_points = MAX_POINTS[key]
    return DealQualityComponent(
        name=name,
        score=clamp(round_half_up(score), 0, max_points),
        max_points=max_points,
        weight=max_points / 100,
        insight=insight,
        tips=tips or None,
    )


def get_quality_level_info(score: int) -> dict:
    for level in QUALITY_LEVELS:
        if score >= level["min_score"]:
            return level
    return QUALITY_LEVELS[-1]


def get_market_rate(tier: str) -> int:
    return TIERS[tier]["base_rate"]


def has_niche_match(creator_niches: list, brand_industry: str) -> bool:
    related = INDUSTRY_NICHES.get(_normalize(brand_industry), [])
    for niche in (_normalize(n) for n in creator_niches):
        if any(r in niche or niche in r for r in related):
            return True
    return False


def score_rate_fairness(tier: str, input: DealQualityInput, calculated_rate: float) -> DealQualityComponent:
    max_points = MAX_POINTS["rate_fairness"]
    effective_rate = input.offered_rate if input.offered_rate is not None else calculated_rate
    ratio = effective_rate / get_market_rate(tier)
    above = round_half_up((ratio - 1) * 100)
    below = round_half_up((1 - ratio) * 100)

    share = next((points for floor, points in RATE_FAIRNESS_BANDS if ratio >= floor), RATE_FAIRNESS_BANDS[-1][1])
    tips = []
    if ratio >= 1.2:
        insight = f"Excellent! This rate is {above}% above market average for {tier} creators."
    elif ratio >= 1.0:
        insight = "Good rate. This is at or slightly above the market average for your tier."
    elif ratio >= 0.8:
        insight = f"Fair rate, but {below}% below market average. Consider negotiating."
        tips += ["Counter with your calculated market rate", "Highlight your engagement rate and audience quality"]
    elif ratio >= 0.6:
        insight = f"Below market rate by {below}%. Significant negotiation needed."
        tips += ["This rate undervalues your work significantly", "Request at least market rate or decline"]
    else:
        insight = f"Warning: This rate is {below}% below market value. Major red flag."
        tips += ["This rate is exploitative - strongly consider declining", "If proceeding, require significant increases"]

    return _component("rate_fairness", "Rate Fairness", max_points * share, insight, tips)


def score_brand_legitimacy(input: DealQualityInput) -> DealQualityComponent:
    score = 0
    factors = []
    tips = []

    if input.brand_tier == "major":
        score += 8
        factors.append("major brand")
    elif input.brand_tier == "established":
        score += 6
        factors.append("established brand")
    elif input.brand_tier == "emerging":
        score += 3
        factors.append("emerging brand")
    else:
        score += 1
        tips.append("Research this brand before committing")

    if input.brand_has_website is True:
        score += 4
        factors.append("has website")
    elif input.brand_has_website is False:
        tips.append("No website - verify brand legitimacy")
    else:
        score += 2

    followers = input.brand_followers
    if followers is None:
        score += 2
    elif followers >= 100_000:
        score += 4
        factors.append(f"{round_half_up(followers / 1000)}K followers")
    elif followers >= 10_000:
        score += 3
        factors.append(f"{round_half_up(followers / 1000)}K followers")
    elif followers >= 1_000:
        score += 2
    else:
        tips.append("Brand has very low social presence")

    if input.brand_has_creator_history is True:
        score += 4
        factors.append("works with creators")
    elif input.brand_has_creator_history is False:
        score += 1
        tips.append("Brand is new to creator partnerships")
    else:
        score += 2

    if score >= 16:
        insight = f"Legitimate brand: {', '.join(factors)}."
    elif score >= 10:
        insight = "Brand appears legitimate. " + (f"Positive signals: {', '.join(factors)}." if factors else "")
    elif score >= 5:
        insight = "Limited brand verification. Research before committing."
    else:
        insight = "Unverified brand. Proceed with significant caution."

    return _component("brand_legitimacy", "Brand Legitimacy", score, insight, tips)


def score_portfolio_value(profile: CreatorProfile, brief: ParsedBrief, input: DealQualityInput) -> DealQualityComponent:
    score = 0
    factors = []
    tips = []
    industry = _normalize(brief.brand.industry)

    if has_niche_match(profile.niches, brief.brand.industry):
        score += 8
        factors.append("niche alignment")
    else:
        score += 2
        tips.append("Consider if this fits your content style")

    if input.brand_tier == "major":
        score += 8
        factors.append("major brand prestige")
    elif input.brand_tier == "established":
        score += 6
        factors.append("established brand")
    elif industry in HIGH_PRESTIGE_INDUSTRIES:
        score += 5
        factors.append(f"{industry} industry")
    elif input.brand_tier == "emerging":
        score += 3
    else:
        score += 2

    if input.is_category_leader:
        score += 4
        factors.append("category leader")
    else:
        score += 2

    if score >= 16:
        insight = f"Excellent portfolio addition: {', '.join(factors)}."
    elif score >= 10:
        insight = "Good for portfolio. " + (f"Benefits: {', '.join(factors)}." if factors else "")
    elif score >= 5:
        insight = "Moderate portfolio value. May not be a standout piece."
    else:
        insight = "Limited portfolio value. Consider if this aligns with your brand."

    return _component("portfolio_value", "Portfolio Value", score, insight, tips)


def score_growth_potential(brief: ParsedBrief, input: DealQualityInput) -> DealQualityComponent:
    score = 0
    factors = []
    tips = []

    if input.mentions_ongoing_partnership:
        score += 6
        factors.append("ongoing partnership potential")
    else:
        score += 2
        tips.append("Ask about long-term partnership opportunities")

    if input.is_category_leader:
        score += 5
        factors.append("category leader opens doors")
    elif input.brand_tier == "major":
        score += 4
        factors.append("major brand credibility")
    elif input.brand_tier == "established":
        score += 3
    else:
        score += 1

    if brief.retainer_config:
        points, label = RETAINER_GROWTH_POINTS.get(brief.retainer_config.deal_length, (0, None))
        score += points
        if label:
            factors.append(label)
    else:
        score += 1

    if score >= 12:
        insight = f"High growth potential: {', '.join(factors)}."
    elif score >= 8:
        insight = "Good growth opportunity. " + (f"{', '.join(factors)}." if factors else "")
    elif score >= 4:
        insight = "Limited but possible growth. Consider negotiating for future opportunities."
    else:
        insight = "One-off deal with limited growth potential."

    return _component("growth_potential", "Growth Potential", score, insight, tips)


def score_terms_fairness(brief: ParsedBrief, input: DealQualityInput) -> DealQualityComponent:
    score = 0
    factors = []
    tips = []

    if input.payment_terms in PAYMENT_TERM_POINTS:
        points, factor, tip = PAYMENT_TERM_POINTS[input.payment_terms]
        score += points
        if factor:
            factors.append(factor)
        if tip:
            tips.append(tip)
    else:
        score += 2
        tips.append("Clarify payment terms before signing")

    duration_days = brief.usage_rights.duration_days
    if duration_days == 0:
        score += 3
        factors.append("no extended usage")
    elif duration_days <= 90:
        score += 2
    elif duration_days <= 365:
        score += 1
        tips.append("Long usage rights - ensure compensation matches")
    else:
        tips.append("Perpetual usage requires significant premium")

    exclusivity = brief.usage_rights.exclusivity
    if exclusivity == "none":
        score += 3
        factors.append("no exclusivity")
    elif exclusivity == "category":
        score += 1
        tips.append("Category exclusivity limits your opportunities")
    elif exclusivity == "full":
        tips.append("Full exclusivity is restrictive - ensure major compensation")

    if score >= 8:
        insight = f"Fair terms: {', '.join(factors)}."
    elif score >= 5:
        insight = "Acceptable terms with some concerns."
    else:
        insight = "Unfavorable terms. Negotiate before accepting."

    return _component("terms_fairness", "Terms Fairness", score, insight, tips)


def score_creative_freedom(input: DealQualityInput) -> DealQualityComponent:
    score = 0
    factors = []
    tips = []

    if input.has_strict_script is False:
        score += 4
        factors.append("loose creative guidelines")
    elif input.has_strict_script is True:
        score += 1
        tips.append("Strict scripts limit your authentic voice")
    else:
        score += 2

    rounds = input.revision_rounds
    if rounds is None:
        score += 2
        tips.append("Clarify revision limits before signing")
    elif rounds <= 1:
        score += 3
        factors.append("limited revisions")
    elif rounds <= 2:
        score += 2
    elif rounds <= 3:
        score += 1
        tips.append("3+ revision rounds is excessive")
    else:
        tips.append("Unlimited revisions is a red flag - cap at 2")

    if input.approval_process in APPROVAL_PROCESS_POINTS:
        score += APPROVAL_PROCESS_POINTS[input.approval_process]
        if input.approval_process == "simple":
            factors.append("simple approval")
        elif input.approval_process == "complex":
            tips.append("Complex approval processes slow you down")
    else:
        score += 1

    if score >= 8:
        insight = f"Good creative freedom: {', '.join(factors)}."
    elif score >= 5:
        insight = "Moderate creative freedom. Some brand oversight expected."
    else:
        insight = "Limited creative freedom. This may feel restrictive."

    return _component("creative_freedom", "Creative Freedom", score, insight, tips)


def detect_red_flags(brief: ParsedBrief, input: DealQualityInput, breakdown: DealQualityBreakdown) -> list[str]:
    red_flags = []
    usage = brief.usage_rights

    if breakdown.rate_fairness.score < MAX_POINTS["rate_fairness"] * 0.4:
        red_flags.append("Rate significantly below market value")
    if breakdown.brand_legitimacy.score < MAX_POINTS["brand_legitimacy"] * 0.3:
        red_flags.append("Unverified or suspicious brand")
    if input.payment_terms == "net_90":
        red_flags.append("Payment terms beyond Net-60")
    if usage.duration_days > 365 and usage.exclusivity != "none":
        red_flags.append("Perpetual usage with exclusivity")
    if input.revision_rounds is not None and input.revision_rounds > 3:
        red_flags.append("Unlimited or excessive revision rounds")
    if usage.exclusivity == "full":
        red_flags.append("Full exclusivity restricts all other brand work")

    return red_flags


def detect_green_flags(brief: ParsedBrief, input: DealQualityInput, breakdown: DealQualityBreakdown) -> list[str]:
    green_flags = []
    usage = brief.usage_rights

    if breakdown.rate_fairness.score >= MAX_POINTS["rate_fairness"] * 0.85:
        green_flags.append("Rate at or above market value")
    if input.brand_tier == "major":
        green_flags.append("Major brand opportunity")
    if input.is_category_leader:
        green_flags.append("Category-leading brand")
    if input.payment_terms in ("upfront", "net_15"):
        green_flags.append("Fast payment terms")
    if usage.exclusivity == "none" and usage.duration_days <= 30:
        green_flags.append("Minimal usage rights restrictions")
    if input.mentions_ongoing_partnership:
        green_flags.append("Potential for ongoing partnership")
    if brief.retainer_config and brief.retainer_config.deal_length in ("6_month", "12_month"):
        green_flags.append("Long-term partnership commitment")

    return green_flags


def _build_insights(level: str, brief: ParsedBrief, breakdown: DealQualityBreakdown,
                    red_flags: list, green_flags: list) -> list[str]:
    if level == "excellent":
        strengths = f"Key strengths: {', '.join(green_flags[:2])}." if green_flags else ""
        insights = [f"Excellent deal! {strengths}"]
    elif level == "good":
        insights = [f"Good opportunity for {brief.brand.name}. Minor improvements possible."]
    elif level == "fair":
        insights = [f"Fair deal with {brief.brand.name}. Review areas for negotiation."]
    else:
        issues = f"Issues: {', '.join(red_flags[:2])}." if red_flags else ""
        insights = [f"Significant concerns with this deal. {issues}"]

    # Weakest dimensions first; sorted() is stable so ties keep dimension order
    components = [getattr(breakdown, name) for name in MAX_POINTS]
    weakest = sorted(components, key=lambda c: c.score / c.max_points)
    for component in weakest[:3]:
        if component.score / component.max_points * 100 < 70:
            insights.append(component.insight)

    return insights[:5]


def calculate_deal_quality(
    profile: CreatorProfile,
    brief: ParsedBrief,
    input: Optional[DealQualityInput] = None,
    calculated_rate: Optional[float] = None,
) -> DealQualityResult:
    """
    Score a deal for the creator.

    calculated_rate is the engine's quote; when absent (and no offered rate is
    given) the tier's market benchmark is used, which scores as a fair rate.
    """
    input = input or DealQualityInput()
    tier = resolve_profile_tier(profile)
    effective_rate = calculated_rate if calculated_rate is not None else get_market_rate(tier)

    breakdown = DealQualityBreakdown(
        rate_fairness=score_rate_fairness(tier, input, effective_rate),
        brand_legitimacy=score_brand_legitimacy(input),
        portfolio_value=score_portfolio_value(profile, brief, input),
        growth_potential=score_growth_potential(brief, input),
        terms_fairness=score_terms_fairness(brief, input),
        creative_freedom=score_creative_freedom(input),
    )

    total_score = clamp(sum(getattr(breakdown, name).score for name in MAX_POINTS), 0, 100)
    level_info = get_quality_level_info(total_score)
    red_flags = detect_red_flags(brief, input, breakdown)
    green_flags = detect_green_flags(brief, input, breakdown)

    logger.debug("Deal quality for %s: %s (%s)", brief.brand.name, total_score, level_info["level"])

    return DealQualityResult(
        total_score=total_score,
        quality_level=level_info["level"],
        price_adjustment=level_info["adjustment"],
        recommendation=level_info["recommendation"],
        recommendation_text=level_info["recommendation_text"],
        breakdown=breakdown,
        insights=_build_insights(level_info["level"], brief, breakdown, red_flags, green_flags),
        red_flags=red_flags,
        green_flags=green_flags,
    )


def _percent(component: DealQualityComponent) -> float:
    return component.score / component.max_points * 100


def deal_quality_to_fit_score(deal_quality: DealQualityResult) -> FitScoreResult:
    """Legacy fit score view of a deal quality result. Totals and adjustment are shared."""
    b = deal_quality.breakdown

    def view(key, percent, insight):
        return FitScoreComponent(score=round_half_up(percent), weight=FIT_SCORE_WEIGHTS[key], insight=insight)

    return FitScoreResult(
        total_score=deal_quality.total_score,
        fit_level=QUALITY_TO_FIT_LEVEL[deal_quality.quality_level],
        price_adjustment=deal_quality.price_adjustment,
        breakdown=FitScoreBreakdown(
            niche_match=view(
                "niche_match",
                (_percent(b.rate_fairness) + _percent(b.terms_fairness)) / 2,
                b.rate_fairness.insight,
            ),
            demographic_match=view("demographic_match", _percent(b.brand_legitimacy), b.brand_legitimacy.insight),
            platform_match=view("platform_match", _percent(b.portfolio_value), b.portfolio_value.insight),
            engagement_quality=view("engagement_quality", _percent(b.growth_potential), b.growth_potential.insight),
            content_capability=view("content_capability", _percent(b.creative_freedom), b.creative_freedom.insight),
        ),
        insights=list(deal_quality.insights),
    )


def calculate_deal_quality_with_compat(
    profile: CreatorProfile,
    brief: ParsedBrief,
    input: Optional[DealQualityInput] = None,
    calculated_rate: Optional[float] = None,
) -> DealQualityWithCompat:
    deal_quality = calculate_deal_quality(profile, brief, input, calculated_rate)
    return DealQualityWithCompat(deal_quality=deal_quality, fit_score=deal_quality_to_fit_score(deal_quality))
