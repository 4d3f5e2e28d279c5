"""
Layered pricing engine.

A sponsored quote starts from the tier base rate and runs through a fixed
chain of multipliers (market, engagement, niche, format, fit, usage rights,
whitelisting, complexity, season). Each step is kept as a PricingLayer so the
quote can be explained line by line. UGC, affiliate, hybrid, performance and
retainer deals are priced by their own functions, most of them wrapping the
sponsored quote.
"""
import logging
from typing import Union

from config import QUOTE_VALID_DAYS
from data.deal_models import (
    HYBRID_BASE_FEE_SHARE, AFFILIATE_CATEGORIES, DEAL_LENGTHS, DELIVERABLE_MULTIPLIERS,
    AMBASSADOR_EXCLUSIVITY_PREMIUMS,
)
from data.deal_quality import FIT_ADJUSTMENTS, QUALITY_TO_FIT_LEVEL
from data.markets import DEFAULT_NICHE, DEFAULT_REGION
from data.platforms import UGC_FORMATS, CONTENT_FORMATS
from data.tiers import TIERS
from schemas.brief import ParsedBrief, AffiliateConfig, PerformanceConfig, RetainerConfig, MonthlyDeliverables
from schemas.creator import CreatorProfile
from schemas.deal_quality import DealQualityResult, FitScoreResult
from schemas.pricing import (
    PricingLayer, PricingResult, AffiliateEarningsBreakdown, HybridPricingBreakdown,
    PerformanceBonusBreakdown, DeliverableRates, AmbassadorPerksBreakdown, RetainerPricingBreakdown,
)
from services.errors import ValidationError
from services.numbers import round_half_up, round_to_nearest_five, format_premium, format_money
from services.validation import validate_override_total
from services.rate_tables import (
    get_platform_multiplier, get_platform_display_name, get_regional_multiplier,
    get_region_display_name, get_engagement_multiplier, get_niche_premium, get_niche_category_name,
    get_format_premium, get_format_complexity, get_complexity_premium, get_duration_premium,
    get_exclusivity_premium, get_whitelisting, get_seasonal_premium, get_currency,
)
from services.tiers import resolve_profile_tier, get_tier_display_name

logger = logging.getLogger(__name__)

ScoreInput = Union[DealQualityResult, FitScoreResult]


class _LayerChain:
    """Running price plus the layers that produced it."""

    def __init__(self, name: str, description: str, base_value: str, amount: float):
        self.price = amount
        self.layers = [PricingLayer(
            name=name, description=description, base_value=base_value,
            multiplier=1.0, adjustment=0.0, amount=amount,
        )]

    def apply(self, name: str, description: str, base_value: str, multiplier: float):
        self.layers.append(PricingLayer(
            name=name,
            description=description,
            base_value=base_value,
            multiplier=multiplier,
            adjustment=multiplier - 1,
            amount=self.price * multiplier - self.price,
        ))
        self.price *= multiplier


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def _fit_level(score: ScoreInput) -> str:
    if isinstance(score, DealQualityResult):
        return QUALITY_TO_FIT_LEVEL[score.quality_level]
    return score.fit_level


def _fit_description(score: ScoreInput) -> str:
    if isinstance(score, DealQualityResult):
        return f"{score.total_score}/100 - {_capitalize(score.quality_level)} opportunity"
    return f"{score.total_score}/100 - {_capitalize(score.fit_level)} alignment"


def describe_usage_rights(duration_days: int, exclusivity: str) -> str:
    if duration_days == 0:
        description = "Content only, no paid usage"
    elif duration_days >= 365:
        description = "Perpetual usage rights"
    else:
        description = f"{duration_days}-day usage rights"
    if exclusivity != "none":
        description += f", {exclusivity} exclusivity"
    return description


def _seasonal_premium(brief: ParsedBrief) -> dict:
    if brief.campaign_date is None or brief.disable_seasonal_pricing:
        return get_seasonal_premium(None)
    return get_seasonal_premium(brief.campaign_date)


def _apply_rights_and_production(chain: _LayerChain, brief: ParsedBrief, complexity: str) -> dict:
    """Usage rights, whitelisting, complexity and season, shared by sponsored and UGC quotes."""
    usage = brief.usage_rights
    rights_premium = get_duration_premium(usage.duration_days) + get_exclusivity_premium(usage.exclusivity)
    chain.apply(
        "Usage Rights",
        describe_usage_rights(usage.duration_days, usage.exclusivity),
        f"{usage.duration_days} days",
        1 + rights_premium,
    )

    whitelisting_type = usage.whitelisting_type or "none"
    whitelisting = get_whitelisting(whitelisting_type)
    if whitelisting["premium"] != 0:
        chain.apply("Whitelisting", whitelisting["name"], whitelisting_type, 1 + whitelisting["premium"])

    complexity_premium = get_complexity_premium(complexity)
    chain.apply(
        "Complexity",
        f"{_capitalize(complexity)} production requirements",
        complexity,
        1 + complexity_premium,
    )

    seasonal = _seasonal_premium(brief)
    if seasonal["premium"] != 0:
        chain.apply("Seasonal", seasonal["name"], seasonal["period"], 1 + seasonal["premium"])

    return {
        "rights": rights_premium,
        "whitelisting": whitelisting["premium"],
        "complexity": complexity_premium,
        "seasonal": seasonal["premium"],
    }


def _premium_terms(*premiums) -> str:
    return " ".join(f"× (1 {format_premium(p)})" for p in premiums)


def _result(profile: CreatorProfile, price_per_deliverable: int, quantity: int, total: int,
            layers: list, formula: str, **extra) -> PricingResult:
    currency, symbol = get_currency(profile.currency)
    return PricingResult(
        price_per_deliverable=price_per_deliverable,
        quantity=quantity,
        total_price=total,
        currency=currency,
        currency_symbol=symbol,
        valid_days=QUOTE_VALID_DAYS,
        layers=layers,
        formula=formula,
        **extra,
    )


def calculate_standard_sponsored_price(profile: CreatorProfile, brief: ParsedBrief,
                                       score: ScoreInput) -> PricingResult:
    tier = resolve_profile_tier(profile)
    tier_base = TIERS[tier]["base_rate"]
    platform = brief.content.platform
    platform_multiplier = get_platform_multiplier(platform)
    _, symbol = get_currency(profile.currency)

    chain = _LayerChain(
        "Base Rate",
        f"{get_tier_display_name(tier)} tier creator rate on {get_platform_display_name(platform)}",
        f"{symbol}{format_money(tier_base)}",
        tier_base * platform_multiplier,
    )

    region = profile.region or DEFAULT_REGION
    regional_multiplier = get_regional_multiplier(region)
    if regional_multiplier != 1:
        chain.apply("Regional", f"{get_region_display_name(region)} market rate", region, regional_multiplier)

    engagement_rate = profile.avg_engagement_rate
    engagement_multiplier = get_engagement_multiplier(engagement_rate)
    chain.apply(
        "Engagement Multiplier",
        f"{engagement_rate:.1f}% engagement rate",
        f"{engagement_rate:.1f}%",
        engagement_multiplier,
    )

    niche = profile.niches[0] if profile.niches else DEFAULT_NICHE
    niche_premium = get_niche_premium(niche)
    if niche_premium != 1:
        chain.apply(
            "Niche Premium",
            f"{get_niche_category_name(niche)} content commands {niche_premium:g}x rates",
            niche,
            niche_premium,
        )

    content_format = brief.content.format
    format_premium_value = get_format_premium(content_format)
    chain.apply(
        "Format Premium",
        f"{CONTENT_FORMATS[content_format]['name']} content type",
        content_format,
        1 + format_premium_value,
    )

    fit_adjustment = FIT_ADJUSTMENTS[_fit_level(score)]
    chain.apply("Fit Score", _fit_description(score), f"{score.total_score}/100", 1 + fit_adjustment)

    premiums = _apply_rights_and_production(chain, brief, get_format_complexity(content_format))

    price_per_deliverable = round_to_nearest_five(chain.price)
    quantity = brief.content.quantity
    formula = (
        f"({symbol}{format_money(tier_base)} × {platform_multiplier:.2f} × {regional_multiplier:.2f} "
        f"× {engagement_multiplier:.1f} × {niche_premium:.1f}) "
        + _premium_terms(
            format_premium_value, fit_adjustment, premiums["rights"],
            premiums["whitelisting"], premiums["complexity"], premiums["seasonal"],
        )
    )

    logger.debug("Sponsored quote for %s tier on %s: %s per deliverable", tier, platform, price_per_deliverable)

    return _result(profile, price_per_deliverable, quantity, price_per_deliverable * quantity,
                   chain.layers, formula)


def calculate_ugc_price(brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    """UGC is priced per deliverable as a service. Audience size and engagement play no part."""
    ugc_format = brief.ugc_format if brief.ugc_format in UGC_FORMATS else "video"
    entry = UGC_FORMATS[ugc_format]
    _, symbol = get_currency(profile.currency)

    chain = _LayerChain(
        "UGC Base Rate",
        f"{_capitalize(ugc_format)} content base rate",
        f"{symbol}{format_money(entry['base_rate'])}",
        entry["base_rate"],
    )
    premiums = _apply_rights_and_production(chain, brief, entry["complexity"])

    price_per_deliverable = round_to_nearest_five(chain.price)
    quantity = brief.content.quantity
    formula = f"{symbol}{format_money(entry['base_rate'])} " + _premium_terms(
        premiums["rights"], premiums["whitelisting"], premiums["complexity"], premiums["seasonal"],
    )
    return _result(profile, price_per_deliverable, quantity, price_per_deliverable * quantity,
                   chain.layers, formula, pricing_model="flat_fee")


def get_affiliate_category(category: str = None) -> dict:
    key = (category or "other").strip().lower()
    return AFFILIATE_CATEGORIES.get(key, AFFILIATE_CATEGORIES["other"])


def calculate_affiliate_earnings(config: AffiliateConfig) -> AffiliateEarningsBreakdown:
    earnings = config.estimated_sales * config.average_order_value * config.affiliate_rate / 100
    rate_range = None
    if config.category:
        entry = get_affiliate_category(config.category)
        rate_range = {"min": entry["min"], "max": entry["max"]}
    return AffiliateEarningsBreakdown(
        commission_rate=config.affiliate_rate,
        estimated_sales=config.estimated_sales,
        average_order_value=config.average_order_value,
        estimated_earnings=round_to_nearest_five(earnings),
        category_rate_range=rate_range,
    )


def calculate_affiliate_pricing(brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    config = brief.affiliate_config
    if config is None:
        raise ValidationError("Affiliate configuration required for affiliate pricing model", field="affiliate_config")

    breakdown = calculate_affiliate_earnings(config)
    category = get_affiliate_category(config.category)
    _, symbol = get_currency(profile.currency)
    rate = f"{config.affiliate_rate:g}%"
    aov = f"{symbol}{format_money(config.average_order_value)}"
    earnings = f"{symbol}{format_money(breakdown.estimated_earnings)}"

    layers = [
        PricingLayer(name="Commission Rate", description=f"{rate} commission on sales",
                     base_value=rate, multiplier=1.0, adjustment=0.0, amount=0.0),
        PricingLayer(name="Estimated Sales", description=f"{config.estimated_sales} projected sales",
                     base_value=str(config.estimated_sales), multiplier=1.0, adjustment=0.0, amount=0.0),
        PricingLayer(name="Average Order Value", description=f"{aov} per order",
                     base_value=aov, multiplier=1.0, adjustment=0.0, amount=0.0),
        PricingLayer(
            name="Estimated Earnings",
            description=f"{category['name']} category (typical: {category['min']}-{category['max']}%)",
            base_value=earnings, multiplier=1.0, adjustment=0.0, amount=breakdown.estimated_earnings,
        ),
    ]
    formula = f"{config.estimated_sales} sales × {aov} AOV × {rate} = {earnings}"

    return _result(profile, 0, 1, breakdown.estimated_earnings, layers, formula,
                   pricing_model="affiliate", affiliate_breakdown=breakdown)


def calculate_hybrid_price(full_rate: float, config: AffiliateConfig) -> HybridPricingBreakdown:
    base_fee = round_to_nearest_five(full_rate * HYBRID_BASE_FEE_SHARE)
    earnings = calculate_affiliate_earnings(config)
    return HybridPricingBreakdown(
        base_fee=base_fee,
        full_rate=round_to_nearest_five(full_rate),
        base_discount=HYBRID_BASE_FEE_SHARE * 100,
        affiliate_earnings=earnings,
        combined_estimate=round_to_nearest_five(base_fee + earnings.estimated_earnings),
    )


def _hybrid_pricing(base: PricingResult, brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    config = brief.affiliate_config
    breakdown = calculate_hybrid_price(base.total_price, config)
    symbol = base.currency_symbol
    share = f"{100 - breakdown.base_discount:g}%"
    rate = f"{config.affiliate_rate:g}%"

    layers = base.layers + [
        PricingLayer(
            name="Hybrid Discount",
            description=f"Base fee reduced to {share} for hybrid model",
            base_value=f"-{breakdown.base_discount:g}%",
            multiplier=HYBRID_BASE_FEE_SHARE,
            adjustment=HYBRID_BASE_FEE_SHARE - 1,
            amount=breakdown.base_fee - breakdown.full_rate,
        ),
        PricingLayer(
            name="Affiliate Commission",
            description=f"{rate} on {config.estimated_sales} est. sales",
            base_value=rate,
            multiplier=1.0,
            adjustment=0.0,
            amount=breakdown.affiliate_earnings.estimated_earnings,
        ),
    ]
    formula = (
        f"({symbol}{format_money(breakdown.full_rate)} × {share}) + "
        f"({config.estimated_sales} × {symbol}{format_money(config.average_order_value)} × {rate}) = "
        f"{symbol}{format_money(breakdown.combined_estimate)}"
    )
    return base.model_copy(update={
        "price_per_deliverable": breakdown.base_fee,
        "quantity": 1,
        "total_price": breakdown.combined_estimate,
        "layers": layers,
        "formula": formula,
        "pricing_model": "hybrid",
        "hybrid_breakdown": breakdown,
    })


def calculate_performance_price(base_fee: float, config: PerformanceConfig) -> PerformanceBonusBreakdown:
    return PerformanceBonusBreakdown(
        base_fee=round_to_nearest_five(base_fee),
        bonus_threshold=config.bonus_threshold,
        bonus_metric=config.bonus_metric,
        bonus_amount=round_to_nearest_five(config.bonus_amount),
        potential_total=round_to_nearest_five(base_fee + config.bonus_amount),
    )


def _performance_pricing(base: PricingResult, brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    config = brief.performance_config
    breakdown = calculate_performance_price(base.total_price, config)
    symbol = base.currency_symbol

    layers = base.layers + [PricingLayer(
        name="Performance Bonus",
        description=(
            f"+{symbol}{format_money(breakdown.bonus_amount)} if "
            f"{config.bonus_threshold:,} {config.bonus_metric} reached"
        ),
        base_value=f"{config.bonus_threshold} {config.bonus_metric}",
        multiplier=1.0,
        adjustment=0.0,
        amount=breakdown.bonus_amount,
    )]
    formula = (
        f"{symbol}{format_money(breakdown.base_fee)} base + {symbol}{format_money(breakdown.bonus_amount)} bonus "
        f"(at {config.bonus_threshold} {config.bonus_metric}) = {symbol}{format_money(breakdown.potential_total)} potential"
    )
    return base.model_copy(update={
        "total_price": breakdown.base_fee,
        "layers": layers,
        "formula": formula,
        "pricing_model": "performance",
        "performance_breakdown": breakdown,
    })


def calculate_deliverable_rates(base_rate: float) -> DeliverableRates:
    return DeliverableRates(
        post_rate=round_to_nearest_five(base_rate * DELIVERABLE_MULTIPLIERS["posts"]),
        story_rate=round_to_nearest_five(base_rate * DELIVERABLE_MULTIPLIERS["stories"]),
        reel_rate=round_to_nearest_five(base_rate * DELIVERABLE_MULTIPLIERS["reels"]),
        video_rate=round_to_nearest_five(base_rate * DELIVERABLE_MULTIPLIERS["videos"]),
    )


def _discount_rates(rates: DeliverableRates, discount: float) -> DeliverableRates:
    keep = 1 - discount
    return DeliverableRates(
        post_rate=round_to_nearest_five(rates.post_rate * keep),
        story_rate=round_to_nearest_five(rates.story_rate * keep),
        reel_rate=round_to_nearest_five(rates.reel_rate * keep),
        video_rate=round_to_nearest_five(rates.video_rate * keep),
    )


def _monthly_content_value(deliverables: MonthlyDeliverables, rates: DeliverableRates) -> int:
    return (
        deliverables.posts * rates.post_rate
        + deliverables.stories * rates.story_rate
        + deliverables.reels * rates.reel_rate
        + deliverables.videos * rates.video_rate
    )


def get_event_day_rate(tier: str) -> int:
    return TIERS.get(tier, TIERS["micro"])["event_day_rate"]


def calculate_ambassador_perks(perks, tier: str, monthly_content_value: float,
                               contract_months: int) -> AmbassadorPerksBreakdown:
    exclusivity_multiplier = (
        AMBASSADOR_EXCLUSIVITY_PREMIUMS.get(perks.exclusivity_type, 0.0) if perks.exclusivity_required else 0.0
    )
    exclusivity_premium = round_to_nearest_five(monthly_content_value * exclusivity_multiplier * contract_months)
    event_day_rate = (perks.event_day_rate or get_event_day_rate(tier)) if perks.events_included > 0 else 0
    event_value = round_to_nearest_five(perks.events_included * event_day_rate)

    return AmbassadorPerksBreakdown(
        exclusivity_premium=exclusivity_premium,
        exclusivity_type=perks.exclusivity_type,
        product_seeding_value=perks.product_value if perks.product_seeding else 0,
        events_included=perks.events_included,
        event_day_rate=event_day_rate,
        event_appearances_value=event_value,
        total_perks_value=exclusivity_premium + event_value,
    )


def calculate_retainer_price(base_rate: float, config: RetainerConfig, tier: str) -> RetainerPricingBreakdown:
    discount, months = DEAL_LENGTHS.get(config.deal_length, DEAL_LENGTHS["one_time"])
    full_rates = calculate_deliverable_rates(base_rate)
    discounted_rates = _discount_rates(full_rates, discount)
    value_full = _monthly_content_value(config.monthly_deliverables, full_rates)
    value_discounted = _monthly_content_value(config.monthly_deliverables, discounted_rates)
    monthly_rate = round_to_nearest_five(value_discounted)

    perks = None
    if config.ambassador_perks:
        perks = calculate_ambassador_perks(config.ambassador_perks, tier, value_discounted, months)
    perks_value = perks.total_perks_value if perks else 0

    return RetainerPricingBreakdown(
        deal_length=config.deal_length,
        contract_months=months,
        volume_discount=discount * 100,
        full_rates=full_rates,
        discounted_rates=discounted_rates,
        monthly_deliverables=config.monthly_deliverables,
        monthly_content_value_full=round_to_nearest_five(value_full),
        monthly_content_value_discounted=round_to_nearest_five(value_discounted),
        monthly_savings=round_to_nearest_five(value_full - value_discounted),
        monthly_rate=monthly_rate,
        total_contract_value=round_to_nearest_five(monthly_rate * months + perks_value),
        ambassador_breakdown=perks,
    )


def _describe_perks(perks: AmbassadorPerksBreakdown, symbol: str) -> str:
    parts = []
    if perks.exclusivity_premium > 0:
        parts.append(f"{perks.exclusivity_type} exclusivity (+{symbol}{format_money(perks.exclusivity_premium)})")
    if perks.events_included > 0:
        plural = "s" if perks.events_included > 1 else ""
        parts.append(f"{perks.events_included} event{plural} (+{symbol}{format_money(perks.event_appearances_value)})")
    if perks.product_seeding_value > 0:
        parts.append(f"product seeding ({symbol}{format_money(perks.product_seeding_value)} value)")
    return ", ".join(parts) or "No additional perks"


def _retainer_pricing(base: PricingResult, brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    config = brief.retainer_config
    tier = resolve_profile_tier(profile)
    breakdown = calculate_retainer_price(base.price_per_deliverable, config, tier)
    symbol = base.currency_symbol
    months = breakdown.contract_months
    deliverables = config.monthly_deliverables
    discount = breakdown.volume_discount

    layers = [
        PricingLayer(
            name="Base Rate", description=f"{get_tier_display_name(tier)} tier base rate",
            base_value=f"{symbol}{format_money(base.price_per_deliverable)}",
            multiplier=1.0, adjustment=0.0, amount=base.price_per_deliverable,
        ),
        PricingLayer(
            name="Volume Discount", description=f"{discount:g}% discount for {months}-month commitment",
            base_value=f"-{discount:g}%",
            multiplier=1 - discount / 100, adjustment=-discount / 100, amount=-breakdown.monthly_savings,
        ),
        PricingLayer(
            name="Monthly Deliverables",
            description=(
                f"{deliverables.posts} posts, {deliverables.stories} stories, "
                f"{deliverables.reels} reels, {deliverables.videos} videos"
            ),
            base_value=f"{symbol}{format_money(breakdown.monthly_rate)}/mo",
            multiplier=1.0, adjustment=0.0, amount=breakdown.monthly_rate,
        ),
        PricingLayer(
            name="Contract Length", description=f"{months} month{'s' if months > 1 else ''}",
            base_value=f"×{months}",
            multiplier=months, adjustment=months - 1, amount=breakdown.monthly_rate * months,
        ),
    ]

    perks = breakdown.ambassador_breakdown
    if perks:
        layers.append(PricingLayer(
            name="Ambassador Perks", description=_describe_perks(perks, symbol),
            base_value=f"+{symbol}{format_money(perks.total_perks_value)}",
            multiplier=1.0, adjustment=0.0, amount=perks.total_perks_value,
        ))
        formula = (
            f"{symbol}{format_money(breakdown.monthly_rate)}/mo × {months} months + "
            f"{symbol}{format_money(perks.total_perks_value)} perks = {symbol}{format_money(breakdown.total_contract_value)}"
        )
    else:
        formula = (
            f"{symbol}{format_money(breakdown.monthly_rate)}/mo × {months} months = "
            f"{symbol}{format_money(breakdown.total_contract_value)}"
        )

    return base.model_copy(update={
        "quantity": months,
        "total_price": breakdown.total_contract_value,
        "layers": layers,
        "formula": formula,
        "pricing_model": "flat_fee",
        "retainer_breakdown": breakdown,
    })


def calculate_price(profile: CreatorProfile, brief: ParsedBrief, score: ScoreInput) -> PricingResult:
    """
    Price a brief for a creator.

    score is the deal quality result (or the legacy fit score view of it) and
    drives the Fit Score layer. Raises ValidationError when an affiliate deal
    carries no affiliate configuration.
    """
    if brief.deal_type == "ugc":
        return calculate_ugc_price(brief, profile)

    if brief.pricing_model == "affiliate":
        return calculate_affiliate_pricing(brief, profile)

    base = calculate_standard_sponsored_price(profile, brief, score)

    if brief.pricing_model == "hybrid" and brief.affiliate_config:
        return _hybrid_pricing(base, brief, profile)
    if brief.pricing_model == "performance" and brief.performance_config:
        return _performance_pricing(base, brief, profile)
    if brief.retainer_config:
        return _retainer_pricing(base, brief, profile)

    return base.model_copy(update={"pricing_model": "flat_fee"})


def apply_price_override(result: PricingResult, new_total: float) -> PricingResult:
    """Replace the total with a creator-chosen figure (rounded half-up). Layers are left as computed."""
    validate_override_total(new_total)
    original = result.original_total if result.original_total is not None else result.total_price
    return result.model_copy(update={"total_price": round_half_up(new_total), "original_total": original})
