"""Lookups over the pricing tables in data/, shared by the quick estimate and pricing engines."""
from datetime import date

from data.markets import (
    REGIONS, DEFAULT_REGION, NICHE_PREMIUMS, DEFAULT_NICHE, DEFAULT_NICHE_PREMIUM,
    ENGAGEMENT_THRESHOLDS, CURRENCIES, DEFAULT_CURRENCY, SEASONAL_PERIODS, SEASONAL_CALENDAR,
)
from data.platforms import (
    PLATFORMS, DEFAULT_PLATFORM_MULTIPLIER, CONTENT_FORMATS, COMPLEXITY_PREMIUMS, normalize_platform,
)
from data.usage_rights import DURATION_TIERS, EXCLUSIVITY_PREMIUMS, WHITELISTING, DEFAULT_WHITELISTING


def get_platform_multiplier(platform: str) -> float:
    entry = PLATFORMS.get(normalize_platform(platform))
    return entry["multiplier"] if entry else DEFAULT_PLATFORM_MULTIPLIER


def get_platform_display_name(platform: str) -> str:
    if not platform:
        return "Unknown Platform"
    entry = PLATFORMS.get(normalize_platform(platform))
    return entry["name"] if entry else platform


def get_regional_multiplier(region: str) -> float:
    if not region:
        return REGIONS[DEFAULT_REGION]["multiplier"]
    entry = REGIONS.get(normalize_platform(region))
    return entry["multiplier"] if entry else REGIONS["other"]["multiplier"]


def get_region_display_name(region: str) -> str:
    entry = REGIONS.get(normalize_platform(region or DEFAULT_REGION))
    return entry["name"] if entry else REGIONS["other"]["name"]


def get_engagement_multiplier(engagement_rate: float) -> float:
    for ceiling, multiplier in ENGAGEMENT_THRESHOLDS:
        if engagement_rate < ceiling:
            return multiplier
    return ENGAGEMENT_THRESHOLDS[-1][1]


def get_niche_premium(niche: str) -> float:
    entry = NICHE_PREMIUMS.get((niche or DEFAULT_NICHE).strip().lower())
    return entry[0] if entry else DEFAULT_NICHE_PREMIUM


def get_niche_category_name(niche: str) -> str:
    entry = NICHE_PREMIUMS.get((niche or DEFAULT_NICHE).strip().lower())
    return entry[1] if entry else "Other"


def get_format_premium(content_format: str) -> float:
    return CONTENT_FORMATS[content_format]["premium"]


def get_format_complexity(content_format: str) -> str:
    return CONTENT_FORMATS[content_format]["complexity"]


def get_complexity_premium(level: str) -> float:
    return COMPLEXITY_PREMIUMS[level]


def get_duration_premium(duration_days: int) -> float:
    for max_days, premium in DURATION_TIERS:
        if duration_days <= max_days:
            return premium
    return DURATION_TIERS[-1][1]


def get_exclusivity_premium(exclusivity: str) -> float:
    return EXCLUSIVITY_PREMIUMS.get(exclusivity, 0.0)


def get_whitelisting(whitelisting_type: str) -> dict:
    key = (whitelisting_type or DEFAULT_WHITELISTING).strip().lower()
    return WHITELISTING.get(key, WHITELISTING[DEFAULT_WHITELISTING])


def get_seasonal_period(campaign_date: date) -> str:
    for month, last_day, period in SEASONAL_CALENDAR:
        if campaign_date.month == month and (last_day is None or campaign_date.day <= last_day):
            return period
    return "default"


def get_seasonal_premium(campaign_date: date = None) -> dict:
    """Premium for the campaign's season. No date means the standard period."""
    period = get_seasonal_period(campaign_date) if campaign_date else "default"
    entry = SEASONAL_PERIODS[period]
    return {"period": period, "premium": entry["premium"], "name": entry["name"]}


def get_currency(code: str) -> tuple:
    """(code, symbol); unknown codes fall back to USD."""
    if code in CURRENCIES:
        return code, CURRENCIES[code]
    return DEFAULT_CURRENCY, CURRENCIES[DEFAULT_CURRENCY]
