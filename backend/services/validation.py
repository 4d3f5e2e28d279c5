"""
Boundary validation. Every check here runs before a scorer is called, so the
scorers themselves can assume well-formed input.
"""
import math

from data.platforms import PLATFORMS, CONTENT_FORMATS
from data.markets import DEFAULT_NICHE
from schemas.quick_estimate import QuickEstimateRequest, QuickEstimateInput
from schemas.gift import GiftEvaluationInput
from services.errors import ValidationError

MIN_FOLLOWER_COUNT = 1_000
MAX_FOLLOWER_COUNT = 10_000_000
MIN_CONTRACT_LENGTH = 100

GIFT_CONTENT_TYPES = ("organic_mention", "dedicated_post", "multiple_posts", "video_content")
GIFT_BRAND_QUALITIES = ("major_brand", "established_indie", "new_unknown", "suspicious")


def _is_number(value) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, (int, float))
        and math.isfinite(value)
    )


def validate_quick_estimate_input(request: QuickEstimateRequest) -> QuickEstimateInput:
    """Collect every field problem, then raise once with all messages joined."""
    errors = []

    follower_count = request.follower_count
    if not _is_number(follower_count):
        errors.append(("follower_count", "Follower count must be a number"))
    elif follower_count < MIN_FOLLOWER_COUNT:
        errors.append(("follower_count", f"Minimum follower count is {MIN_FOLLOWER_COUNT:,}"))
    elif follower_count > MAX_FOLLOWER_COUNT:
        errors.append((
            "follower_count",
            f"For creators with {MAX_FOLLOWER_COUNT:,}+ followers, we recommend a custom consultation",
        ))

    if not isinstance(request.platform, str) or request.platform not in PLATFORMS:
        errors.append(("platform", "Invalid platform"))

    if not isinstance(request.content_format, str) or request.content_format not in CONTENT_FORMATS:
        errors.append(("content_format", "Invalid content format"))

    if errors:
        raise ValidationError(
            ". ".join(message for _, message in errors),
            field=errors[0][0],
        )

    return QuickEstimateInput(
        follower_count=int(follower_count),
        platform=request.platform,
        content_format=request.content_format,
        niche=request.niche if isinstance(request.niche, str) and request.niche else DEFAULT_NICHE,
    )


def validate_gift_input(gift: GiftEvaluationInput) -> None:
    description = gift.product_description
    if not isinstance(description, str) or not description.strip():
        raise ValidationError("Product description is required.", field="product_description")

    value = gift.estimated_product_value
    if not _is_number(value) or value < 0:
        raise ValidationError("Valid estimated product value is required.", field="estimated_product_value")

    hours = gift.estimated_hours_to_create
    if not _is_number(hours) or hours <= 0:
        raise ValidationError("Valid estimated hours to create is required.", field="estimated_hours_to_create")

    if gift.content_required not in GIFT_CONTENT_TYPES:
        raise ValidationError(
            f"Valid content type is required ({', '.join(GIFT_CONTENT_TYPES)}).",
            field="content_required",
        )

    if gift.brand_quality not in GIFT_BRAND_QUALITIES:
        raise ValidationError(
            f"Valid brand quality is required ({', '.join(GIFT_BRAND_QUALITIES)}).",
            field="brand_quality",
        )


def validate_contract_text(contract_text) -> str:
    if not isinstance(contract_text, str) or len(contract_text.strip()) < MIN_CONTRACT_LENGTH:
        raise ValidationError(
            f"Contract text must be at least {MIN_CONTRACT_LENGTH} characters long",
            field="contract_text",
        )
    return contract_text.strip()


def validate_override_total(total) -> float:
    if not _is_number(total) or total < 0:
        raise ValidationError("Override total must be a non-negative number", field="override_total")
    return total


def validate_brief(brief) -> None:
    """Enum and range checks a ParsedBrief needs before it can be priced."""
    if brief.deal_type not in ("sponsored", "ugc"):
        raise ValidationError("Invalid deal type (sponsored, ugc)", field="deal_type")
    if brief.content.format not in CONTENT_FORMATS:
        raise ValidationError(
            f"Invalid content format ({', '.join(CONTENT_FORMATS)})",
            field="content.format",
        )
    if brief.content.quantity < 1:
        raise ValidationError("Content quantity must be at least 1", field="content.quantity")
    if brief.usage_rights.duration_days < 0:
        raise ValidationError("Usage rights duration cannot be negative", field="usage_rights.duration_days")
    if brief.usage_rights.exclusivity not in ("none", "category", "full"):
        raise ValidationError("Invalid exclusivity (none, category, full)", field="usage_rights.exclusivity")
    if brief.pricing_model == "affiliate" and brief.affiliate_config is None:
        raise ValidationError(
            "Affiliate configuration required for affiliate pricing model",
            field="affiliate_config",
        )


def validate_vetting_input(brand_input) -> None:
    name = getattr(brand_input, "brand_name", None)
    if not isinstance(name, str) or len(name.strip()) < 2:
        raise ValidationError("Brand name must be at least 2 characters", field="brand_name")
    platform = getattr(brand_input, "platform", None)
    if not isinstance(platform, str) or platform not in PLATFORMS:
        raise ValidationError(f"Invalid platform ({', '.join(PLATFORMS)})", field="platform")
