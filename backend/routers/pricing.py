import logging

from fastapi import APIRouter, HTTPException, Request, Response

from schemas.quick_estimate import QuickEstimateRequest
from schemas.pricing import CalculateInput, RateCardInput
from services.deal_quality import calculate_deal_quality_with_compat
from services.db_ops import save_rate_card, get_rate_card
from services.errors import ValidationError
from services.pricing import calculate_price, apply_price_override
from services.quick_estimate import calculate_quick_estimate
from services.rate_limiter import quick_estimate_limiter, RateLimitStatus
from services.validation import validate_quick_estimate_input, validate_brief

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["pricing"])

RATE_LIMIT_MESSAGE = "Too many requests. Please wait a moment and try again."


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded and forwarded.split(",")[0].strip():
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def rate_limit_headers(status: RateLimitStatus) -> dict:
    return {
        "X-RateLimit-Limit": str(status.limit),
        "X-RateLimit-Remaining": str(status.remaining),
        "X-RateLimit-Reset": str(status.reset_in),
    }


def _price_brief(profile, brief, deal_quality_input):
    """Deal quality first, then the quote it feeds."""
    validate_brief(brief)
    compat = calculate_deal_quality_with_compat(profile, brief, deal_quality_input)
    pricing = calculate_price(profile, brief, compat.deal_quality)
    return compat, pricing


@router.post("/quick-calculate")
async def quick_calculate(input: QuickEstimateRequest, request: Request, response: Response):
    """Public rate estimate from follower count, platform and format. Rate limited per IP."""
    status = quick_estimate_limiter.check(f"ratelimit:{get_client_ip(request)}")
    if not status.allowed:
        headers = rate_limit_headers(status)
        headers["Retry-After"] = str(status.reset_in)
        raise HTTPException(status_code=429, detail=RATE_LIMIT_MESSAGE, headers=headers)
    response.headers.update(rate_limit_headers(status))

    try:
        estimate_input = validate_quick_estimate_input(input)
        result = calculate_quick_estimate(estimate_input)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Quick estimate failed")
        raise HTTPException(status_code=500, detail=str(e))

    return {"success": True, "data": result}


@router.post("/calculate")
async def calculate(input: CalculateInput):
    """Deal quality (plus its legacy fit score view) and the full layered quote"""
    try:
        compat, pricing = _price_brief(input.profile, input.brief, input.deal_quality_input)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Calculation failed")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "success": True,
        "data": {
            "deal_quality": compat.deal_quality,
            "fit_score": compat.fit_score,
            "pricing": pricing,
        },
    }


@router.post("/rate-cards")
async def create_rate_card(input: RateCardInput):
    """Price a brief and store the quote. A creator-chosen total replaces the computed one."""
    try:
        compat, pricing = _price_brief(input.profile, input.brief, input.deal_quality_input)
        if input.override_total is not None:
            pricing = apply_price_override(pricing, input.override_total)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Rate card pricing failed")
        raise HTTPException(status_code=500, detail=str(e))

    # Still return the quote when no database is configured
    card_id = save_rate_card(input.profile, input.brief, pricing, compat.deal_quality.total_score)

    return {
        "success": True,
        "data": {
            "id": card_id,
            "saved": card_id is not None,
            "pricing": pricing,
            "deal_quality": compat.deal_quality,
        },
    }


@router.get("/rate-cards/{card_id}")
async def read_rate_card(card_id: int):
    card = get_rate_card(card_id)
    if card is None:
        raise HTTPException(status_code=404, detail=f"Rate card {card_id} not found")
    return {"success": True, "data": card}
