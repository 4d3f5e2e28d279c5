import logging

from fastapi import APIRouter, HTTPException

from schemas.brief import ParsedBrief
from schemas.contract import ContractScanInput
from schemas.brand import VetBrandRequest, BrandVettingInput
from schemas.gift import EvaluateGiftRequest, GiftResponseContext
from services.brand_vetter import vet_brand, create_cache_key, get_trust_level_info
from services.cache import brand_vet_cache
from services.contract_checklist import get_contract_checklist
from services.contract_scanner import scan_contract
from services.db_ops import save_gift_deal
from services.errors import ValidationError
from services.gift_evaluator import evaluate_gift_deal, calculate_time_value
from services.gift_responses import generate_gift_response, get_response_type_description
from services.tiers import resolve_profile_tier
from services.validation import validate_vetting_input, validate_brief

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tools"])


# ============== GIFT EVALUATOR ==============

@router.post("/evaluate-gift")
async def evaluate_gift(input: EvaluateGiftRequest):
    """Score a product-for-content offer and draft the reply"""
    try:
        evaluation = evaluate_gift_deal(input.gift, input.profile)
        context = input.context or GiftResponseContext()
        # Quote the same full rate as the suggested counter offer
        defaults = {
            "brand_name": input.gift.brand_name,
            "product_name": input.gift.product_description,
            "creator_rate": calculate_time_value(
                input.gift.estimated_hours_to_create, resolve_profile_tier(input.profile)
            ),
        }
        context = context.model_copy(update={
            field: value for field, value in defaults.items() if getattr(context, field) is None
        })
        reply = generate_gift_response(evaluation, context)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Gift evaluation failed")
        raise HTTPException(status_code=500, detail=str(e))

    gift_id = save_gift_deal(input.gift, evaluation) if input.save else None

    return {
        "success": True,
        "data": {
            "evaluation": evaluation,
            "response": reply,
            "response_type_info": get_response_type_description(evaluation.response_type),
            "gift_id": gift_id,
        },
    }


# ============== CONTRACT SCANNER ==============

@router.post("/scan-contract")
async def scan_contract_text(input: ContractScanInput):
    """Score a contract's health and draft a change request"""
    try:
        result = scan_contract(input)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Contract scan failed")
        raise HTTPException(status_code=500, detail=str(e))

    return {"success": True, "data": result}


@router.get("/contract-checklist")
async def contract_checklist():
    """Generic pre-signing checklist"""
    return {"success": True, "data": get_contract_checklist()}


@router.post("/contract-checklist")
async def contract_checklist_for_brief(brief: ParsedBrief):
    """Checklist with items and red flags highlighted for this brief"""
    try:
        validate_brief(brief)
        checklist = get_contract_checklist(brief)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "data": checklist}


# ============== BRAND VETTER ==============

@router.post("/vet-brand")
async def vet_brand_endpoint(input: VetBrandRequest):
    """
    Trust score for a brand. Results are cached for the rest of the day;
    requests that bring their own signals bypass the cache.
    """
    brand = BrandVettingInput(**input.model_dump(exclude={"signals"}))
    try:
        validate_vetting_input(brand)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    cache_key = create_cache_key(brand)
    if input.signals is None:
        cached = brand_vet_cache.get(cache_key)
        if cached is not None:
            return {
                "success": True,
                "data": cached,
                "trust_level_info": get_trust_level_info(cached.trust_level),
            }

    try:
        result = await vet_brand(brand, signals=input.signals)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Brand vetting failed")
        raise HTTPException(status_code=500, detail="Failed to vet brand. Please try again or contact support.")

    if input.signals is None:
        brand_vet_cache.set(cache_key, result)

    return {
        "success": True,
        "data": result,
        "trust_level_info": get_trust_level_info(result.trust_level),
    }
