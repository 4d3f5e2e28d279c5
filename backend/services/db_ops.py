import logging

from database import get_db
from models import RateCard, GiftDeal
from schemas.creator import CreatorProfile
from schemas.brief import ParsedBrief
from schemas.pricing import PricingResult
from schemas.gift import GiftEvaluationInput, GiftEvaluation

logger = logging.getLogger(__name__)


def save_rate_card(
    profile: CreatorProfile,
    brief: ParsedBrief,
    pricing: PricingResult,
    deal_quality_score: int = None,
):
    """Save a priced quote. Returns the new id, or None without a database."""
    db = get_db()
    if db is None:
        return None  # No database configured

    try:
        card = RateCard(
            creator_name=profile.display_name or None,
            brand_name=brief.brand.name,
            platform=brief.content.platform,
            content_format=brief.content.format,
            tier=profile.tier,
            profile_snapshot=profile.model_dump(mode="json"),
            brief_snapshot=brief.model_dump(mode="json"),
            pricing_result=pricing.model_dump(mode="json"),
            deal_quality_score=deal_quality_score,
            total_price=pricing.total_price,
            original_total=pricing.original_total,
            currency=pricing.currency,
        )
        db.add(card)
        db.commit()
        db.refresh(card)
        return card.id
    except Exception as e:
        logger.error("Error saving rate card: %s", e)
        db.rollback()
        return None
    finally:
        db.close()


def get_rate_card(card_id: int):
    """Stored rate card as a dict, or None when missing or no database."""
    db = get_db()
    if db is None:
        return None

    try:
        card = db.query(RateCard).filter(RateCard.id == card_id).first()
        if card is None:
            return None
        return {
            "id": card.id,
            "created_at": card.created_at.isoformat() if card.created_at else None,
            "creator_name": card.creator_name,
            "brand_name": card.brand_name,
            "platform": card.platform,
            "content_format": card.content_format,
            "tier": card.tier,
            "pricing": card.pricing_result,
            "deal_quality_score": card.deal_quality_score,
            "total_price": card.total_price,
            "original_total": card.original_total,
            "currency": card.currency,
        }
    except Exception as e:
        logger.error("Error loading rate card %s: %s", card_id, e)
        return None
    finally:
        db.close()


def save_gift_deal(gift: GiftEvaluationInput, evaluation: GiftEvaluation):
    """Save an evaluated gift offer for follow-up tracking"""
    db = get_db()
    if db is None:
        return None

    try:
        deal = GiftDeal(
            brand_name=gift.brand_name,
            product_description=str(gift.product_description)[:1000],
            product_value=int(gift.estimated_product_value),
            evaluation_result=evaluation.model_dump(mode="json"),
            worth_score=evaluation.worth_score,
            recommendation=evaluation.recommendation,
            response_type=evaluation.response_type,
        )
        db.add(deal)
        db.commit()
        db.refresh(deal)
        return deal.id
    except Exception as e:
        logger.error("Error saving gift deal: %s", e)
        db.rollback()
        return None
    finally:
        db.close()
