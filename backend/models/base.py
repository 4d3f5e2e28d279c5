from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON
from database import Base


class RateCard(Base):
    __tablename__ = "rate_cards"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    creator_name = Column(String(255), nullable=True)
    brand_name = Column(String(255), nullable=True, index=True)
    platform = Column(String(50), index=True)
    content_format = Column(String(50))
    tier = Column(String(20), nullable=True)
    profile_snapshot = Column(JSON)
    brief_snapshot = Column(JSON)
    pricing_result = Column(JSON)
    deal_quality_score = Column(Integer, nullable=True)
    total_price = Column(Integer)
    original_total = Column(Integer, nullable=True)  # set when the quote was overridden
    currency = Column(String(10), default="USD")


class GiftDeal(Base):
    __tablename__ = "gift_deals"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    brand_name = Column(String(255), nullable=True, index=True)
    product_description = Column(String(1000))
    product_value = Column(Integer)
    evaluation_result = Column(JSON)
    worth_score = Column(Integer)
    recommendation = Column(String(20))
    response_type = Column(String(30))
