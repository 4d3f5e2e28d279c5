from models.base import RateCard, GiftDeal
