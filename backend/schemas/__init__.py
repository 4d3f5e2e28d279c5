from schemas.creator import PlatformMetrics, GenderSplit, AudienceDemographics, CreatorProfile
from schemas.brief import (
    BriefBrand, BriefCampaign, BriefContent, BriefUsageRights, BriefTimeline,
    AffiliateConfig, PerformanceConfig, MonthlyDeliverables, AmbassadorPerks, RetainerConfig,
    ParsedBrief,
)
from schemas.tier import TierInfo
from schemas.quick_estimate import (
    QuickEstimateRequest, QuickEstimateInput, RateRange, MissingFactor, RateInfluencer,
    QuickEstimateResult,
)
from schemas.deal_quality import (
    DealQualityInput, DealQualityComponent, DealQualityBreakdown, DealQualityResult,
    FitScoreComponent, FitScoreBreakdown, FitScoreResult, DealQualityWithCompat,
)
from schemas.pricing import (
    PricingLayer, AffiliateEarningsBreakdown, HybridPricingBreakdown, PerformanceBonusBreakdown,
    DeliverableRates, AmbassadorPerksBreakdown, RetainerPricingBreakdown, PricingResult,
    CalculateInput, RateCardInput,
)
from schemas.gift import (
    GiftEvaluationInput, GiftAnalysisBreakdown, GiftStrategicValue, GiftAcceptanceBoundaries,
    GiftEvaluation, GiftResponseContext, GiftResponse, EvaluateGiftRequest,
)
from schemas.contract import (
    ContractDealContext, ContractScanInput, ContractCategoryAnalysis, ContractCategories,
    FoundClause, MissingClause, ContractScanRedFlag, ContractScanResult,
    ContractChecklistItem, ContractRedFlag, ContractChecklistSummary, ContractChecklist,
)
from schemas.brand import (
    BrandVettingInput, SocialSignals, WebsiteSignals, CollaborationSignals, BrandSignals,
    CategoryScore, BrandVettingBreakdown, BrandFinding, BrandRedFlag, BrandVettingResult,
    VetBrandRequest,
)
