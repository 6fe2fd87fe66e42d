"""
Data model for the readiness engine.
"""
from converta.models.business import (
    Budget,
    BusinessProfile,
    BusinessType,
    CompanySize,
    RevenueBand,
    Timeline,
    normalize_industry,
)
from converta.models.partners import (
    BusinessContext,
    Partner,
    PartnerCategory,
    PartnerRecommendation,
    PartnerWithScore,
    ScoreBreakdown,
    Urgency,
)
from converta.models.results import (
    ComplianceEvent,
    ComplianceRecommendation,
    ConfidenceLevel,
    CustomsRequirement,
    MarketabilityMetrics,
    MarketabilityResult,
    ProductStandard,
)

__all__ = [
    "Budget",
    "BusinessContext",
    "BusinessProfile",
    "BusinessType",
    "CompanySize",
    "ComplianceEvent",
    "ComplianceRecommendation",
    "ConfidenceLevel",
    "CustomsRequirement",
    "MarketabilityMetrics",
    "MarketabilityResult",
    "Partner",
    "PartnerCategory",
    "PartnerRecommendation",
    "PartnerWithScore",
    "ProductStandard",
    "RevenueBand",
    "ScoreBreakdown",
    "Timeline",
    "Urgency",
    "normalize_industry",
]
