"""
End-to-end readiness assessment.

Runs the scorer, the compliance generator and the partner ranker over one
business profile. The scorer's result feeds the ranker as its analysis
scores; the other two components are independent of each other.
"""
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from converta.compliance import generate_compliance_recommendation
from converta.matching import build_partner_recommendations, rank_partners
from converta.models import (
    BusinessContext,
    BusinessProfile,
    ComplianceRecommendation,
    MarketabilityResult,
    Partner,
    PartnerRecommendation,
    PartnerWithScore,
)
from converta.scoring import score_marketability
from converta.utils.logging import get_logger

logger = get_logger(__name__)


class ReadinessReport(BaseModel):
    """Everything the engine produces for one business."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    marketability: MarketabilityResult
    compliance: ComplianceRecommendation
    ranked_partners: list[PartnerWithScore] = Field(default_factory=list)
    recommendations: list[PartnerRecommendation] = Field(default_factory=list)


def build_business_context(
    profile: BusinessProfile,
    marketability: MarketabilityResult | None = None,
) -> BusinessContext:
    """Ranker context for a profile, carrying the scorer's result when known."""
    return BusinessContext(
        industry=profile.industry,
        company_size=profile.company_size,
        business_description=profile.description or None,
        analysis_scores=marketability,
    )


def assess_business(
    profile: BusinessProfile | Mapping[str, Any],
    partners: Iterable[Partner | Mapping[str, Any]] | None = None,
    current_year: int | None = None,
) -> ReadinessReport:
    """
    Assess a business for UK market entry.

    Args:
        profile: Business profile, or the raw form payload for one
        partners: Partner catalog to rank (no partners when omitted)
        current_year: Pin the year used for years-in-business

    Returns:
        ReadinessReport with scores, compliance plan and partner matches
    """
    if not isinstance(profile, BusinessProfile):
        profile = BusinessProfile.model_validate(profile)

    marketability = score_marketability(profile, current_year=current_year)
    compliance = generate_compliance_recommendation(profile)

    context = build_business_context(profile, marketability)
    ranked = rank_partners(partners or [], context)
    recommendations = build_partner_recommendations(ranked, marketability)

    logger.info(
        "business_assessed",
        industry=profile.industry,
        overall_score=marketability.overall_score,
        company_type=compliance.recommended_company_type,
        partners_ranked=len(ranked),
        recommendation_categories=len(recommendations),
    )

    return ReadinessReport(
        marketability=marketability,
        compliance=compliance,
        ranked_partners=ranked,
        recommendations=recommendations,
    )
