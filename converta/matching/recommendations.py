"""
Category-level partner recommendations.

Groups ranked partners by the kind of help they offer, tags each group
with how urgently the business needs it, and orders the groups so the most
pressing needs come first.
"""
from collections.abc import Iterable, Mapping
from typing import Any

from converta.config import settings
from converta.models.partners import (
    PartnerCategory,
    PartnerRecommendation,
    PartnerWithScore,
    ScoreBreakdown,
    Urgency,
)
from converta.utils.logging import get_logger

logger = get_logger(__name__)


URGENCY_ORDER: dict[Urgency, int] = {
    Urgency.HIGH: 3,
    Urgency.MEDIUM: 2,
    Urgency.LOW: 1,
}

# category -> (high-urgency below, medium-urgency below)
URGENCY_THRESHOLDS: dict[str, tuple[int, int]] = {
    PartnerCategory.LEGAL.value: (50, 70),
    PartnerCategory.ACCOUNTING.value: (60, 75),
    PartnerCategory.MARKETING.value: (55, 70),
    PartnerCategory.CONSULTING.value: (65, 80),
    PartnerCategory.BUSINESS_DEVELOPMENT.value: (65, 80),
    PartnerCategory.LOGISTICS.value: (60, 75),
    PartnerCategory.COMPLIANCE.value: (40, 65),
}

CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    PartnerCategory.LEGAL.value: "Legal & Regulatory Affairs",
    PartnerCategory.ACCOUNTING.value: "Accounting & Tax Advisory",
    PartnerCategory.MARKETING.value: "Marketing & Digital Presence",
    PartnerCategory.CONSULTING.value: "Strategic Business Consulting",
    PartnerCategory.BUSINESS_DEVELOPMENT.value: "Business Development",
    PartnerCategory.LOGISTICS.value: "Supply Chain & Logistics",
    PartnerCategory.COMPLIANCE.value: "Industry Compliance & Certification",
}

# Categories that list three partners instead of two
WIDE_CATEGORIES = frozenset({PartnerCategory.LEGAL.value, PartnerCategory.ACCOUNTING.value})
WIDE_TOP_N = 3
DEFAULT_TOP_N = 2

MAX_REASONS = 2
FALLBACK_REASON = "Verified partners ready to support your UK market entry."


def category_display_name(category: str) -> str:
    if category in CATEGORY_DISPLAY_NAMES:
        return CATEGORY_DISPLAY_NAMES[category]
    return category[:1].upper() + category[1:]


def _urgency_metric(category: str, scores: ScoreBreakdown) -> float | None:
    if category == PartnerCategory.LEGAL.value:
        return scores.regulatory_compatibility
    if category == PartnerCategory.ACCOUNTING.value:
        return scores.investment_score
    if category == PartnerCategory.MARKETING.value:
        present = [
            value for value in (scores.digital_readiness, scores.product_market_fit)
            if value is not None
        ]
        return min(present) if present else None
    if category in (PartnerCategory.CONSULTING.value, PartnerCategory.BUSINESS_DEVELOPMENT.value):
        return scores.overall_score
    if category == PartnerCategory.LOGISTICS.value:
        return scores.logistics_viability
    if category == PartnerCategory.COMPLIANCE.value:
        return scores.regulatory_compatibility
    return None


def determine_urgency(category: str, scores: ScoreBreakdown | None) -> Urgency:
    """How urgently a business needs a category of partner, given its scores."""
    thresholds = URGENCY_THRESHOLDS.get(category)
    if thresholds is None or scores is None:
        return Urgency.LOW

    value = _urgency_metric(category, scores)
    if value is None:
        return Urgency.LOW

    high_below, medium_below = thresholds
    if value < high_below:
        return Urgency.HIGH
    if value < medium_below:
        return Urgency.MEDIUM
    return Urgency.LOW


def sort_recommendations(
    recommendations: Iterable[PartnerRecommendation],
) -> list[PartnerRecommendation]:
    """
    Order recommendations by urgency (high first), then match score descending.

    A missing urgency sorts as low and a missing match score as zero.
    """
    return sorted(
        recommendations,
        key=lambda rec: (
            URGENCY_ORDER[rec.urgency or Urgency.LOW],
            rec.match_score or 0.0,
        ),
        reverse=True,
    )


def _combined_reason(matches: list[PartnerWithScore]) -> str:
    reasons: list[str] = []
    for match in matches:
        for reason in match.match_reasons:
            if reason not in reasons:
                reasons.append(reason)
    if not reasons:
        return FALLBACK_REASON
    return ". ".join(reasons[:MAX_REASONS]) + "."


def build_partner_recommendations(
    scored_partners: Iterable[PartnerWithScore],
    scores: ScoreBreakdown | Mapping[str, Any] | Any = None,
    min_score: int | None = None,
) -> list[PartnerRecommendation]:
    """
    Group ranked partners into per-category recommendations.

    Args:
        scored_partners: Output of rank_partners (already sorted)
        scores: Prior analysis scores (MarketabilityResult, metrics or mapping)
        min_score: Partners must score above this (default from settings)

    Returns:
        Recommendations ordered by urgency then match score
    """
    floor = settings.recommendation_min_score if min_score is None else min_score
    breakdown = None
    if scores is not None:
        breakdown = scores if isinstance(scores, ScoreBreakdown) else ScoreBreakdown.model_validate(scores)

    groups: dict[str, list[PartnerWithScore]] = {}
    for partner in scored_partners:
        if partner.relevance_score > floor:
            groups.setdefault(partner.category, []).append(partner)

    recommendations = []
    for category, matches in groups.items():
        top_n = WIDE_TOP_N if category in WIDE_CATEGORIES else DEFAULT_TOP_N
        top = matches[:top_n]
        recommendations.append(PartnerRecommendation(
            category=category_display_name(category),
            partners=[
                partner.model_dump(exclude={"relevance_score", "match_reasons"})
                for partner in top
            ],
            reason=_combined_reason(top),
            urgency=determine_urgency(category, breakdown),
            match_score=sum(p.relevance_score for p in top) / len(top),
        ))

    ordered = sort_recommendations(recommendations)

    logger.info(
        "partner_recommendations_built",
        categories=len(ordered),
        high_urgency=sum(1 for rec in ordered if rec.urgency == Urgency.HIGH),
    )
    return ordered
