"""
Partner relevance ranking.

Scores every partner in a catalog against what we know about a business,
then sorts and filters the scored list. Each partner is scored on its own,
so ranking is linear in the catalog size and safe to parallelise.
"""
from collections.abc import Iterable, Mapping
from typing import Any

from converta.config import settings
from converta.models.partners import (
    BusinessContext,
    Partner,
    PartnerCategory,
    PartnerWithScore,
    ScoreBreakdown,
)
from converta.utils.logging import get_logger

logger = get_logger(__name__)

# (points, reason) for a single scoring rule; reason is None when nothing matched
RuleScore = tuple[int, str | None]

BASE_SCORE = 10

# Industry keyword -> partner categories a business in that industry needs most.
# Checked in order; the first key found inside the industry wins.
INDUSTRY_PRIORITIES: dict[str, tuple[str, ...]] = {
    "healthcare": ("compliance", "legal", "consulting"),
    "medical": ("compliance", "legal", "consulting"),
    "pharmaceutical": ("compliance", "legal", "consulting"),
    "finance": ("legal", "compliance", "accounting"),
    "fintech": ("legal", "compliance", "accounting"),
    "technology": ("legal", "marketing", "consulting"),
    "software": ("legal", "marketing", "consulting"),
    "retail": ("logistics", "marketing", "accounting"),
    "e-commerce": ("logistics", "marketing", "accounting"),
    "manufacturing": ("logistics", "compliance", "legal"),
    "food": ("compliance", "legal", "logistics"),
    "automotive": ("compliance", "legal", "logistics"),
}

SMALL_BUSINESS_SIZES = frozenset({"1-10", "11-50"})
LARGE_BUSINESS_SIZES = frozenset({"200+"})
UK_LOCATION_MARKERS = ("uk", "london", "england")

MIN_KEYWORD_LENGTH = 5
STRONG_ALIGNMENT_MATCHES = 3


def get_industry_priorities(industry: str) -> tuple[str, ...]:
    """Preferred partner categories for an industry, or () when none apply."""
    industry_lower = industry.lower()
    for key, categories in INDUSTRY_PRIORITIES.items():
        if key in industry_lower:
            return categories
    return ()


def score_industry_match(industry: str, partner: Partner) -> RuleScore:
    if industry.lower() in partner.searchable_text:
        return 25, f"{industry} industry expertise"
    return 0, None


def score_industry_priority(industry: str, partner: Partner) -> RuleScore:
    if partner.category in get_industry_priorities(industry):
        return 15, f"High priority for {industry} businesses"
    return 0, None


def score_size_match(company_size: str, partner: Partner) -> RuleScore:
    description = partner.description.lower()
    size = company_size.strip().lower()

    if "sme" in description or "small business" in description:
        if size in SMALL_BUSINESS_SIZES or "small" in size:
            return 10, "Specializes in small businesses"

    if "enterprise" in description or "large company" in description:
        if size in LARGE_BUSINESS_SIZES or "large" in size:
            return 10, "Enterprise-focused services"

    return 0, None


def score_keyword_match(business_description: str, partner: Partner) -> RuleScore:
    """Count description words of five or more letters found in the partner's text."""
    partner_text = partner.searchable_text
    matches = sum(
        1 for word in business_description.lower().split()
        if len(word) >= MIN_KEYWORD_LENGTH and word in partner_text
    )
    if matches >= STRONG_ALIGNMENT_MATCHES:
        return 8, "Strong business alignment"
    if matches > 0:
        return 4, "Business relevance"
    return 0, None


def score_urgency_match(scores: ScoreBreakdown, category: str) -> RuleScore:
    """Bonus for categories that address a weak spot in the prior analysis."""
    if category == PartnerCategory.LEGAL.value:
        regulatory = scores.regulatory_compatibility
        if regulatory is not None and regulatory < 50:
            return 20, "Critical legal gaps identified"
        if regulatory is not None and regulatory < 70:
            return 10, "Legal improvements needed"

    elif category == PartnerCategory.ACCOUNTING.value:
        investment = scores.investment_score
        if investment is not None and investment < 60:
            return 15, "Financial structuring required"

    elif category == PartnerCategory.MARKETING.value:
        digital = scores.digital_readiness
        fit = scores.product_market_fit
        if (digital is not None and digital < 60) or (fit is not None and fit < 60):
            return 12, "Marketing optimization needed"

    return 0, None


def score_specialty_breadth(partner: Partner) -> RuleScore:
    if len(partner.specialties) > 3:
        return 5, "Comprehensive service portfolio"
    return 0, None


def score_location(partner: Partner) -> RuleScore:
    location = (partner.location or "").lower()
    if any(marker in location for marker in UK_LOCATION_MARKERS):
        return 8, "UK-based with local market knowledge"
    return 0, None


def score_partner(partner: Partner, context: BusinessContext | None = None) -> PartnerWithScore:
    """
    Score one partner against a business.

    Rules are additive and the total is unbounded. Without a context only
    the base score, specialty breadth and UK location apply.
    """
    rules: list[RuleScore] = [(BASE_SCORE, None)]

    if context is not None:
        if context.industry:
            rules.append(score_industry_match(context.industry, partner))
            rules.append(score_industry_priority(context.industry, partner))
        if context.company_size:
            rules.append(score_size_match(context.company_size, partner))
        if context.business_description:
            rules.append(score_keyword_match(context.business_description, partner))
        if context.analysis_scores is not None:
            rules.append(score_urgency_match(context.analysis_scores, partner.category))

    rules.append(score_specialty_breadth(partner))
    rules.append(score_location(partner))

    return PartnerWithScore(
        **partner.model_dump(exclude={"relevance_score", "match_reasons"}),
        relevance_score=sum(points for points, _ in rules),
        match_reasons=[reason for _, reason in rules if reason],
    )


def _as_partner(partner: Partner | Mapping[str, Any]) -> Partner:
    if isinstance(partner, Partner):
        return partner
    return Partner.model_validate(partner)


def _as_context(context: BusinessContext | Mapping[str, Any] | None) -> BusinessContext | None:
    if context is None or isinstance(context, BusinessContext):
        return context
    return BusinessContext.model_validate(context)


def rank_partners(
    partners: Iterable[Partner | Mapping[str, Any]],
    context: BusinessContext | Mapping[str, Any] | None = None,
) -> list[PartnerWithScore]:
    """
    Score every partner and sort by relevance, highest first.

    Partners with equal scores keep their catalog order.

    Args:
        partners: Partner catalog (models or raw directory rows)
        context: Optional business context to match against

    Returns:
        New list of scored partners
    """
    business = _as_context(context)
    scored = [score_partner(_as_partner(partner), business) for partner in partners]
    ranked = sorted(scored, key=lambda p: p.relevance_score, reverse=True)

    logger.info(
        "partners_ranked",
        partner_count=len(ranked),
        has_context=business is not None,
        top_score=ranked[0].relevance_score if ranked else None,
    )
    return ranked


def filter_by_search(partners: list[PartnerWithScore], query: str | None) -> list[PartnerWithScore]:
    """Case-insensitive substring search across name, description, specialties and category."""
    if not query:
        return list(partners)
    needle = query.lower()
    return [
        partner for partner in partners
        if needle in partner.name.lower()
        or needle in partner.description.lower()
        or any(needle in specialty.lower() for specialty in partner.specialties)
        or needle in partner.category.lower()
    ]


def filter_by_category(partners: list[PartnerWithScore], category: str | None) -> list[PartnerWithScore]:
    """Exact category match; no category keeps everything."""
    if not category:
        return list(partners)
    return [partner for partner in partners if partner.category == category]


def filter_by_relevance_threshold(
    partners: list[PartnerWithScore],
    threshold: int | None = None,
) -> list[PartnerWithScore]:
    """Keep partners scoring strictly above the threshold (default from settings)."""
    limit = settings.relevance_threshold if threshold is None else threshold
    return [partner for partner in partners if partner.relevance_score > limit]


def apply_filters(
    partners: list[PartnerWithScore],
    search: str | None = None,
    category: str | None = None,
    only_relevant: bool = False,
) -> list[PartnerWithScore]:
    """Combine the search, category and relevance filters with logical AND."""
    filtered = filter_by_search(partners, search)
    filtered = filter_by_category(filtered, category)
    if only_relevant:
        filtered = filter_by_relevance_threshold(filtered)
    return filtered


def list_categories(partners: Iterable[Partner]) -> list[str]:
    """Distinct partner categories in first-seen order."""
    seen: dict[str, None] = {}
    for partner in partners:
        seen.setdefault(partner.category, None)
    return list(seen)
