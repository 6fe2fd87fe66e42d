"""
Marketability scoring for UK market entry.

Maps a business profile to six weighted sub-scores, an overall readiness
score and a short list of insights. Pure and deterministic: the only
ambient input is the current year, which callers can pin.
"""
import math
from collections.abc import Mapping
from datetime import date
from typing import Any

from converta.models.business import (
    Budget,
    BusinessProfile,
    CompanySize,
    RevenueBand,
    Timeline,
)
from converta.models.results import (
    ConfidenceLevel,
    MarketabilityMetrics,
    MarketabilityResult,
)
from converta.utils.logging import get_logger

logger = get_logger(__name__)

# Trend keyword groups, matched as lower-case substrings of the product text
MARKET_TREND_KEYWORDS: dict[str, tuple[str, ...]] = {
    "sustainability": ("sustainable", "eco-friendly", "green", "renewable", "carbon",
                       "environmental", "organic", "ethical"),
    "technology": ("ai", "digital", "software", "tech", "automation", "iot",
                   "blockchain", "fintech"),
    "convenience": ("delivery", "instant", "mobile", "app", "online", "quick",
                    "easy", "convenient"),
    "health": ("health", "wellness", "fitness", "medical", "healthcare",
               "nutrition", "therapy"),
    "luxury": ("premium", "luxury", "high-end", "exclusive", "artisan",
               "handmade", "bespoke"),
}

HIGH_DEMAND_INDUSTRIES = frozenset({"technology", "healthcare", "food-beverage", "retail", "services"})
REGULATED_INDUSTRIES = frozenset({"healthcare", "food-beverage", "automotive", "construction"})
SCALABLE_INDUSTRIES = frozenset({"technology", "services", "retail"})

METRIC_WEIGHTS: dict[str, float] = {
    "product_market_fit": 0.25,
    "regulatory_compatibility": 0.15,
    "logistics_viability": 0.20,
    "digital_readiness": 0.15,
    "scalability_potential": 0.15,
    "founder_advantage": 0.10,
}

# Same weights in whole percent, so the weighted sum stays exact
METRIC_WEIGHT_PERCENT: dict[str, int] = {
    "product_market_fit": 25,
    "regulatory_compatibility": 15,
    "logistics_viability": 20,
    "digital_readiness": 15,
    "scalability_potential": 15,
    "founder_advantage": 10,
}

# Categorical lookups; a missing or unrecognised bucket takes the *_DEFAULT value
REVENUE_DEMAND_POINTS: dict[RevenueBand, int] = {
    RevenueBand.UNDER_50K: 5,
    RevenueBand.UP_TO_250K: 10,
    RevenueBand.UP_TO_1M: 15,
    RevenueBand.UP_TO_5M: 20,
    RevenueBand.OVER_5M: 25,
}
REVENUE_DEMAND_DEFAULT = 5

REVENUE_GROWTH_POINTS: dict[RevenueBand, int] = {
    RevenueBand.UNDER_50K: 5,
    RevenueBand.UP_TO_250K: 15,
    RevenueBand.UP_TO_1M: 25,
    RevenueBand.UP_TO_5M: 30,
    RevenueBand.OVER_5M: 35,
}
REVENUE_GROWTH_DEFAULT = 5

COMPANY_SIZE_POINTS: dict[CompanySize, int] = {
    CompanySize.MICRO: 10,
    CompanySize.SMALL: 20,
    CompanySize.MEDIUM: 30,
    CompanySize.LARGE: 35,
}
COMPANY_SIZE_DEFAULT = 10

# Shorter timelines signal more ambition
TIMELINE_POINTS: dict[Timeline, int] = {
    Timeline.SHORT: 30,
    Timeline.MEDIUM: 25,
    Timeline.LONG: 15,
    Timeline.EXTENDED: 10,
}
TIMELINE_DEFAULT = 10

BUDGET_POINTS: dict[Budget, int] = {
    Budget.UNDER_10K: 5,
    Budget.UP_TO_50K: 10,
    Budget.UP_TO_100K: 15,
    Budget.OVER_100K: 20,
}
BUDGET_DEFAULT = 5

# Thresholds for the insight rules
REGULATORY_RISK_BELOW = 50
DIGITAL_RISK_BELOW = 40
LOGISTICS_RISK_BELOW = 50
IMPROVEMENT_BELOW = 60
STRONG_FIT_ABOVE = 70
SCALABLE_ABOVE = 60
STRONG_DIGITAL_ABOVE = 70
HIGH_CONFIDENCE_AT = 75
LOW_CONFIDENCE_BELOW = 50


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round to an integer score."""
    return round_half_up(max(0.0, min(float(value), 100.0)))


def keyword_relevance(text: str, keywords: tuple[str, ...]) -> float:
    """Share of a keyword group present in the text, capped at 1."""
    if not keywords:
        return 0.0
    normalized = text.lower()
    matches = sum(1 for keyword in keywords if keyword in normalized)
    return min(matches / len(keywords), 1.0)


def lookup_points(table: dict, bucket, default: int) -> int:
    """Points for a categorical bucket, or the default when it has no entry."""
    if bucket is None:
        return default
    return table.get(bucket, default)


def maturity_points(years_in_business: int) -> int:
    """Tiered bonus for years trading."""
    if years_in_business >= 5:
        return 30
    if years_in_business >= 2:
        return 20
    if years_in_business >= 1:
        return 10
    return 0


def calculate_product_market_fit(profile: BusinessProfile) -> int:
    score = 30 if profile.industry_key in HIGH_DEMAND_INDUSTRIES else 15

    product_text = f"{profile.description} {profile.products}"
    trend_score = sum(
        keyword_relevance(product_text, keywords) * 5
        for keywords in MARKET_TREND_KEYWORDS.values()
    )
    score += min(trend_score, 25)

    score += min(len(profile.current_markets) * 5, 20)
    score += lookup_points(REVENUE_DEMAND_POINTS, profile.annual_revenue, REVENUE_DEMAND_DEFAULT)

    return clamp_score(score)


def calculate_regulatory_compatibility(profile: BusinessProfile) -> int:
    score = 50
    if profile.industry_key in REGULATED_INDUSTRIES:
        score -= 20
    score += min(len(profile.regulatory_compliance) * 10, 30)
    score += min(len(profile.quality_certifications) * 10, 20)
    return clamp_score(score)


def calculate_logistics_viability(profile: BusinessProfile) -> int:
    score = 40
    score += lookup_points(COMPANY_SIZE_POINTS, profile.company_size, COMPANY_SIZE_DEFAULT)
    score += min(len(profile.digital_presence) * 8, 25)
    if profile.has_online_store:
        score += 15
    if profile.has_ecommerce_platform:
        score += 15
    # Already selling internationally
    if len(profile.current_markets) > 1:
        score += 15
    return clamp_score(score)


def calculate_digital_readiness(profile: BusinessProfile) -> int:
    score = 20
    if profile.website:
        score += 25
    if profile.has_english_website:
        score += 20
    score += min(len(profile.digital_presence) * 8, 30)
    if profile.has_online_store:
        score += 15
    if profile.has_ecommerce_platform:
        score += 10
    return clamp_score(score)


def calculate_scalability_potential(profile: BusinessProfile) -> int:
    score = 30
    score += 25 if profile.industry_key in SCALABLE_INDUSTRIES else 10
    score += lookup_points(REVENUE_GROWTH_POINTS, profile.annual_revenue, REVENUE_GROWTH_DEFAULT)
    score += lookup_points(TIMELINE_POINTS, profile.timeline, TIMELINE_DEFAULT)
    return clamp_score(score)


def calculate_founder_advantage(profile: BusinessProfile, current_year: int) -> int:
    score = 40
    score += maturity_points(profile.years_in_business(current_year))
    score += min(len(profile.current_markets) * 5, 20)
    score += lookup_points(BUDGET_POINTS, profile.budget, BUDGET_DEFAULT)
    return clamp_score(score)


def calculate_metrics(profile: BusinessProfile, current_year: int) -> MarketabilityMetrics:
    """Compute all six sub-scores for a profile."""
    return MarketabilityMetrics(
        product_market_fit=calculate_product_market_fit(profile),
        regulatory_compatibility=calculate_regulatory_compatibility(profile),
        logistics_viability=calculate_logistics_viability(profile),
        digital_readiness=calculate_digital_readiness(profile),
        scalability_potential=calculate_scalability_potential(profile),
        founder_advantage=calculate_founder_advantage(profile, current_year),
    )


def weighted_overall_score(metrics: MarketabilityMetrics) -> int:
    """Weighted sum of the sub-scores, rounded half-up to an integer."""
    total = sum(
        getattr(metrics, name) * percent for name, percent in METRIC_WEIGHT_PERCENT.items()
    )
    return max(0, min((total + 50) // 100, 100))


def confidence_for(overall_score: int) -> ConfidenceLevel:
    if overall_score >= HIGH_CONFIDENCE_AT:
        return ConfidenceLevel.HIGH
    if overall_score < LOW_CONFIDENCE_BELOW:
        return ConfidenceLevel.LOW
    return ConfidenceLevel.MEDIUM


def generate_insights(
    metrics: MarketabilityMetrics,
) -> tuple[list[str], list[str], list[str]]:
    """
    Apply the fixed insight rules in order.

    Returns:
        (risk_factors, opportunities, recommendations)
    """
    risks: list[str] = []
    opportunities: list[str] = []
    recommendations: list[str] = []

    if metrics.regulatory_compatibility < REGULATORY_RISK_BELOW:
        risks.append("Regulatory compliance requirements may pose challenges")
    if metrics.digital_readiness < DIGITAL_RISK_BELOW:
        risks.append("Limited digital presence may hinder market entry")
    if metrics.logistics_viability < LOGISTICS_RISK_BELOW:
        risks.append("Logistics and supply chain complexities need attention")

    if metrics.product_market_fit > STRONG_FIT_ABOVE:
        opportunities.append("Strong product-market fit indicates high demand potential")
    if metrics.scalability_potential > SCALABLE_ABOVE:
        opportunities.append("Business model shows excellent scalability prospects")
    if metrics.digital_readiness > STRONG_DIGITAL_ABOVE:
        opportunities.append("Strong digital foundation enables rapid market penetration")

    if metrics.digital_readiness < IMPROVEMENT_BELOW:
        recommendations.append("Invest in digital marketing and online presence enhancement")
    if metrics.regulatory_compatibility < IMPROVEMENT_BELOW:
        recommendations.append("Consult with regulatory experts to ensure compliance readiness")
    if metrics.logistics_viability < IMPROVEMENT_BELOW:
        recommendations.append("Develop strategic partnerships for logistics and distribution")

    return risks, opportunities, recommendations


def score_marketability(
    profile: BusinessProfile | Mapping[str, Any],
    current_year: int | None = None,
) -> MarketabilityResult:
    """
    Score a business's readiness to enter the UK market.

    Args:
        profile: Business profile, or the raw form payload for one
        current_year: Year used to compute years in business (defaults to today)

    Returns:
        A fresh MarketabilityResult
    """
    if not isinstance(profile, BusinessProfile):
        profile = BusinessProfile.model_validate(profile)
    year = current_year if current_year is not None else date.today().year

    metrics = calculate_metrics(profile, year)
    overall = weighted_overall_score(metrics)
    risks, opportunities, recommendations = generate_insights(metrics)
    confidence = confidence_for(overall)

    logger.info(
        "marketability_scored",
        industry=profile.industry,
        overall_score=overall,
        confidence=confidence.value,
        risk_count=len(risks),
    )

    return MarketabilityResult(
        overall_score=overall,
        metrics=metrics,
        risk_factors=tuple(risks),
        opportunities=tuple(opportunities),
        recommendations=tuple(recommendations),
        confidence_level=confidence,
    )
