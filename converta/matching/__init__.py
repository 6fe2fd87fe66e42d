"""
Partner ranking, filtering and category-level recommendations.
"""
from converta.matching.ranker import (
    apply_filters,
    filter_by_category,
    filter_by_relevance_threshold,
    filter_by_search,
    list_categories,
    rank_partners,
    score_partner,
)
from converta.matching.recommendations import (
    build_partner_recommendations,
    determine_urgency,
    sort_recommendations,
)

__all__ = [
    "apply_filters",
    "build_partner_recommendations",
    "determine_urgency",
    "filter_by_category",
    "filter_by_relevance_threshold",
    "filter_by_search",
    "list_categories",
    "rank_partners",
    "score_partner",
    "sort_recommendations",
]
