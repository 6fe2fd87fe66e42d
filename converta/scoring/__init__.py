"""
Marketability scoring.
"""
from converta.scoring.marketability import (
    METRIC_WEIGHTS,
    calculate_metrics,
    score_marketability,
)

__all__ = [
    "METRIC_WEIGHTS",
    "calculate_metrics",
    "score_marketability",
]
