"""Budget-constrained recommendation search."""

from ratecard.recommend.search import (
    STRATEGIES,
    find_recommendations,
    max_duration,
    max_impact,
    max_volume,
)

__all__ = [
    "STRATEGIES",
    "find_recommendations",
    "max_duration",
    "max_impact",
    "max_volume",
]
