"""Music licensing rate card estimator.

Prices licensing campaigns from a versioned rate card, adjusts them by
territory coverage, and searches for the best campaigns that fit a budget:

    from ratecard import CampaignConfiguration, build_quote, find_recommendations
"""

from ratecard.domain import (
    ArtistTier,
    Breakdown,
    CampaignConfiguration,
    CampaignType,
    Quote,
    Recommendation,
)
from ratecard.pricing import build_quote, compare_scenarios, compute_breakdown
from ratecard.recommend import find_recommendations
from ratecard.territory import coverage_percent, territory_label

__all__ = [
    "ArtistTier",
    "Breakdown",
    "CampaignConfiguration",
    "CampaignType",
    "Quote",
    "Recommendation",
    "build_quote",
    "compare_scenarios",
    "compute_breakdown",
    "coverage_percent",
    "find_recommendations",
    "territory_label",
]
