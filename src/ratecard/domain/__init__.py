"""Domain types, models, and errors for the rate card estimator."""

from ratecard.domain.errors import RateCardDataError, RateCardError, TerritoryDataError
from ratecard.domain.models import (
    WORLDWIDE_ID,
    Breakdown,
    CampaignConfiguration,
    Quote,
    Recommendation,
)
from ratecard.domain.types import (
    ARTIST_TIER_ORDER,
    ArtistTier,
    CampaignType,
    RecommendationStrategy,
    tiers_descending,
)

__all__ = [
    "ARTIST_TIER_ORDER",
    "WORLDWIDE_ID",
    "ArtistTier",
    "Breakdown",
    "CampaignConfiguration",
    "CampaignType",
    "Quote",
    "RateCardDataError",
    "RateCardError",
    "Recommendation",
    "RecommendationStrategy",
    "TerritoryDataError",
    "tiers_descending",
]
