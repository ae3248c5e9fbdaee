"""Shared pytest fixtures for the rate card test suite."""

from collections.abc import Iterator
from decimal import Decimal

import pytest
import structlog

from ratecard.config import get_settings
from ratecard.domain.models import CampaignConfiguration
from ratecard.domain.types import ArtistTier, CampaignType
from ratecard.pricing.rate_tables import DEFAULT_RATE_TABLES, RateTables, get_rate_tables
from ratecard.territory.aggregator import TerritoryAggregator, get_territory_aggregator
from ratecard.territory.tree import DEFAULT_TERRITORIES, TerritoryIndex


@pytest.fixture(autouse=True)
def _captured_logs() -> Iterator[list[dict]]:
    """Keep log events out of stdout and make them inspectable."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def _clear_cached_config() -> Iterator[None]:
    """Reset cached settings, rate card, and territory tree around each test."""
    get_settings.cache_clear()
    get_rate_tables.cache_clear()
    get_territory_aggregator.cache_clear()
    yield
    get_settings.cache_clear()
    get_rate_tables.cache_clear()
    get_territory_aggregator.cache_clear()


@pytest.fixture
def rate_tables() -> RateTables:
    """The built-in rate card."""
    return DEFAULT_RATE_TABLES


@pytest.fixture
def aggregator() -> TerritoryAggregator:
    """An aggregator over the built-in territory tree."""
    return TerritoryAggregator(TerritoryIndex(DEFAULT_TERRITORIES))


@pytest.fixture
def baseline_config() -> CampaignConfiguration:
    """Cheapest standard campaign: Developing, Organic, 4 weeks, one track."""
    return CampaignConfiguration(
        artist_tier=ArtistTier.DEVELOPING,
        campaign_type=CampaignType.ORGANIC,
        duration_weeks=4,
        billboard_hot_100=False,
        brand_follower_count=Decimal("0"),
        artist_follower_count=Decimal("0"),
        track_volume=1,
        is_viral=False,
    )
