"""Tests for campaign, breakdown, and recommendation models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ratecard.domain.models import WORLDWIDE_ID, CampaignConfiguration, Recommendation
from ratecard.domain.types import ArtistTier, CampaignType, RecommendationStrategy


class TestCampaignConfiguration:
    """Tests for the CampaignConfiguration model."""

    def test_defaults(self):
        config = CampaignConfiguration()
        assert config.artist_tier == ArtistTier.DEVELOPING
        assert config.campaign_type == CampaignType.ORGANIC
        assert config.duration_weeks == 4
        assert config.track_volume == 1
        assert config.is_viral is False
        assert config.billboard_hot_100 is False
        assert config.selected_territories == (WORLDWIDE_ID,)

    def test_accepts_enum_strings(self):
        config = CampaignConfiguration(artist_tier="Legacy", campaign_type="Paid")
        assert config.artist_tier == ArtistTier.LEGACY
        assert config.campaign_type == CampaignType.PAID

    def test_rejects_unknown_tier(self):
        with pytest.raises(ValidationError):
            CampaignConfiguration(artist_tier="Platinum")

    def test_float_followers_convert_exactly(self):
        config = CampaignConfiguration(brand_follower_count=1.2, artist_follower_count=0.1)
        assert config.brand_follower_count == Decimal("1.2")
        assert config.artist_follower_count == Decimal("0.1")

    def test_territory_list_becomes_tuple(self):
        config = CampaignConfiguration(selected_territories=["usa", "canada"])
        assert config.selected_territories == ("usa", "canada")

    def test_duration_has_no_upper_bound(self):
        config = CampaignConfiguration(duration_weeks=104)
        assert config.duration_weeks == 104

    def test_out_of_range_values_are_left_to_the_boundary(self):
        """The model does not range-check; the CLI/UI does."""
        config = CampaignConfiguration(duration_weeks=0, track_volume=0)
        assert config.duration_weeks == 0
        assert config.track_volume == 0

    def test_is_frozen(self):
        config = CampaignConfiguration()
        with pytest.raises(ValidationError):
            config.duration_weeks = 8  # type: ignore[misc]

    def test_equal_inputs_are_equal(self):
        assert CampaignConfiguration(track_volume=3) == CampaignConfiguration(track_volume=3)


class TestRecommendation:
    def test_is_frozen(self):
        rec = Recommendation(
            strategy=RecommendationStrategy.MAX_IMPACT,
            label="Max Impact",
            description="Legacy artist with Paid amplification for 4 weeks.",
            configuration=CampaignConfiguration(artist_tier=ArtistTier.LEGACY),
            price=Decimal("36680.77"),
            savings=Decimal("6473.08"),
        )
        with pytest.raises(ValidationError):
            rec.price = Decimal("0")  # type: ignore[misc]
