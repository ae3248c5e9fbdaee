"""Pydantic v2 models for campaign inputs, price breakdowns and recommendations."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from ratecard.domain.types import ArtistTier, CampaignType, RecommendationStrategy

WORLDWIDE_ID = "worldwide"


class CampaignConfiguration(BaseModel):
    """Parameters of a licensing campaign, immutable per computation.

    Follower counts are in millions and come from an external lookup; the
    virality flag comes from an external trend check. Numeric ranges are not
    enforced here: the input boundary (CLI, UI) constrains duration and track
    volume, and the pricing engine computes whatever it is given.
    """

    model_config = ConfigDict(frozen=True)

    artist_tier: ArtistTier = ArtistTier.DEVELOPING
    campaign_type: CampaignType = CampaignType.ORGANIC
    duration_weeks: int = 4
    billboard_hot_100: bool = False
    brand_follower_count: Decimal = Decimal("0")
    artist_follower_count: Decimal = Decimal("0")
    track_volume: int = 1
    is_viral: bool = False
    selected_territories: tuple[str, ...] = (WORLDWIDE_ID,)

    @field_validator("brand_follower_count", "artist_follower_count", mode="before")
    @classmethod
    def float_followers_via_str(cls, v: object) -> object:
        """Convert float follower counts through ``str`` so 1.2 stays 1.2."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v


class Breakdown(BaseModel):
    """Full derivation of a quoted price.

    Every intermediate value of the pricing pipeline is kept at full Decimal
    precision so the quote can be audited line by line.
    """

    model_config = ConfigDict(frozen=True)

    combined_followers: Decimal
    follower_base_fee: Decimal
    artist_base_fee: Decimal
    total_base_fee: Decimal
    billboard_multiplier: Decimal
    rate_with_billboard: Decimal
    weekly_rate: Decimal
    campaign_multiplier: Decimal
    gross_price: Decimal
    volume_discount_fraction: Decimal
    virality_discount_fraction: Decimal
    total_discount_fraction: Decimal
    total_discount_amount: Decimal
    price_after_discounts: Decimal
    territory_coverage_percent: Decimal
    territory_multiplier: Decimal
    final_price: Decimal


class Quote(BaseModel):
    """A priced configuration together with its territory label."""

    model_config = ConfigDict(frozen=True)

    configuration: CampaignConfiguration
    territory_label: str
    breakdown: Breakdown

    @property
    def final_price(self) -> Decimal:
        return self.breakdown.final_price


class Recommendation(BaseModel):
    """A budget-fitting configuration found by one search strategy.

    Attributes:
        strategy: The strategy that produced this recommendation.
        label: Short title, e.g. ``"Max Volume"``.
        description: One-line summary of the configuration.
        configuration: The configuration that fits the budget.
        price: Final price of the configuration at worldwide coverage.
        savings: Total discount amount applied to the configuration.
    """

    model_config = ConfigDict(frozen=True)

    strategy: RecommendationStrategy
    label: str
    description: str
    configuration: CampaignConfiguration
    price: Decimal
    savings: Decimal
