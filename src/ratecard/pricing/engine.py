"""Pricing engine turning a campaign configuration into an itemized breakdown.

All monetary calculations use Decimal arithmetic to avoid floating-point errors.
Intermediate values keep full precision; ``quantize_money`` rounds to two
decimal places with ROUND_HALF_UP for display only.

Pipeline order is fixed: the billboard multiplier applies before the weekly
normalization, discounts apply after the duration multiplication, and the
territory adjustment applies last.
"""

from decimal import ROUND_HALF_UP, Decimal

import structlog

from ratecard.domain.models import Breakdown, CampaignConfiguration
from ratecard.domain.types import CampaignType
from ratecard.pricing.rate_tables import RateTables, get_rate_tables

logger = structlog.get_logger()

# Precision: displayed monetary values are quantized to 2 decimal places
TWO_PLACES = Decimal("0.01")

WEEKS_PER_YEAR = Decimal("52")
BILLBOARD_MULTIPLIER = Decimal("1.2")
NO_MULTIPLIER = Decimal("1.0")

# (minimum track volume, discount fraction), highest threshold first
VOLUME_DISCOUNT_TIERS: tuple[tuple[int, Decimal], ...] = (
    (10, Decimal("0.35")),
    (5, Decimal("0.25")),
    (3, Decimal("0.15")),
)
VIRALITY_DISCOUNT = Decimal("0.15")
FULL_COVERAGE = Decimal("100")


def quantize_money(amount: Decimal) -> Decimal:
    """Round a monetary amount to 2 decimal places (ROUND_HALF_UP)."""
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def volume_discount_fraction(track_volume: int) -> Decimal:
    """Return the volume discount for a number of licensed tracks.

    Thresholds are inclusive and do not stack: 10+ tracks earn 35%, 5+ earn
    25%, 3+ earn 15%, fewer earn nothing.
    """
    for minimum, fraction in VOLUME_DISCOUNT_TIERS:
        if track_volume >= minimum:
            return fraction
    return Decimal("0")


def virality_discount_fraction(is_viral: bool) -> Decimal:
    """Return the flat virality discount for a verified trending track."""
    return VIRALITY_DISCOUNT if is_viral else Decimal("0")


def compute_breakdown(
    config: CampaignConfiguration,
    territory_coverage_percent: Decimal | int | float = FULL_COVERAGE,
    rate_tables: RateTables | None = None,
) -> Breakdown:
    """Price a campaign configuration and return every step of the derivation.

    The computation is deterministic and total. Out-of-range inputs such as a
    zero duration are not rejected; they produce a nonsensical but finite
    price, since validation belongs at the input boundary.

    Args:
        config: The campaign to price.
        territory_coverage_percent: Share of global rights covered, 0-100.
        rate_tables: Rate card to price against. Defaults to the configured
            card from ``get_rate_tables()``.

    Returns:
        The full ``Breakdown`` ending in ``final_price``.
    """
    tables = rate_tables if rate_tables is not None else get_rate_tables()
    if isinstance(territory_coverage_percent, float):
        coverage = Decimal(str(territory_coverage_percent))
    else:
        coverage = Decimal(territory_coverage_percent)

    combined_followers = config.brand_follower_count + config.artist_follower_count
    follower_base_fee = tables.follower_bracket_fee(combined_followers)
    artist_base_fee = tables.tier_base_fee(config.artist_tier)
    total_base_fee = follower_base_fee + artist_base_fee

    billboard_multiplier = BILLBOARD_MULTIPLIER if config.billboard_hot_100 else NO_MULTIPLIER
    rate_with_billboard = total_base_fee * billboard_multiplier
    weekly_rate = rate_with_billboard / WEEKS_PER_YEAR

    if config.campaign_type == CampaignType.ORGANIC:
        campaign_multiplier = NO_MULTIPLIER
    else:
        campaign_multiplier = tables.tier_multiplier(config.artist_tier)
    gross_price = weekly_rate * campaign_multiplier * config.duration_weeks

    # Discounts stack additively, not multiplicatively
    volume_discount = volume_discount_fraction(config.track_volume)
    virality_discount = virality_discount_fraction(config.is_viral)
    total_discount_fraction = volume_discount + virality_discount
    total_discount_amount = gross_price * total_discount_fraction
    price_after_discounts = gross_price - total_discount_amount

    territory_multiplier = coverage / FULL_COVERAGE
    final_price = price_after_discounts * territory_multiplier

    logger.debug(
        "breakdown_computed",
        rate_card=tables.version,
        artist_tier=str(config.artist_tier),
        campaign_type=str(config.campaign_type),
        coverage=str(coverage),
        final_price=str(final_price),
    )

    return Breakdown(
        combined_followers=combined_followers,
        follower_base_fee=follower_base_fee,
        artist_base_fee=artist_base_fee,
        total_base_fee=total_base_fee,
        billboard_multiplier=billboard_multiplier,
        rate_with_billboard=rate_with_billboard,
        weekly_rate=weekly_rate,
        campaign_multiplier=campaign_multiplier,
        gross_price=gross_price,
        volume_discount_fraction=volume_discount,
        virality_discount_fraction=virality_discount,
        total_discount_fraction=total_discount_fraction,
        total_discount_amount=total_discount_amount,
        price_after_discounts=price_after_discounts,
        territory_coverage_percent=coverage,
        territory_multiplier=territory_multiplier,
        final_price=final_price,
    )
