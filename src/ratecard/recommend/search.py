"""Budget reverse-calculator: find the best campaigns that fit a budget.

Three independent strategies each sweep one parameter over a small bounded
range while holding the others fixed, pricing every candidate at worldwide
coverage:

- Max Volume: most tracks (1-20) for a Developing, Organic, 4-week campaign.
- Max Impact: highest artist tier for a Paid, 4-week, single-track campaign.
- Max Duration: longest run (4-52 weeks, step 4) for an Established,
  Organic, single-track campaign.

All strategies assume the track is viral. Candidates are generated best
first and every one is priced; the first that fits wins. Nothing here relies
on price being monotonic in the swept parameter, so a formula change cannot
make a sweep stop early on the wrong value.
"""

from collections.abc import Callable, Iterable
from decimal import Decimal

import structlog

from ratecard.domain.models import CampaignConfiguration, Recommendation
from ratecard.domain.types import (
    ArtistTier,
    CampaignType,
    RecommendationStrategy,
    tiers_descending,
)
from ratecard.pricing.engine import FULL_COVERAGE, compute_breakdown
from ratecard.pricing.rate_tables import RateTables, get_rate_tables

logger = structlog.get_logger()

MAX_VOLUME_TRACKS = range(1, 21)
MAX_DURATION_WEEKS = range(4, 53, 4)
STANDARD_DURATION_WEEKS = 4


def _to_budget(budget: Decimal | int | float | str) -> Decimal:
    if isinstance(budget, float):
        return Decimal(str(budget))
    return Decimal(budget)


def _first_fit(
    candidates: Iterable[CampaignConfiguration],
    budget: Decimal,
    tables: RateTables,
) -> tuple[CampaignConfiguration, Decimal, Decimal] | None:
    """Return the first candidate priced within budget, with its price and savings."""
    for config in candidates:
        breakdown = compute_breakdown(config, FULL_COVERAGE, rate_tables=tables)
        if breakdown.final_price <= budget:
            return config, breakdown.final_price, breakdown.total_discount_amount
    return None


def max_volume(
    budget: Decimal | int | float | str,
    rate_tables: RateTables | None = None,
) -> Recommendation | None:
    """Most tracks a Developing artist can license for 4 weeks within budget."""
    tables = rate_tables if rate_tables is not None else get_rate_tables()
    candidates = (
        CampaignConfiguration(
            artist_tier=ArtistTier.DEVELOPING,
            campaign_type=CampaignType.ORGANIC,
            duration_weeks=STANDARD_DURATION_WEEKS,
            track_volume=tracks,
            is_viral=True,
        )
        for tracks in reversed(MAX_VOLUME_TRACKS)
    )
    found = _first_fit(candidates, _to_budget(budget), tables)
    if found is None:
        return None

    config, price, savings = found
    return Recommendation(
        strategy=RecommendationStrategy.MAX_VOLUME,
        label="Max Volume",
        description=(
            f"{config.track_volume} tracks with Developing artists "
            f"for {config.duration_weeks} weeks."
        ),
        configuration=config,
        price=price,
        savings=savings,
    )


def max_impact(
    budget: Decimal | int | float | str,
    rate_tables: RateTables | None = None,
) -> Recommendation | None:
    """Highest artist tier affordable for a Paid, 4-week, single-track campaign."""
    tables = rate_tables if rate_tables is not None else get_rate_tables()
    candidates = (
        CampaignConfiguration(
            artist_tier=tier,
            campaign_type=CampaignType.PAID,
            duration_weeks=STANDARD_DURATION_WEEKS,
            track_volume=1,
            is_viral=True,
        )
        for tier in tiers_descending()
    )
    found = _first_fit(candidates, _to_budget(budget), tables)
    if found is None:
        return None

    config, price, savings = found
    return Recommendation(
        strategy=RecommendationStrategy.MAX_IMPACT,
        label="Max Impact",
        description=(
            f"{config.artist_tier} artist with Paid amplification "
            f"for {config.duration_weeks} weeks."
        ),
        configuration=config,
        price=price,
        savings=savings,
    )


def max_duration(
    budget: Decimal | int | float | str,
    rate_tables: RateTables | None = None,
) -> Recommendation | None:
    """Longest Organic run for an Established artist within budget."""
    tables = rate_tables if rate_tables is not None else get_rate_tables()
    candidates = (
        CampaignConfiguration(
            artist_tier=ArtistTier.ESTABLISHED,
            campaign_type=CampaignType.ORGANIC,
            duration_weeks=weeks,
            track_volume=1,
            is_viral=True,
        )
        for weeks in reversed(MAX_DURATION_WEEKS)
    )
    found = _first_fit(candidates, _to_budget(budget), tables)
    if found is None:
        return None

    config, price, savings = found
    return Recommendation(
        strategy=RecommendationStrategy.MAX_DURATION,
        label="Max Duration",
        description=f"Established artist for {config.duration_weeks} weeks (Organic).",
        configuration=config,
        price=price,
        savings=savings,
    )


STRATEGIES: dict[
    RecommendationStrategy,
    Callable[[Decimal | int | float | str, RateTables | None], Recommendation | None],
] = {
    RecommendationStrategy.MAX_VOLUME: max_volume,
    RecommendationStrategy.MAX_IMPACT: max_impact,
    RecommendationStrategy.MAX_DURATION: max_duration,
}


def find_recommendations(
    budget: Decimal | int | float | str,
    rate_tables: RateTables | None = None,
) -> list[Recommendation]:
    """Run every strategy against a budget.

    Args:
        budget: The most the campaign may cost.
        rate_tables: Rate card override. Defaults to the configured card.

    Returns:
        Zero to three recommendations, in Max Volume, Max Impact, Max
        Duration order.  Strategies with no fitting configuration are omitted.
    """
    tables = rate_tables if rate_tables is not None else get_rate_tables()
    recommendations = [
        rec
        for strategy in STRATEGIES.values()
        if (rec := strategy(budget, tables)) is not None
    ]
    logger.info(
        "recommendations_found",
        budget=str(_to_budget(budget)),
        rate_card=tables.version,
        strategies=[str(rec.strategy) for rec in recommendations],
    )
    return recommendations
