"""Quotes: territory coverage fed into the pricing engine, plus side-by-side comparison."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from ratecard.domain.models import CampaignConfiguration, Quote
from ratecard.pricing.engine import compute_breakdown
from ratecard.pricing.rate_tables import RateTables
from ratecard.territory.aggregator import TerritoryAggregator, get_territory_aggregator


def build_quote(
    config: CampaignConfiguration,
    rate_tables: RateTables | None = None,
    aggregator: TerritoryAggregator | None = None,
) -> Quote:
    """Price a configuration over its selected territories.

    Args:
        config: The campaign to price.
        rate_tables: Rate card override. Defaults to the configured card.
        aggregator: Territory aggregator override. Defaults to the configured tree.

    Returns:
        A ``Quote`` with the territory label and full breakdown.
    """
    territories = aggregator if aggregator is not None else get_territory_aggregator()
    coverage = territories.coverage_percent(config.selected_territories)
    breakdown = compute_breakdown(config, coverage, rate_tables=rate_tables)
    return Quote(
        configuration=config,
        territory_label=territories.display_label(config.selected_territories),
        breakdown=breakdown,
    )


Cheaper = Literal["A", "B", "equal"]


@dataclass(frozen=True)
class ScenarioComparison:
    """Two quotes side by side.

    Attributes:
        scenario_a: Quote for the first configuration.
        scenario_b: Quote for the second configuration.
        price_difference: ``scenario_b`` final price minus ``scenario_a``'s.
        cheaper: ``"A"``, ``"B"``, or ``"equal"``.
    """

    scenario_a: Quote
    scenario_b: Quote
    price_difference: Decimal
    cheaper: Cheaper


def compare_scenarios(
    config_a: CampaignConfiguration,
    config_b: CampaignConfiguration,
    rate_tables: RateTables | None = None,
    aggregator: TerritoryAggregator | None = None,
) -> ScenarioComparison:
    """Quote two configurations against the same rate card and territory tree."""
    quote_a = build_quote(config_a, rate_tables=rate_tables, aggregator=aggregator)
    quote_b = build_quote(config_b, rate_tables=rate_tables, aggregator=aggregator)
    difference = quote_b.final_price - quote_a.final_price

    cheaper: Cheaper
    if difference > 0:
        cheaper = "A"
    elif difference < 0:
        cheaper = "B"
    else:
        cheaper = "equal"

    return ScenarioComparison(
        scenario_a=quote_a,
        scenario_b=quote_b,
        price_difference=difference,
        cheaper=cheaper,
    )
