"""Pricing engine for licensing rate card quotes.

Re-exports key functions and types for convenient access:
    from ratecard.pricing import compute_breakdown, build_quote, RateTables
"""

from ratecard.pricing.engine import (
    TWO_PLACES,
    compute_breakdown,
    quantize_money,
    virality_discount_fraction,
    volume_discount_fraction,
)
from ratecard.pricing.quote import ScenarioComparison, build_quote, compare_scenarios
from ratecard.pricing.rate_tables import (
    DEFAULT_RATE_TABLES,
    FollowerBracket,
    RateTables,
    get_rate_tables,
    load_rate_tables,
)

__all__ = [
    "DEFAULT_RATE_TABLES",
    "TWO_PLACES",
    "FollowerBracket",
    "RateTables",
    "ScenarioComparison",
    "build_quote",
    "compare_scenarios",
    "compute_breakdown",
    "get_rate_tables",
    "load_rate_tables",
    "quantize_money",
    "virality_discount_fraction",
    "volume_discount_fraction",
]
