"""Territory hierarchy and coverage aggregation.

Re-exports key functions and types for convenient access:
    from ratecard.territory import coverage_percent, territory_label
"""

from ratecard.territory.aggregator import (
    TerritoryAggregator,
    coverage_percent,
    get_territory_aggregator,
    territory_label,
    toggle_territory,
)
from ratecard.territory.tree import (
    DEFAULT_TERRITORIES,
    TerritoryIndex,
    TerritoryNode,
    build_territory_tree,
    load_territories,
)

__all__ = [
    "DEFAULT_TERRITORIES",
    "TerritoryAggregator",
    "TerritoryIndex",
    "TerritoryNode",
    "build_territory_tree",
    "coverage_percent",
    "get_territory_aggregator",
    "load_territories",
    "territory_label",
    "toggle_territory",
]
