"""Territory coverage aggregation and selection labels.

Reduces a selection of region ids to one coverage percentage without counting
a region twice when both a parent and one of its direct children are chosen.
"""

from collections.abc import Sequence
from decimal import Decimal
from functools import lru_cache

import structlog

from ratecard.config import get_settings
from ratecard.domain.models import WORLDWIDE_ID
from ratecard.territory.tree import DEFAULT_TERRITORIES, TerritoryIndex, load_territories

logger = structlog.get_logger()

FULL_COVERAGE = Decimal("100")
WORLDWIDE_LABEL = "Worldwide"
UNKNOWN_TERRITORY_LABEL = "Unknown Territory"


class TerritoryAggregator:
    """Computes coverage and display labels over a fixed territory index.

    Unknown ids never raise: they contribute nothing to coverage, since a
    caller may still hold ids from before a territory data update.
    """

    def __init__(self, index: TerritoryIndex) -> None:
        self.index = index

    def effective_ids(self, selected_ids: Sequence[str]) -> list[str]:
        """Drop selected parents that have at least one direct child selected.

        The check is one level deep and applied to each selected id on its
        own.  Order and duplicates of the surviving ids are preserved.
        """
        selected = set(selected_ids)
        effective: list[str] = []
        for territory_id in selected_ids:
            node = self.index.get(territory_id)
            if node is not None and any(cid in selected for cid in node.child_ids()):
                continue
            effective.append(territory_id)
        return effective

    def coverage_percent(self, selected_ids: Sequence[str]) -> Decimal:
        """Return the share of global rights covered by a selection, 0-100.

        An empty selection, or any selection containing ``"worldwide"``, is
        full coverage.  A selection that filters down to nothing is 0.
        """
        if not selected_ids or WORLDWIDE_ID in selected_ids:
            return FULL_COVERAGE

        total = Decimal("0")
        for territory_id in self.effective_ids(selected_ids):
            node = self.index.get(territory_id)
            if node is None:
                logger.debug("territory_unknown", territory_id=territory_id)
                continue
            total += node.percentage
        return min(total, FULL_COVERAGE)

    def display_label(self, selected_ids: Sequence[str]) -> str:
        """Return a short human-readable name for a selection.

        One id shows its name, two show both names joined by ``" + "``, and
        larger selections show the raw count, e.g. ``"4 Territories"``.
        """
        if not selected_ids or WORLDWIDE_ID in selected_ids:
            return WORLDWIDE_LABEL

        if len(selected_ids) == 1:
            node = self.index.get(selected_ids[0])
            return node.name if node is not None else UNKNOWN_TERRITORY_LABEL

        if len(selected_ids) == 2:
            names = [
                node.name
                for node in (self.index.get(tid) for tid in selected_ids)
                if node is not None
            ]
            return " + ".join(names)

        return f"{len(selected_ids)} Territories"


def toggle_territory(selected_ids: Sequence[str], territory_id: str) -> tuple[str, ...]:
    """Apply one click of the territory picker to a selection.

    Choosing ``"worldwide"`` replaces the selection.  Choosing any other id
    removes ``"worldwide"`` and toggles that id.  An empty result falls back
    to ``("worldwide",)``.
    """
    if territory_id == WORLDWIDE_ID:
        return (WORLDWIDE_ID,)

    selection = [tid for tid in selected_ids if tid != WORLDWIDE_ID]
    if territory_id in selection:
        selection = [tid for tid in selection if tid != territory_id]
    else:
        selection.append(territory_id)

    return tuple(selection) if selection else (WORLDWIDE_ID,)


@lru_cache
def get_territory_aggregator() -> TerritoryAggregator:
    """Return the aggregator for the configured territory tree, built once.

    Uses ``Settings.territories_path`` when set, otherwise the built-in tree.
    Call ``get_territory_aggregator.cache_clear()`` after changing settings.
    """
    path = get_settings().territories_path
    index = load_territories(path) if path is not None else TerritoryIndex(DEFAULT_TERRITORIES)
    return TerritoryAggregator(index)


def coverage_percent(selected_ids: Sequence[str]) -> Decimal:
    """Coverage of a selection against the configured territory tree."""
    return get_territory_aggregator().coverage_percent(selected_ids)


def territory_label(selected_ids: Sequence[str]) -> str:
    """Display label of a selection against the configured territory tree."""
    return get_territory_aggregator().display_label(selected_ids)
