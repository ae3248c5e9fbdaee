"""Territory hierarchy model and its flattened id index.

The tree is static configuration: it is validated and flattened once when an
index is built, and read-only afterwards.  Lookups by id are dict hits, so
coverage can be recomputed on every UI interaction without re-walking the
tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ratecard.domain.errors import RateCardDataError, TerritoryDataError
from ratecard.territory.data import DEFAULT_TERRITORY_DATA

logger = structlog.get_logger()


class TerritoryNode(BaseModel):
    """A named region carrying its share of global revenue.

    Attributes:
        id: Unique territory identifier, e.g. ``"us-ca"``.
        name: Display name.
        percentage: Share of global revenue, 0-100.
        tier: Market tier 1-5 (informational only).
        children: Sub-regions, in display order.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    percentage: Decimal = Field(ge=0, le=100)
    tier: int = Field(ge=1, le=5)
    children: tuple[TerritoryNode, ...] = ()

    @field_validator("percentage", mode="before")
    @classmethod
    def float_percentage_via_str(cls, v: object) -> object:
        """Convert float percentages through ``str`` so 7.28 stays 7.28."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_validator("id")
    @classmethod
    def id_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("territory id must not be empty")
        return v

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def child_ids(self) -> tuple[str, ...]:
        return tuple(child.id for child in self.children)

    def walk(self) -> Iterator[TerritoryNode]:
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class TerritoryIndex:
    """Flattened, id-keyed view of a territory tree.

    Built once per tree.  Every node at every nesting level is indexed.

    Args:
        roots: Top-level territory nodes.

    Raises:
        TerritoryDataError: If two nodes share an id.
    """

    def __init__(self, roots: Iterable[TerritoryNode]) -> None:
        self.roots: tuple[TerritoryNode, ...] = tuple(roots)
        self._nodes: dict[str, TerritoryNode] = {}
        self._parents: dict[str, str] = {}
        for root in self.roots:
            self._index(root, parent_id=None)

    def _index(self, node: TerritoryNode, parent_id: str | None) -> None:
        if node.id in self._nodes:
            raise TerritoryDataError(node.id, "duplicate territory id")
        self._nodes[node.id] = node
        if parent_id is not None:
            self._parents[node.id] = parent_id
        for child in node.children:
            self._index(child, parent_id=node.id)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, territory_id: object) -> bool:
        return territory_id in self._nodes

    def __iter__(self) -> Iterator[TerritoryNode]:
        for root in self.roots:
            yield from root.walk()

    def get(self, territory_id: str) -> TerritoryNode | None:
        """Return the node for an id, or ``None`` if the id is unknown."""
        return self._nodes.get(territory_id)

    def parent_of(self, territory_id: str) -> TerritoryNode | None:
        """Return the direct parent of a node, or ``None`` for roots and unknown ids."""
        parent_id = self._parents.get(territory_id)
        return self._nodes[parent_id] if parent_id is not None else None

    def path_to(self, territory_id: str) -> tuple[TerritoryNode, ...]:
        """Return the nodes from the root down to ``territory_id`` (empty if unknown)."""
        node = self.get(territory_id)
        path: list[TerritoryNode] = []
        while node is not None:
            path.append(node)
            node = self.parent_of(node.id)
        return tuple(reversed(path))


def build_territory_tree(data: Iterable[Mapping[str, Any]]) -> tuple[TerritoryNode, ...]:
    """Validate raw nested mappings into ``TerritoryNode`` roots.

    Raises:
        RateCardDataError: If any node fails validation.
    """
    try:
        return tuple(TerritoryNode.model_validate(item) for item in data)
    except ValidationError as exc:
        raise RateCardDataError(f"Territory data failed validation: {exc}") from exc


def load_territories(path: Path) -> TerritoryIndex:
    """Load a replacement territory tree from a YAML file.

    The file holds a top-level ``territories`` list of nested mappings with
    ``id``, ``name``, ``percentage``, ``tier`` and optional ``children``.

    Args:
        path: Path to the YAML file.

    Returns:
        The indexed tree.

    Raises:
        RateCardDataError: If the file is missing, unparseable, or invalid.
        TerritoryDataError: If the tree contains duplicate ids.
    """
    if not path.exists():
        raise RateCardDataError("Territory file not found", path)

    try:
        with path.open() as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise RateCardDataError(f"Territory file is not valid YAML: {exc}", path) from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("territories"), list):
        raise RateCardDataError("Territory file must contain a 'territories' list", path)

    index = TerritoryIndex(build_territory_tree(raw["territories"]))
    logger.info("territories_loaded", path=str(path), count=len(index))
    return index


DEFAULT_TERRITORIES: tuple[TerritoryNode, ...] = build_territory_tree(DEFAULT_TERRITORY_DATA)
