"""Rate card lookup tables: follower brackets, tier base fees, and paid multipliers.

The rate card is data, not logic. ``DEFAULT_RATE_TABLES`` holds the current
card; a revised card can be dropped in as a YAML file (see
``load_rate_tables``) without touching the pricing engine.

YAML layout::

    version: "2024-standard"
    follower_brackets:
      - {max_followers: 5, fee: 12000}
      - {max_followers: null, fee: 75000}   # unbounded, must be last
    tier_base_fees: {Developing: 25000, ...}
    tier_multipliers: {Developing: 1.0, ...}
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Annotated

import structlog
import yaml  # type: ignore[import-untyped]
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    ValidationError,
    field_validator,
    model_validator,
)

from ratecard.config import get_settings
from ratecard.domain.errors import RateCardDataError
from ratecard.domain.types import ArtistTier

logger = structlog.get_logger()


def _float_to_decimal(v: object) -> object:
    if isinstance(v, float):
        return Decimal(str(v))
    return v


def _read_only(table: Mapping[ArtistTier, Decimal]) -> Mapping[ArtistTier, Decimal]:
    return MappingProxyType(dict(table))


def _as_dict(table: Mapping[ArtistTier, Decimal]) -> dict[ArtistTier, Decimal]:
    return dict(table)


# Per-tier lookup that cannot be mutated after validation
TierTable = Annotated[
    Mapping[ArtistTier, Decimal],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict, return_type=dict[ArtistTier, Decimal]),
]


class FollowerBracket(BaseModel):
    """Base fee for combined follower counts up to ``max_followers`` millions.

    Attributes:
        max_followers: Inclusive upper bound in millions; ``None`` means unbounded.
        fee: Annual base fee for this bracket.
    """

    model_config = ConfigDict(frozen=True)

    max_followers: Decimal | None
    fee: Decimal

    @field_validator("max_followers", "fee", mode="before")
    @classmethod
    def floats_via_str(cls, v: object) -> object:
        return _float_to_decimal(v)

    def contains(self, followers: Decimal) -> bool:
        """Return True if ``followers`` falls at or below this bracket's bound."""
        return self.max_followers is None or followers <= self.max_followers


class RateTables(BaseModel):
    """Immutable, versioned rate card.

    Validation guarantees the lookups below are total: brackets are strictly
    ascending and end with exactly one unbounded bracket, and every artist
    tier has both a base fee and a paid multiplier. The tier tables are
    read-only mappings, so a shared card cannot be edited in place.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    follower_brackets: tuple[FollowerBracket, ...]
    tier_base_fees: TierTable
    tier_multipliers: TierTable

    @field_validator("tier_base_fees", "tier_multipliers", mode="before")
    @classmethod
    def float_values_via_str(cls, v: object) -> object:
        if isinstance(v, dict):
            return {key: _float_to_decimal(value) for key, value in v.items()}
        return v

    @model_validator(mode="after")
    def brackets_must_be_ordered_and_terminated(self) -> RateTables:
        """Ensure brackets ascend and only the last one is unbounded."""
        if not self.follower_brackets:
            raise ValueError("follower_brackets must not be empty")
        *bounded, last = self.follower_brackets
        if last.max_followers is not None:
            raise ValueError("the last follower bracket must be unbounded (max_followers: null)")
        previous: Decimal | None = None
        for bracket in bounded:
            if bracket.max_followers is None:
                raise ValueError("only the last follower bracket may be unbounded")
            if previous is not None and bracket.max_followers <= previous:
                raise ValueError(
                    f"follower brackets must be strictly ascending, "
                    f"got {bracket.max_followers} after {previous}"
                )
            previous = bracket.max_followers
        return self

    @model_validator(mode="after")
    def every_tier_must_be_priced(self) -> RateTables:
        """Ensure each artist tier has a base fee and a multiplier."""
        for name, table in (
            ("tier_base_fees", self.tier_base_fees),
            ("tier_multipliers", self.tier_multipliers),
        ):
            missing = [tier for tier in ArtistTier if tier not in table]
            if missing:
                raise ValueError(f"{name} is missing tiers: {', '.join(missing)}")
        return self

    def follower_bracket_fee(self, combined_followers: Decimal) -> Decimal:
        """Return the fee of the smallest bracket whose bound covers the count.

        Args:
            combined_followers: Brand plus artist followers, in millions.

        Returns:
            The bracket's annual base fee. Counts beyond every finite bound
            fall through to the unbounded last bracket.
        """
        for bracket in self.follower_brackets:
            if bracket.contains(combined_followers):
                return bracket.fee
        return self.follower_brackets[-1].fee

    def tier_base_fee(self, tier: ArtistTier) -> Decimal:
        """Return the fixed annual base fee for an artist tier."""
        return self.tier_base_fees[tier]

    def tier_multiplier(self, tier: ArtistTier) -> Decimal:
        """Return the paid-campaign multiplier for an artist tier."""
        return self.tier_multipliers[tier]


DEFAULT_RATE_TABLES = RateTables(
    version="standard-2024",
    follower_brackets=(
        FollowerBracket(max_followers=Decimal("5"), fee=Decimal("12000")),
        FollowerBracket(max_followers=Decimal("25"), fee=Decimal("15000")),
        FollowerBracket(max_followers=Decimal("50"), fee=Decimal("25000")),
        FollowerBracket(max_followers=Decimal("100"), fee=Decimal("37500")),
        FollowerBracket(max_followers=Decimal("250"), fee=Decimal("45000")),
        FollowerBracket(max_followers=Decimal("500"), fee=Decimal("60000")),
        FollowerBracket(max_followers=None, fee=Decimal("75000")),
    ),
    tier_base_fees={
        ArtistTier.DEVELOPING: Decimal("25000"),
        ArtistTier.BREAKING: Decimal("31250"),
        ArtistTier.ESTABLISHED: Decimal("43750"),
        ArtistTier.SUPERSTAR: Decimal("87500"),
        ArtistTier.LEGACY: Decimal("175000"),
    },
    tier_multipliers={
        ArtistTier.DEVELOPING: Decimal("1.0"),
        ArtistTier.BREAKING: Decimal("1.25"),
        ArtistTier.ESTABLISHED: Decimal("1.75"),
        ArtistTier.SUPERSTAR: Decimal("2.0"),
        ArtistTier.LEGACY: Decimal("3.0"),
    },
)


def load_rate_tables(path: Path) -> RateTables:
    """Load a rate card from a YAML file.

    Args:
        path: Path to the YAML rate card.

    Returns:
        The validated ``RateTables``.

    Raises:
        RateCardDataError: If the file is missing, unparseable, or fails
            validation.
    """
    if not path.exists():
        raise RateCardDataError("Rate card file not found", path)

    try:
        with path.open() as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise RateCardDataError(f"Rate card is not valid YAML: {exc}", path) from exc

    if not isinstance(raw, dict):
        raise RateCardDataError("Rate card must be a YAML mapping", path)

    try:
        tables = RateTables.model_validate(raw)
    except ValidationError as exc:
        raise RateCardDataError(f"Rate card failed validation: {exc}", path) from exc

    logger.info("rate_card_loaded", path=str(path), version=tables.version)
    return tables


@lru_cache
def get_rate_tables() -> RateTables:
    """Return the configured rate card, loading it once.

    Uses ``Settings.rate_card_path`` when set, otherwise
    ``DEFAULT_RATE_TABLES``.  Call ``get_rate_tables.cache_clear()`` after
    changing settings.
    """
    path = get_settings().rate_card_path
    if path is None:
        return DEFAULT_RATE_TABLES
    return load_rate_tables(path)
