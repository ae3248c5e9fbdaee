"""Domain enumerations for the licensing rate card."""

from enum import StrEnum


class ArtistTier(StrEnum):
    """Ordered artist classification driving base fee and paid multiplier."""

    DEVELOPING = "Developing"
    BREAKING = "Breaking"
    ESTABLISHED = "Established"
    SUPERSTAR = "Superstar"
    LEGACY = "Legacy"

    @property
    def rank(self) -> int:
        """Position of the tier in ``ARTIST_TIER_ORDER`` (0 = Developing)."""
        return ARTIST_TIER_ORDER.index(self)


class CampaignType(StrEnum):
    """How the licensed track is promoted."""

    ORGANIC = "Organic"
    PAID = "Paid"


class RecommendationStrategy(StrEnum):
    """Budget search strategies, one recommendation per strategy."""

    MAX_VOLUME = "max-volume"
    MAX_IMPACT = "max-impact"
    MAX_DURATION = "max-duration"


# Lowest to highest
ARTIST_TIER_ORDER: tuple[ArtistTier, ...] = (
    ArtistTier.DEVELOPING,
    ArtistTier.BREAKING,
    ArtistTier.ESTABLISHED,
    ArtistTier.SUPERSTAR,
    ArtistTier.LEGACY,
)


def tiers_descending() -> tuple[ArtistTier, ...]:
    """Return artist tiers from Legacy down to Developing."""
    return tuple(reversed(ARTIST_TIER_ORDER))
