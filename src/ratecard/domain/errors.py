"""Exception classes for the rate card estimator.

The pricing, territory and search operations are total and never raise for
well-typed input. These errors only surface when replacement data files are
loaded.
"""

from pathlib import Path


class RateCardError(Exception):
    """Base class for all errors raised by the rate card estimator."""


class RateCardDataError(RateCardError):
    """Raised when a rate card or territory data file is missing or invalid.

    Attributes:
        path: The file that failed to load, if any.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


class TerritoryDataError(RateCardDataError):
    """Raised when a territory tree is structurally invalid.

    Attributes:
        territory_id: The offending territory id.
    """

    def __init__(self, territory_id: str, reason: str) -> None:
        self.territory_id = territory_id
        super().__init__(f"Territory '{territory_id}': {reason}")
