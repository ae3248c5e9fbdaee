"""Tests for centralized Settings and the get_settings cache."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from ratecard.config import Settings, get_settings

# ---------------------------------------------------------------------------
# Settings defaults
# ---------------------------------------------------------------------------

class TestSettingsDefaults:
    """Verify that Settings fields have the expected default values."""

    def test_settings_defaults(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.production is False
        assert s.rate_card_path is None
        assert s.territories_path is None
        assert s.default_budget == Decimal("100000")

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RATECARD_PRODUCTION", "true")
        monkeypatch.setenv("RATECARD_RATE_CARD_PATH", "/etc/ratecard/card.yaml")
        monkeypatch.setenv("RATECARD_DEFAULT_BUDGET", "25000.50")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.production is True
        assert s.rate_card_path == Path("/etc/ratecard/card.yaml")
        assert s.default_budget == Decimal("25000.50")

    def test_unprefixed_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RATECARD_PRODUCTION", raising=False)
        monkeypatch.setenv("PRODUCTION", "true")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.production is False


# ---------------------------------------------------------------------------
# get_settings caching
# ---------------------------------------------------------------------------

class TestGetSettings:
    """Verify lru_cache behaviour of get_settings."""

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_invalid_env_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RATECARD_DEFAULT_BUDGET", "not-a-number")

        with pytest.raises(SystemExit) as exc_info:
            get_settings()

        assert exc_info.value.code == 1
