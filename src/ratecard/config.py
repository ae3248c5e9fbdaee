"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables (prefixed ``RATECARD_``) and a cached ``get_settings()`` accessor.

IMPORTANT: This module has ZERO imports from the ``ratecard`` package to
prevent circular imports.  Only stdlib, pydantic, pydantic_settings, and
structlog are used.
"""

from __future__ import annotations

import sys
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file.

    ``rate_card_path`` and ``territories_path`` point at YAML files that
    replace the built-in rate card and territory tree.  When unset, the
    built-in data is used.
    """

    model_config = SettingsConfigDict(
        env_prefix="RATECARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False

    # -- Data files ------------------------------------------------------------
    rate_card_path: Path | None = None
    territories_path: Path | None = None

    # -- Budget search ---------------------------------------------------------
    default_budget: Decimal = Decimal("100000")


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
