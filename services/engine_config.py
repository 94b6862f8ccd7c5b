"""Centralized engine configuration.

Single source of truth for the value format engine settings.
Reads from environment variables with sensible defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class EngineSettings:
    """Engine settings loaded from environment.

    Usage:
        settings = get_engine_settings()
        print(settings.default_locale)  # "en_US"
    """
    # Locale used when a caller doesn't name one
    default_locale: str = "en_US"

    # Logging
    log_level: str = "INFO"

    # Rendering: larger number:decimal-places values are clamped
    max_decimal_places: int = 20

    # API: preload the default format set on startup
    load_default_formats: bool = True

    # API rate limiting (per client)
    rate_limit_enabled: bool = True
    rate_limit_per_minute: int = 120
    rate_limit_burst: int = 20  # Max requests in 1 second


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}")
        return default


def _load_settings_from_env() -> EngineSettings:
    """Load engine settings from environment variables."""
    settings = EngineSettings()

    settings.default_locale = os.getenv("ODS_DEFAULT_LOCALE", settings.default_locale)
    settings.log_level = os.getenv("ODS_LOG_LEVEL", settings.log_level).upper()
    settings.max_decimal_places = _int_from_env("ODS_MAX_DECIMAL_PLACES", settings.max_decimal_places)
    settings.load_default_formats = os.getenv("ODS_LOAD_DEFAULT_FORMATS", "1").lower() in ("1", "true")

    # Can be disabled in dev with ODS_DISABLE_RATE_LIMIT=1
    settings.rate_limit_enabled = not os.getenv("ODS_DISABLE_RATE_LIMIT")
    settings.rate_limit_per_minute = _int_from_env("ODS_RATE_LIMIT_PER_MINUTE", settings.rate_limit_per_minute)
    settings.rate_limit_burst = _int_from_env("ODS_RATE_LIMIT_BURST", settings.rate_limit_burst)

    return settings


# Singleton instance
_settings: EngineSettings | None = None


def get_engine_settings() -> EngineSettings:
    """Get the engine settings singleton.

    Settings are loaded once from environment on first access.
    """
    global _settings
    if _settings is None:
        _settings = _load_settings_from_env()
    return _settings


def reload_engine_settings() -> EngineSettings:
    """Force reload settings from environment.

    Useful for testing or after env changes.
    """
    global _settings
    _settings = _load_settings_from_env()
    return _settings
