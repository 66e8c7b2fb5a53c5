"""
Application settings.

Values come from environment variables (optionally via a ``.env`` file).
The forecast.io options mirror the backend's former command-line flags:
``FORECAST_API_KEY``, ``FORECAST_LANG`` and ``FORECAST_DEBUG``.
``FORECAST_TIMEOUT`` bounds each provider request, in seconds.
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


class Settings(BaseModel):
    """Runtime configuration."""

    app_name: str = "daycast"
    app_env: str = "development"
    debug: bool = False

    forecast_api_key: str = Field(default="", repr=False)
    forecast_lang: str = "en"
    forecast_debug: bool = False
    forecast_timeout: float = Field(default=30, gt=0)

    days: int = Field(default=3, ge=0)
    location: str | None = None

    @property
    def masked_api_key(self) -> str:
        """API key with everything but the last four characters hidden."""
        if not self.forecast_api_key:
            return "(not set)"
        return "*" * max(len(self.forecast_api_key) - 4, 0) + self.forecast_api_key[-4:]

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the current process environment."""
        return cls(
            app_env=os.getenv("APP_ENV", "development"),
            debug=_env_flag("DEBUG"),
            forecast_api_key=os.getenv("FORECAST_API_KEY", ""),
            forecast_lang=os.getenv("FORECAST_LANG", "en"),
            forecast_debug=_env_flag("FORECAST_DEBUG"),
            forecast_timeout=float(os.getenv("FORECAST_TIMEOUT", "30")),
            days=int(os.getenv("DAYCAST_DAYS", "3")),
            location=os.getenv("DAYCAST_LOCATION") or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading ``.env`` on first use."""
    load_dotenv(override=False)
    return Settings.from_env()


def clear_settings_cache() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
