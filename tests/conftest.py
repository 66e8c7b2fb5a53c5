"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from daycast.config import clear_settings_cache

from .payloads import DAY_START, hourly_samples, make_payload

_ENV_VARS = (
    "FORECAST_API_KEY",
    "FORECAST_LANG",
    "FORECAST_DEBUG",
    "FORECAST_TIMEOUT",
    "DAYCAST_DAYS",
    "DAYCAST_LOCATION",
    "APP_ENV",
    "DEBUG",
)


@pytest.fixture
def three_day_payload() -> dict[str, Any]:
    """72 hourly samples covering 2024-06-15 .. 2024-06-17 UTC."""
    return make_payload(hourly_samples(DAY_START, 72))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings from leaking between tests or from a local .env."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("daycast.config.load_dotenv", lambda **_kwargs: False)
    clear_settings_cache()
    yield
    clear_settings_cache()
