"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from daycast.config import Settings, clear_settings_cache, get_settings


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self) -> None:
        settings = get_settings()
        assert settings.app_name == "daycast"
        assert settings.forecast_api_key == ""
        assert settings.forecast_lang == "en"
        assert settings.forecast_debug is False
        assert settings.days == 3
        assert settings.location is None
        assert settings.forecast_timeout == 30

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORECAST_API_KEY", "abc123")
        monkeypatch.setenv("FORECAST_LANG", "de")
        monkeypatch.setenv("FORECAST_DEBUG", "yes")
        monkeypatch.setenv("DAYCAST_DAYS", "5")
        monkeypatch.setenv("DAYCAST_LOCATION", "52.52,13.40")
        monkeypatch.setenv("FORECAST_TIMEOUT", "2.5")

        settings = get_settings()

        assert settings.forecast_api_key == "abc123"
        assert settings.forecast_lang == "de"
        assert settings.forecast_debug is True
        assert settings.days == 5
        assert settings.location == "52.52,13.40"
        assert settings.forecast_timeout == 2.5

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_falsy_flags(self, value: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORECAST_DEBUG", value)
        assert get_settings().forecast_debug is False

    def test_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("FORECAST_LANG", "fr")
        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().forecast_lang == "fr"

    def test_negative_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(days=-1)

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_non_positive_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            Settings(forecast_timeout=timeout)

    def test_api_key_hidden_from_repr(self) -> None:
        assert "topsecret" not in repr(Settings(forecast_api_key="topsecret"))

    @pytest.mark.parametrize(
        ("key", "masked"),
        [("", "(not set)"), ("abcd", "abcd"), ("abcdefgh", "****efgh")],
    )
    def test_masked_api_key(self, key: str, masked: str) -> None:
        assert Settings(forecast_api_key=key).masked_api_key == masked
