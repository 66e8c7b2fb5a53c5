"""Tests for forecast.io URL building, validation and the icon table."""

from __future__ import annotations

import pytest

from daycast.datasources.forecastio.client import (
    ICON_CODES,
    build_url,
    icon_to_code,
    redact_url,
    validate_api_key,
    validate_location,
)
from daycast.errors import InvalidLocationError, MissingApiKeyError
from daycast.schemas import WeatherCode


class TestValidateLocation:
    """Only ``lat,lon`` pairs are accepted."""

    @pytest.mark.parametrize(
        "location",
        ["40.748,-73.985", "-33.86,151.21", "0,0", "52,13", ".5,-.25"],
    )
    def test_valid(self, location: str) -> None:
        assert validate_location(location) == location

    @pytest.mark.parametrize(
        "location",
        ["New York", "40.748", "40.748, -73.985", "40.748,-73.985,1718409600", ",", "1.,2", ""],
    )
    def test_invalid(self, location: str) -> None:
        with pytest.raises(InvalidLocationError, match="latitude,longitude"):
            validate_location(location)

    def test_invalid_location_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_location("Paris")


class TestValidateApiKey:
    def test_present(self) -> None:
        assert validate_api_key("abc") == "abc"

    def test_missing(self) -> None:
        with pytest.raises(MissingApiKeyError, match="register"):
            validate_api_key("")


class TestBuildUrl:
    """Request URL construction."""

    def test_url(self) -> None:
        url = build_url("KEY", "40.748,-73.985", "de")
        assert url.startswith("https://api.forecast.io/forecast/KEY/40.748,-73.985?")
        assert "units=ca" in url
        assert "lang=de" in url
        assert "exclude=minutely,daily,alerts,flags" in url
        assert "extend=hourly" in url

    def test_redact(self) -> None:
        url = build_url("SECRET", "1,2")
        assert "SECRET" not in redact_url(url, "SECRET")
        assert "<api-key>" in redact_url(url, "SECRET")

    def test_redact_without_key(self) -> None:
        assert redact_url("https://example.com/a", "") == "https://example.com/a"


class TestIconCodes:
    """Icon classification table."""

    def test_clear_maps_to_sunny(self) -> None:
        assert icon_to_code("clear-day") == WeatherCode.SUNNY
        assert icon_to_code("clear-night") == WeatherCode.SUNNY

    def test_unknown(self) -> None:
        assert icon_to_code("tornado") == WeatherCode.UNKNOWN
        assert icon_to_code("") == WeatherCode.UNKNOWN
        assert icon_to_code(None) == WeatherCode.UNKNOWN

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ICON_CODES["hail"] = WeatherCode.LIGHT_SLEET  # type: ignore[index]

    def test_every_code_but_unknown_reachable(self) -> None:
        assert set(ICON_CODES.values()) == set(WeatherCode) - {WeatherCode.UNKNOWN}
