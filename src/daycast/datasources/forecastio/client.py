"""forecast.io API constants and lookup tables.

API docs: https://developer.forecast.io/docs/v2
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING

from daycast.errors import InvalidLocationError, MissingApiKeyError
from daycast.schemas import WeatherCode

if TYPE_CHECKING:
    from collections.abc import Mapping

FORECAST_API = "https://api.forecast.io/forecast"

# units=ca: °C, km/h, km visibility, mm/h precipitation intensity.
# extend=hourly asks for 168 hours instead of 48.
FORECAST_PARAMS = "units=ca&lang={lang}&exclude=minutely,daily,alerts,flags&extend=hourly"

REGISTER_URL = "https://developer.forecast.io/register"

#: forecast.io ``icon`` values → WeatherCode.  Unlisted icons are UNKNOWN.
ICON_CODES: Mapping[str, WeatherCode] = MappingProxyType(
    {
        "clear-day": WeatherCode.SUNNY,
        "clear-night": WeatherCode.SUNNY,
        "rain": WeatherCode.LIGHT_RAIN,
        "snow": WeatherCode.LIGHT_SNOW,
        "sleet": WeatherCode.LIGHT_SLEET,
        "wind": WeatherCode.PARTLY_CLOUDY,
        "fog": WeatherCode.FOG,
        "cloudy": WeatherCode.CLOUDY,
        "partly-cloudy-day": WeatherCode.PARTLY_CLOUDY,
        "partly-cloudy-night": WeatherCode.PARTLY_CLOUDY,
        "thunderstorm": WeatherCode.THUNDERY_SHOWERS,
    }
)

# Signed decimal degrees, e.g. "40.748,-73.985" or "-.5,12"
LOCATION_PATTERN = re.compile(r"^-?(?:\d+(?:\.\d+)?|\.\d+),-?(?:\d+(?:\.\d+)?|\.\d+)$")


def icon_to_code(icon: str | None) -> WeatherCode:
    """Classify a forecast.io icon string."""
    if not icon:
        return WeatherCode.UNKNOWN
    return ICON_CODES.get(icon, WeatherCode.UNKNOWN)


def validate_location(location: str) -> str:
    """Return ``location`` unchanged, or raise if it isn't ``lat,lon``."""
    if not LOCATION_PATTERN.match(location):
        raise InvalidLocationError(
            "The forecast.io backend only supports latitude,longitude pairs as location. "
            f"Try `40.748,-73.985` instead of `{location}` to get weather for New York"
        )
    return location


def validate_api_key(api_key: str) -> str:
    """Return ``api_key`` unchanged, or raise if it is empty."""
    if not api_key:
        raise MissingApiKeyError(
            f"No forecast.io API key specified. You have to register for one at {REGISTER_URL}"
        )
    return api_key


def build_url(api_key: str, location: str, lang: str = "en") -> str:
    """Build the request URL for a location (``lat,lon`` or ``lat,lon,time``)."""
    return f"{FORECAST_API}/{api_key}/{location}?" + FORECAST_PARAMS.format(lang=lang)


def redact_url(url: str, api_key: str) -> str:
    """Hide the API key in a URL meant for logs or error messages."""
    return url.replace(f"/{api_key}/", "/<api-key>/") if api_key else url
