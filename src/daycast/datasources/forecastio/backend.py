"""
Fetch today's history and the hourly forecast, then assemble WeatherData.

Two requests go out per call:
  - ``lat,lon,<now>``: the current day's hours, elapsed ones included
    (runs on a worker thread)
  - ``lat,lon``: the extended hourly forecast (runs on the calling thread)

The current day of the forecast is then replaced by the merge of both.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from pydantic import ValidationError

from daycast.config import get_settings
from daycast.datasources.forecastio.client import (
    build_url,
    redact_url,
    validate_api_key,
    validate_location,
)
from daycast.datasources.forecastio.conditions import parse_condition
from daycast.datasources.forecastio.daily import normalize_day
from daycast.datasources.forecastio.fetch import fetch_response, local_timezone, resolve_timezone
from daycast.datasources.forecastio.merge import merge_slots
from daycast.errors import ForecastDataError
from daycast.logging_config import get_logger
from daycast.schemas import DayBucket, LatLon, WeatherData
from daycast.services.http import DEFAULT_TIMEOUT

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import tzinfo

    from daycast.config import Settings
    from daycast.datasources.forecastio.models import ForecastResponse
    from daycast.schemas import Condition

logger = get_logger(__name__)


class ForecastBackend:
    """forecast.io client producing day-bucketed conditions."""

    def __init__(
        self,
        api_key: str,
        lang: str = "en",
        debug: bool = False,
        clock: Callable[[], float] = time.time,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.lang = lang
        self.debug = debug
        self.clock = clock
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ForecastBackend:
        settings = settings or get_settings()
        return cls(
            api_key=settings.forecast_api_key,
            lang=settings.forecast_lang,
            debug=settings.forecast_debug,
            timeout=settings.forecast_timeout,
        )

    def fetch(self, location: str) -> tuple[ForecastResponse, tzinfo]:
        """Fetch one response and the zone its timestamps should use."""
        url = build_url(self.api_key, location, self.lang)
        resp = fetch_response(
            url,
            debug=self.debug,
            log_url=redact_url(url, self.api_key),
            timeout=self.timeout,
        )
        return resp, resolve_timezone(resp.timezone, local_timezone())

    def fetch_today(self, location: str) -> list[Condition]:
        """
        Fetch the current day's hourly conditions, elapsed hours included.

        Raises:
            FetchError: If the request fails.
            ForecastDataError: If the response holds no usable hour.
        """
        resp, tz = self.fetch(f"{location},{int(self.clock())}")
        days = normalize_day(resp.hourly.data, 1, tz)
        if not days:
            raise ForecastDataError("Failed to parse today's weather data")
        return days[0].slots

    def fetch_merged(self, location: str, numdays: int) -> WeatherData:
        """
        Current conditions plus up to ``numdays`` days of hourly forecast.

        Args:
            location: ``"lat,lon"`` in decimal degrees.
            numdays: Number of day buckets wanted.

        Raises:
            InvalidLocationError: If ``location`` isn't a ``lat,lon`` pair.
            MissingApiKeyError: If no API key is configured.
            FetchError: If either request fails.
            ConditionParseError: If the current conditions have no usable time.
            ForecastDataError: If today's history holds no usable hour.
        """
        validate_api_key(self.api_key)
        validate_location(location)

        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="fetch-today") as executor:
            today = executor.submit(self.fetch_today, location) if numdays >= 1 else None

            resp, tz = self.fetch(location)

            geo_loc, resolved = geo_location(resp, location)

            current = parse_condition(resp.currently, tz)
            forecast = normalize_day(resp.hourly.data, numdays, tz)

            if today is not None:
                history = today.result()
                merge_today(forecast, history)

        return WeatherData(current=current, forecast=forecast, location=resolved, geo_loc=geo_loc)


def geo_location(resp: ForecastResponse, location: str) -> tuple[LatLon | None, str]:
    """Coordinates reported by the provider, and the location label to show.

    Missing or out-of-range coordinates fall back to the requested location.
    """
    if resp.latitude is None or resp.longitude is None:
        logger.info("No latitude,longitude in response for %s", location)
        return None, location
    try:
        geo_loc = LatLon(latitude=resp.latitude, longitude=resp.longitude)
    except ValidationError:
        logger.warning(
            "Invalid latitude,longitude %s,%s in response for %s",
            resp.latitude,
            resp.longitude,
            location,
        )
        return None, location
    return geo_loc, f"{geo_loc.latitude:f}:{geo_loc.longitude:f}"


def merge_today(forecast: list[DayBucket], history: list[Condition]) -> list[DayBucket]:
    """Replace the first bucket's slots with their merge with ``history``.

    Modifies ``forecast`` in place and returns it.
    """
    if forecast:
        forecast[0].slots = merge_slots(history, forecast[0].slots)
    elif history:
        forecast.append(DayBucket(date=history[0].time.date(), slots=list(history)))
    return forecast


def fetch_merged(location: str, numdays: int, settings: Settings | None = None) -> WeatherData:
    """Shortcut for ``ForecastBackend.from_settings(settings).fetch_merged(...)``."""
    return ForecastBackend.from_settings(settings).fetch_merged(location, numdays)
