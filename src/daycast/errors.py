"""Exceptions raised by daycast.

Request-level failures propagate to the caller as one of these; the CLI
decides whether to report and exit.  Per-sample failures are raised by the
normalizer and swallowed (with a log line) by the day partitioner.
"""

from __future__ import annotations


class ForecastError(Exception):
    """Base class for all daycast errors."""


class ConditionParseError(ForecastError):
    """A provider sample could not be turned into a Condition."""


class InvalidLocationError(ForecastError, ValueError):
    """The location is not a ``latitude,longitude`` pair."""


class MissingApiKeyError(ForecastError):
    """No forecast.io API key is configured."""


class FetchError(ForecastError):
    """Transport, HTTP status or JSON decoding failure."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ForecastDataError(ForecastError):
    """The provider answered, but without usable weather data."""
