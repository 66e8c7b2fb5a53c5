"""forecast.io weather data source.

Fetches hourly conditions for a ``lat,lon`` location and normalizes them
into day-bucketed ``daycast.schemas`` models.  Needs an API key
(``FORECAST_API_KEY``).

Public API:
  - backend: ForecastBackend, fetch_merged (current + N days, today merged)
  - daily: normalize_day (samples → day buckets)
  - conditions: parse_condition (one sample → Condition)
  - merge: merge_slots (history/forecast interleave)
  - models: RawSample, DataBlock, ForecastResponse
  - client: API URL, icon table
"""

from daycast.datasources.forecastio.backend import ForecastBackend, fetch_merged, merge_today
from daycast.datasources.forecastio.client import FORECAST_API, ICON_CODES
from daycast.datasources.forecastio.conditions import parse_condition
from daycast.datasources.forecastio.daily import normalize_day
from daycast.datasources.forecastio.merge import merge_slots
from daycast.datasources.forecastio.models import DataBlock, ForecastResponse, RawSample

__all__ = [
    "FORECAST_API",
    "ICON_CODES",
    "DataBlock",
    "ForecastBackend",
    "ForecastResponse",
    "RawSample",
    "fetch_merged",
    "merge_slots",
    "merge_today",
    "normalize_day",
    "parse_condition",
]
