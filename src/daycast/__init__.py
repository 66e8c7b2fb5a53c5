"""daycast - day-partitioned weather conditions from forecast.io.

Architecture::

    datasources/   External APIs (forecast.io hourly samples)
    schemas.py     Canonical models (Condition, DayBucket, WeatherData)
    flows/         Prefect orchestration (fetch + summarize for the CLI)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: provider payload → normalizer → day partitioner → merge of the
current day's history with the forecast → day-bucketed WeatherData.

Extension points:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from daycast.config import Settings
from daycast.schemas import Condition, DayBucket, LatLon, WeatherCode, WeatherData

__all__ = [
    "Condition",
    "DayBucket",
    "LatLon",
    "Settings",
    "WeatherCode",
    "WeatherData",
    "__version__",
]
