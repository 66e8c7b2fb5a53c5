"""
Prefect flow for fetching a day-bucketed forecast.

Run locally:
    python -m daycast.flows.forecast 40.748,-73.985

Run with Prefect dashboard:
    prefect server start &
    python -m daycast.flows.forecast 40.748,-73.985
"""

from __future__ import annotations

import sys
from typing import Any

from prefect import flow, task

from daycast.datasources import forecastio
from daycast.schemas import WeatherData  # noqa: TC001 (Prefect reads type hints at runtime)


@task(name="fetch-forecast")
def fetch_forecast(location: str, numdays: int = 3) -> WeatherData:
    """Fetch current conditions and ``numdays`` of hourly forecast."""
    return forecastio.fetch_merged(location, numdays)


@task(name="summarize-forecast")
def summarize_forecast(data: WeatherData) -> dict[str, Any]:
    """Reduce WeatherData to a plain dict for display."""
    return {
        "location": data.location,
        "current": {
            "time": data.current.time.isoformat(),
            "code": str(data.current.code),
            "desc": data.current.desc,
            "temp_c": data.current.temp_c,
        },
        "days": [
            {
                "date": day.date.isoformat(),
                "slots": len(day.slots),
                "first": day.slots[0].time.strftime("%H:%M") if day.slots else None,
                "last": day.slots[-1].time.strftime("%H:%M") if day.slots else None,
                "codes": sorted({str(s.code) for s in day.slots}),
            }
            for day in data.forecast
        ],
    }


@flow(name="forecast", log_prints=True)
def forecast_flow(location: str, numdays: int = 3) -> dict[str, Any]:
    """
    Fetch and summarize the forecast for one location.

    Both forecast.io requests are made inside ``fetch-forecast``; the
    current day's history is merged into the first day there.
    """
    print(f"Fetching {numdays} day(s) of weather for {location}...")
    data = fetch_forecast(location, numdays)
    summary = summarize_forecast(data)
    print(f"Got {len(summary['days'])} day(s) for {summary['location']}")
    return summary


if __name__ == "__main__":
    result = forecast_flow(sys.argv[1] if len(sys.argv) > 1 else "45.5,-122.6")
    print(f"Flow complete: {result}")
