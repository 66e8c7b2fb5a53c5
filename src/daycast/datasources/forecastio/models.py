"""Raw forecast.io response models.

Decoded JSON, nothing normalized yet.  Every field may be missing from the
provider payload and is then None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _opt_float(data: dict[str, Any], key: str) -> float | None:
    """Read an optional number; reject anything that isn't one."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"expected a number for {key!r}, got {value!r}")
    return float(value)


def _opt_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"expected a string for {key!r}, got {value!r}")
    return value


def _object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected an object for {key!r}, got {type(value).__name__}")
    return value


def _as_object(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"expected a data point object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class RawSample:
    """One forecast.io data point (``currently`` or an ``hourly`` entry)."""

    time: float | None = None
    summary: str = ""
    icon: str = ""
    sunrise_time: float | None = None
    sunset_time: float | None = None
    precip_intensity: float | None = None
    precip_probability: float | None = None
    temperature: float | None = None
    temperature_min: float | None = None
    temperature_max: float | None = None
    apparent_temperature: float | None = None
    wind_speed: float | None = None
    wind_bearing: float | None = None
    visibility: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawSample:
        """Decode a data point object, ignoring unknown keys."""
        return cls(
            time=_opt_float(data, "time"),
            summary=_opt_str(data, "summary") or "",
            icon=_opt_str(data, "icon") or "",
            sunrise_time=_opt_float(data, "sunriseTime"),
            sunset_time=_opt_float(data, "sunsetTime"),
            precip_intensity=_opt_float(data, "precipIntensity"),
            precip_probability=_opt_float(data, "precipProbability"),
            temperature=_opt_float(data, "temperature"),
            temperature_min=_opt_float(data, "temperatureMin"),
            temperature_max=_opt_float(data, "temperatureMax"),
            apparent_temperature=_opt_float(data, "apparentTemperature"),
            wind_speed=_opt_float(data, "windSpeed"),
            wind_bearing=_opt_float(data, "windBearing"),
            visibility=_opt_float(data, "visibility"),
        )


@dataclass(frozen=True)
class DataBlock:
    """A forecast.io data block: a summary plus time-ordered samples."""

    summary: str = ""
    icon: str = ""
    data: tuple[RawSample, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataBlock:
        points = data.get("data") or []
        if not isinstance(points, list):
            raise ValueError(f"expected a list for 'data', got {type(points).__name__}")
        return cls(
            summary=_opt_str(data, "summary") or "",
            icon=_opt_str(data, "icon") or "",
            data=tuple(RawSample.from_dict(_as_object(p)) for p in points),
        )


@dataclass(frozen=True)
class ForecastResponse:
    """Top-level forecast.io response."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    currently: RawSample = field(default_factory=RawSample)
    hourly: DataBlock = field(default_factory=DataBlock)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ForecastResponse:
        """
        Decode a parsed JSON response.

        Raises:
            ValueError: If a field has the wrong JSON type.
        """
        return cls(
            latitude=_opt_float(data, "latitude"),
            longitude=_opt_float(data, "longitude"),
            timezone=_opt_str(data, "timezone"),
            currently=RawSample.from_dict(_object(data, "currently")),
            hourly=DataBlock.from_dict(_object(data, "hourly")),
        )
