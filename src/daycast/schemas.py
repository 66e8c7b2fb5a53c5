"""
Canonical weather models.

Pydantic models handed to display clients.  Provider modules normalize their
responses into these; nothing here knows about any particular provider.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Conditions
# =============================================================================


class WeatherCode(StrEnum):
    """Weather condition categories understood by display clients."""

    UNKNOWN = "unknown"
    CLOUDY = "cloudy"
    FOG = "fog"
    LIGHT_RAIN = "light_rain"
    LIGHT_SLEET = "light_sleet"
    LIGHT_SNOW = "light_snow"
    PARTLY_CLOUDY = "partly_cloudy"
    SUNNY = "sunny"
    THUNDERY_SHOWERS = "thundery_showers"


class Condition(BaseModel):
    """Weather at one point in time.

    Optional fields are None when the provider did not report them; no
    defaults are invented.
    """

    model_config = ConfigDict(frozen=True)

    time: datetime = Field(..., description="Timezone-aware timestamp")
    code: WeatherCode = WeatherCode.UNKNOWN
    desc: str = ""
    temp_c: float | None = None
    feels_like_c: float | None = None
    chance_of_rain_percent: int | None = None
    precip_m: float | None = Field(default=None, ge=0)
    visible_dist_m: float | None = Field(default=None, ge=0)
    windspeed_kmph: float | None = Field(default=None, ge=0)
    windgust_kmph: float | None = Field(default=None, ge=0)
    winddir_degree: int | None = Field(default=None, ge=0, lt=360)


# =============================================================================
# Days
# =============================================================================


class DayBucket(BaseModel):
    """One calendar day of conditions, ordered by time."""

    date: date
    slots: list[Condition] = Field(default_factory=list)

    @classmethod
    def starting_with(cls, slot: Condition) -> DayBucket:
        """Open a bucket dated by the calendar day of ``slot``."""
        return cls(date=slot.time.date(), slots=[slot])


# =============================================================================
# Request result
# =============================================================================


class LatLon(BaseModel):
    """Coordinates reported back by the provider."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class WeatherData(BaseModel):
    """Everything a display client needs for one location."""

    current: Condition
    forecast: list[DayBucket] = Field(default_factory=list)
    location: str
    geo_loc: LatLon | None = None
