"""Normalize forecast.io samples into Condition records."""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING

from daycast.datasources.forecastio.client import icon_to_code
from daycast.errors import ConditionParseError
from daycast.schemas import Condition

if TYPE_CHECKING:
    from datetime import tzinfo

    from daycast.datasources.forecastio.models import RawSample


def _finite(value: float | None) -> float | None:
    """NaN and infinities count as not reported."""
    if value is None or not math.isfinite(value):
        return None
    return value


def parse_condition(sample: RawSample, tz: tzinfo) -> Condition:
    """
    Convert one provider sample to a Condition.

    Only the timestamp is mandatory.  Unit conversions (``units=ca``):
      - precipitation intensity mm/h → metres (÷ 1000)
      - visibility km → metres (× 1000)
      - precipitation probability 0..1 → percent

    Rate, visibility, wind speed and wind bearing are dropped when negative.
    Wind gusts are not reported by forecast.io and stay None.  NaN or
    infinite numbers are treated as missing.

    Args:
        sample: Decoded data point.
        tz: Zone used to express the timestamp.

    Raises:
        ConditionParseError: If the sample has no usable time.
    """
    if sample.time is None:
        raise ConditionParseError(
            "The forecast.io response did not provide a time for the weather condition"
        )
    try:
        time = datetime.fromtimestamp(int(sample.time), tz)
    except (ValueError, OverflowError, OSError) as e:
        raise ConditionParseError(f"Invalid time {sample.time!r} in weather condition: {e}") from e

    chance_of_rain = None
    precip_probability = _finite(sample.precip_probability)
    if precip_probability is not None:
        chance_of_rain = round(precip_probability * 100)

    precip_m = None
    precip_intensity = _finite(sample.precip_intensity)
    if precip_intensity is not None and precip_intensity >= 0:
        precip_m = precip_intensity / 1000

    visible_dist_m = None
    visibility = _finite(sample.visibility)
    if visibility is not None and visibility >= 0:
        visible_dist_m = visibility * 1000

    windspeed = None
    wind_speed = _finite(sample.wind_speed)
    if wind_speed is not None and wind_speed >= 0:
        windspeed = wind_speed

    winddir = None
    wind_bearing = _finite(sample.wind_bearing)
    if wind_bearing is not None and wind_bearing >= 0:
        winddir = int(wind_bearing) % 360

    return Condition(
        time=time,
        code=icon_to_code(sample.icon),
        desc=sample.summary,
        temp_c=_finite(sample.temperature),
        feels_like_c=_finite(sample.apparent_temperature),
        chance_of_rain_percent=chance_of_rain,
        precip_m=precip_m,
        visible_dist_m=visible_dist_m,
        windspeed_kmph=windspeed,
        winddir_degree=winddir,
    )
