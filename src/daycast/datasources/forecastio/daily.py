"""Group hourly samples into calendar-day buckets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from daycast.datasources.forecastio.conditions import parse_condition
from daycast.datasources.forecastio.fetch import local_timezone
from daycast.errors import ConditionParseError
from daycast.logging_config import get_logger
from daycast.schemas import DayBucket

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import tzinfo

    from daycast.datasources.forecastio.models import RawSample

logger = get_logger(__name__)


def normalize_day(
    samples: Iterable[RawSample],
    numdays: int,
    tz: tzinfo | None = None,
) -> list[DayBucket]:
    """
    Normalize time-ordered samples and split them into day buckets.

    Samples without a timestamp are logged and skipped.  Once ``numdays - 1``
    buckets are closed, the first sample of the following day ends the
    walk, so the result never holds more than ``numdays`` buckets.

    No daily min/max temperature or astronomy is aggregated.

    Args:
        samples: Samples in ascending time order.
        numdays: Maximum number of buckets to return.
        tz: Zone that decides calendar days (defaults to local time).

    Returns:
        Buckets in date order; empty when ``numdays < 1`` or nothing parsed.
    """
    if numdays < 1:
        return []
    tz = tz or local_timezone()

    forecast: list[DayBucket] = []
    day: DayBucket | None = None

    for sample in samples:
        try:
            slot = parse_condition(sample, tz)
        except ConditionParseError as e:
            logger.warning("Error parsing hourly weather condition: %s", e)
            continue

        if day is not None and day.date != slot.time.date():
            if len(forecast) >= numdays - 1:
                break
            forecast.append(day)
            day = None

        if day is None:
            day = DayBucket.starting_with(slot)
        else:
            day.slots.append(slot)

    if day is not None:
        forecast.append(day)
    return forecast
