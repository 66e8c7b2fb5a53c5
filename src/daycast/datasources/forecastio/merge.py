"""Merge the current day's history with its forecast."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from daycast.schemas import Condition


def merge_slots(history: Sequence[Condition], future: Sequence[Condition]) -> list[Condition]:
    """
    Interleave two time-ordered condition lists.

    When both lists have a slot at the same time, the ``future`` (forecast)
    slot is kept and the ``history`` one dropped.

    >>> merge_slots([], [])
    []
    """
    merged: list[Condition] = []
    h = f = 0

    while h < len(history) or f < len(future):
        if f >= len(future):
            merged.append(history[h])
            h += 1
        elif h >= len(history) or history[h].time > future[f].time:
            merged.append(future[f])
            f += 1
        elif history[h].time < future[f].time:
            merged.append(history[h])
            h += 1
        else:
            merged.append(future[f])
            h += 1
            f += 1

    return merged
