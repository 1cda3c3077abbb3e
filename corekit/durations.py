"""Conversion of durations to whole nanoseconds with overflow checks."""

from __future__ import annotations

import math
from datetime import timedelta

__all__ = ["convert_to_nanoseconds", "NANOSECONDS_MAX", "NANOSECONDS_MIN"]

NANOSECONDS_MAX = 2**63 - 1
NANOSECONDS_MIN = -(2**63)


def _to_nanoseconds(duration: timedelta | int | float) -> int | float:
    if isinstance(duration, timedelta):
        whole_seconds = duration.days * 86_400 + duration.seconds
        return whole_seconds * 1_000_000_000 + duration.microseconds * 1_000
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise TypeError(f"unsupported duration type: {type(duration).__name__}")
    if isinstance(duration, int):
        return duration * 1_000_000_000
    if math.isnan(duration):
        raise ValueError("time must not be NaN")
    return duration * 1e9


def convert_to_nanoseconds(duration: timedelta | int | float) -> int:
    """Convert a duration to an integer count of nanoseconds.

    ``duration`` is a :class:`datetime.timedelta` or a number of seconds.
    Fractional nanoseconds are truncated toward zero.

    :raises ValueError: if the result does not fit in a signed 64-bit count.
    """
    nanoseconds = _to_nanoseconds(duration)
    if nanoseconds > NANOSECONDS_MAX:
        raise ValueError("time must be less than the maximum nanosecond count")
    if nanoseconds < NANOSECONDS_MIN:
        raise ValueError("time must be bigger than the minimum nanosecond count")
    return int(nanoseconds)