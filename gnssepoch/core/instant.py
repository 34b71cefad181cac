# gnssepoch/core/instant.py
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from .exceptions import DurationOverflow, InstantOutOfRange, InvalidEpoch


class TimeScale(IntEnum):
    """Time reference tag attached to an Instant."""

    TAI = 0
    TT = 1
    ET = 2
    TDB = 3
    UTC = 4
    GPST = 5
    GST = 6
    BDT = 7

    def __str__(self) -> str:
        return self.name


DEFAULT_TIMESCALE = TimeScale.UTC

Duration = np.timedelta64

# int64 nanoseconds; the minimum is reserved for NaT.
NS_MIN = np.iinfo(np.int64).min + 1
NS_MAX = np.iinfo(np.int64).max

_NS_PER_UNIT = {
    "W": 7 * 86_400 * 10**9,
    "D": 86_400 * 10**9,
    "h": 3_600 * 10**9,
    "m": 60 * 10**9,
    "s": 10**9,
    "ms": 10**6,
    "us": 10**3,
    "ns": 1,
    "generic": 1,
}
_UNITS_PER_NS = {"ps": 10**3, "fs": 10**6, "as": 10**9}


def _timedelta64_to_ns(value: np.timedelta64) -> int:
    unit, count = np.datetime_data(value.dtype)
    ticks = int(value.astype(np.int64)) * count
    if unit in _NS_PER_UNIT:
        return ticks * _NS_PER_UNIT[unit]
    if unit in _UNITS_PER_NS:
        return ticks // _UNITS_PER_NS[unit]
    raise TypeError(f"cannot express {unit!r} durations in nanoseconds")


def duration_ns(value: np.timedelta64 | _dt.timedelta) -> int:
    """Exact nanosecond count of ``value`` as a Python int."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (np.timedelta64, _dt.timedelta)):
        raise TypeError(f"expected a timedelta, got {type(value).__name__}")
    if isinstance(value, np.timedelta64):
        if np.isnat(value):
            raise ValueError("duration must not be NaT")
        ns = _timedelta64_to_ns(value)
    else:
        ns = value // _dt.timedelta(microseconds=1) * 1_000
    if not NS_MIN <= ns <= NS_MAX:
        raise DurationOverflow(f"duration of {ns} ns does not fit in int64 nanoseconds")
    return ns


def as_duration(value: np.timedelta64 | _dt.timedelta) -> np.timedelta64:
    """Coerce ``value`` to a nanosecond-resolution ``numpy.timedelta64``."""
    return np.timedelta64(duration_ns(value), "ns")


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """
    Nanosecond-resolution point in time, tagged with its time scale.

    ``ns`` counts nanoseconds since 1970-01-01T00:00:00 in ``timescale``
    and stays inside the datetime64[ns] span, so every Instant can be
    projected back to calendar fields.
    Ordering and hashing follow ``(ns, timescale)``.
    """

    ns: int = 0
    timescale: TimeScale = DEFAULT_TIMESCALE

    def __post_init__(self) -> None:
        if isinstance(self.ns, (bool, np.bool_, np.timedelta64)) or not isinstance(
            self.ns, (int, np.integer)
        ):
            raise InvalidEpoch("Instant.ns must be an integer count of nanoseconds.")
        if not isinstance(self.timescale, TimeScale):
            raise InvalidEpoch("Instant.timescale must be a TimeScale.")
        if not NS_MIN <= int(self.ns) <= NS_MAX:
            raise InstantOutOfRange(f"{self.ns} ns is outside the datetime64[ns] span")
        object.__setattr__(self, "ns", int(self.ns))

    @property
    def nanosecond(self) -> int:
        """Nanosecond-of-second component, always in [0, 1e9)."""
        return self.ns % 1_000_000_000

    def with_timescale(self, timescale: TimeScale) -> "Instant":
        # Relabels the tag; ns is not converted between scales.
        return Instant(self.ns, timescale)

    def __add__(self, other):
        if isinstance(other, (np.timedelta64, _dt.timedelta)):
            return Instant(self.ns + duration_ns(other), self.timescale)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Instant):
            diff = self.ns - other.ns
            if not NS_MIN <= diff <= NS_MAX:
                raise DurationOverflow(f"difference of {diff} ns does not fit in int64 nanoseconds")
            return np.timedelta64(diff, "ns")
        if isinstance(other, (np.timedelta64, _dt.timedelta)):
            return Instant(self.ns - duration_ns(other), self.timescale)
        return NotImplemented
