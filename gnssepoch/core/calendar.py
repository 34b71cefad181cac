# gnssepoch/core/calendar.py
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

import numpy as np

from .exceptions import ClockUnavailable, InvalidCalendarDate
from .instant import DEFAULT_TIMESCALE, Instant, TimeScale


CalendarFields = tuple[int, int, int, int, int, int, int]

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_DAY = 86_400 * NANOS_PER_SECOND

# datetime64[ns] spans 1677-09-21 .. 2262-04-11; keep to whole years inside it.
MIN_YEAR = 1678
MAX_YEAR = 2261

# Modified Julian Day of 1970-01-01.
MJD_UNIX_EPOCH = 40_587


@runtime_checkable
class CalendarEngine(Protocol):
    """Calendar <-> Instant conversions used by Epoch.

    Implementations must work at nanosecond resolution and attach a
    TimeScale to every Instant they build.
    """

    def from_calendar(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanos: int,
        timescale: TimeScale = DEFAULT_TIMESCALE,
    ) -> Instant: ...

    def to_calendar(self, instant: Instant) -> CalendarFields: ...

    def to_mjd(self, instant: Instant) -> float: ...

    def now(self) -> Instant: ...


def _check_range(name: str, value: int, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidCalendarDate(f"{name} must be an integer, got {type(value).__name__}")
    if not lo <= value <= hi:
        raise InvalidCalendarDate(f"{name} must be in [{lo}, {hi}], got {value}")


class NumpyCalendar:
    """Gregorian calendar engine backed by ``numpy.datetime64[ns]``.

    UTC is handled as a uniform scale: no leap-second table is applied, so
    calendar fields map one-to-one onto nanoseconds since 1970-01-01.
    Leap-second stamps (23:59:60) have no slot on that scale and are
    rejected with InvalidCalendarDate.
    """

    def from_calendar(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanos: int,
        timescale: TimeScale = DEFAULT_TIMESCALE,
    ) -> Instant:
        _check_range("year", year, MIN_YEAR, MAX_YEAR)
        _check_range("month", month, 1, 12)
        month_start = np.datetime64((int(year) - 1970) * 12 + int(month) - 1, "M")
        first_day = month_start.astype("datetime64[D]")
        days_in_month = int(((month_start + 1).astype("datetime64[D]") - first_day).astype(np.int64))

        _check_range("day", day, 1, days_in_month)
        _check_range("hour", hour, 0, 23)
        _check_range("minute", minute, 0, 59)
        if second == 60 and hour == 23 and minute == 59:
            raise InvalidCalendarDate("leap second 23:59:60 is not representable on a uniform UTC scale")
        _check_range("second", second, 0, 59)
        _check_range("nanos", nanos, 0, NANOS_PER_SECOND - 1)

        days = int(first_day.astype(np.int64)) + int(day) - 1
        seconds = (int(hour) * 60 + int(minute)) * 60 + int(second)
        return Instant(days * NANOS_PER_DAY + seconds * NANOS_PER_SECOND + int(nanos), timescale)

    def to_calendar(self, instant: Instant) -> CalendarFields:
        t = np.datetime64(instant.ns, "ns")
        month_start = t.astype("datetime64[M]")
        day_start = t.astype("datetime64[D]")

        months = int(month_start.astype(np.int64))
        year = months // 12 + 1970
        month = months % 12 + 1
        day = int((day_start - month_start.astype("datetime64[D]")).astype(np.int64)) + 1

        rem = instant.ns - int(day_start.astype(np.int64)) * NANOS_PER_DAY
        secs, nanos = divmod(rem, NANOS_PER_SECOND)
        hour, secs = divmod(secs, 3600)
        minute, second = divmod(secs, 60)
        return year, month, day, hour, minute, second, nanos

    def to_mjd(self, instant: Instant) -> float:
        days, rem = divmod(instant.ns, NANOS_PER_DAY)
        return MJD_UNIX_EPOCH + days + rem / NANOS_PER_DAY

    def now(self) -> Instant:
        try:
            ns = time.time_ns()
        except OSError as exc:
            raise ClockUnavailable("system clock is not readable") from exc
        return Instant(ns, TimeScale.UTC)


DEFAULT_ENGINE: CalendarEngine = NumpyCalendar()


def resolve_engine(engine: CalendarEngine | None) -> CalendarEngine:
    return DEFAULT_ENGINE if engine is None else engine
