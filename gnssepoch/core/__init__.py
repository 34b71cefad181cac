"""
Core domain objects for gnssepoch.

This module defines the format-agnostic time model:
- Instant: nanosecond timestamp tagged with a TimeScale
- CalendarEngine: calendar <-> Instant conversions (numpy-backed default)
- EpochFlag: sampling condition of a record
- Epoch: Instant + EpochFlag, the value carried by every record

The core layer is independent from the textual layouts in ``gnssepoch.io``.
"""

from .instant import Instant, TimeScale, Duration, DEFAULT_TIMESCALE, as_duration
from .calendar import CalendarEngine, NumpyCalendar, DEFAULT_ENGINE
from .flag import EpochFlag
from .epoch import Epoch
from .exceptions import (
    CoreError,
    InvalidEpoch,
    InvalidCalendarDate,
    InvalidEpochFlag,
    ClockUnavailable,
    DurationOverflow,
    InstantOutOfRange,
    EpochParseError,
    FormatMismatch,
    InvalidYear,
    InvalidMonth,
    InvalidDay,
    InvalidHours,
    InvalidMinutes,
    InvalidSeconds,
    InvalidNanoseconds,
)


__all__ = [
    # time model
    "Instant",
    "TimeScale",
    "Duration",
    "DEFAULT_TIMESCALE",
    "as_duration",

    # calendar engine
    "CalendarEngine",
    "NumpyCalendar",
    "DEFAULT_ENGINE",

    # domain objects
    "EpochFlag",
    "Epoch",

    # exceptions
    "CoreError",
    "InvalidEpoch",
    "InvalidCalendarDate",
    "InvalidEpochFlag",
    "ClockUnavailable",
    "DurationOverflow",
    "InstantOutOfRange",
    "EpochParseError",
    "FormatMismatch",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "InvalidHours",
    "InvalidMinutes",
    "InvalidSeconds",
    "InvalidNanoseconds",
]
