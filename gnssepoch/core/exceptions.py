# gnssepoch/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Construction errors ----
class InvalidEpoch(CoreError, TypeError):
    """Raised when an Epoch / Instant is constructed with invalid inputs."""


class InvalidCalendarDate(CoreError, ValueError):
    """Raised when calendar fields do not describe a representable date/time."""


class InvalidEpochFlag(CoreError, ValueError):
    """Raised when a token is not a known sampling flag."""


class ClockUnavailable(CoreError, RuntimeError):
    """Raised when the system clock cannot be read."""


class DurationOverflow(CoreError, OverflowError):
    """Raised when a duration does not fit in int64 nanoseconds."""


class InstantOutOfRange(CoreError, OverflowError):
    """Raised when an instant falls outside the datetime64[ns] span."""


# ---- Text parsing errors (one per positional field) ----
class EpochParseError(CoreError, ValueError):
    """Base error for epoch text parsing failures."""

    message = "failed to parse epoch"

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        if text is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {text!r}")


class FormatMismatch(EpochParseError):
    """Raised when a line does not split into 6 or 7 tokens."""

    message = 'expecting "yyyy mm dd hh mm ss.sssssss [f]" format'


class InvalidYear(EpochParseError):
    message = 'failed to parse "yyyy" field'


class InvalidMonth(EpochParseError):
    message = 'failed to parse "mm" month field'


class InvalidDay(EpochParseError):
    message = 'failed to parse "dd" day field'


class InvalidHours(EpochParseError):
    message = 'failed to parse "hh" field'


class InvalidMinutes(EpochParseError):
    message = 'failed to parse "mm" minutes field'


class InvalidSeconds(EpochParseError):
    message = 'failed to parse "ss" field'


class InvalidNanoseconds(EpochParseError):
    message = 'failed to parse fractional seconds field'
