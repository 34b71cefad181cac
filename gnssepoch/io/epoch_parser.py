# gnssepoch/io/epoch_parser.py
"""Parse epoch stamps from every known observation / navigation layout.

Recognized layouts (tokens separated by ASCII whitespace):

    "20 12 31 23 45  0.0"               legacy nav, 2-digit year, 0.1 s
    "2021 01 01 00 00 00"               modern nav, whole seconds
    " 21 12 21  0  0 30.0000000  0"     legacy obs, 2-digit year, 100 ns
    " 2022 01 09 00 00  0.1234000  0"   modern obs, 100 ns

plus the flagless / flagged variants of each.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from gnssepoch.core import (
    CalendarEngine,
    Epoch,
    EpochFlag,
    EpochParseError,
    FormatMismatch,
    InvalidDay,
    InvalidHours,
    InvalidMinutes,
    InvalidMonth,
    InvalidNanoseconds,
    InvalidSeconds,
    InvalidYear,
)

logger = logging.getLogger(__name__)


# Seconds tokens shorter than this carry tenths of a second (legacy nav);
# longer ones carry 100 ns units (observation records).
PRECISION_SWITCH_WIDTH = 7
TENTHS_TO_NANOS = 100_000_000
HUNDRED_NANOS_TO_NANOS = 100

# Years below the pivot are two-digit years of the 2000s.
TWO_DIGIT_YEAR_PIVOT = 100
TWO_DIGIT_YEAR_BASE = 2000

U8_MAX = 0xFF
U32_MAX = 0xFFFF_FFFF
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_ASCII_WS_RE = re.compile(r"[ \t\n\f\r]+")
_UINT_RE = re.compile(r"\+?[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _tokenize(line: str) -> list[str]:
    return [tok for tok in _ASCII_WS_RE.split(line) if tok]


def _parse_int(
    text: str,
    pattern: re.Pattern[str],
    lo: int,
    hi: int,
    error: type[EpochParseError],
) -> int:
    if pattern.fullmatch(text) is None:
        raise error(text)
    value = int(text)
    if not lo <= value <= hi:
        raise error(text)
    return value


def _parse_u8(text: str, error: type[EpochParseError]) -> int:
    return _parse_int(text, _UINT_RE, 0, U8_MAX, error)


def _parse_year(text: str) -> int:
    year = _parse_int(text, _INT_RE, I32_MIN, I32_MAX, InvalidYear)
    if year < TWO_DIGIT_YEAR_PIVOT:
        year += TWO_DIGIT_YEAR_BASE
    return year


def _parse_seconds(text: str) -> tuple[int, int]:
    """Parse the seconds column into (seconds, nanoseconds)."""
    dot = text.find(".")
    if dot < 0:
        return _parse_u8(text.strip(), InvalidSeconds), 0

    seconds = _parse_u8(text[:dot].strip(), InvalidSeconds)
    frac = _parse_int(text[dot + 1:].strip(), _UINT_RE, 0, U32_MAX, InvalidNanoseconds)

    # The token width is the only thing telling the two conventions apart.
    if len(text.strip()) < PRECISION_SWITCH_WIDTH:
        nanos = frac * TENTHS_TO_NANOS
    else:
        nanos = frac * HUNDRED_NANOS_TO_NANOS
    if nanos >= 1_000_000_000:
        raise InvalidNanoseconds(text)
    return seconds, nanos


@dataclass(frozen=True, slots=True)
class EpochParser:
    """
    Turns a timestamp line into an Epoch.

    - engine: calendar engine used to build the instant (default: numpy)
    - flag_parser: maps the optional 7th token to an EpochFlag

    Structural fields are strict: each one raises its own EpochParseError
    subclass. The flag column is lenient: a flag that does not parse falls
    back to the default flag.
    """

    engine: CalendarEngine | None = None
    flag_parser: Callable[[str], EpochFlag] = field(default=EpochFlag.parse, repr=False)

    def parse(self, line: str) -> Epoch:
        tokens = _tokenize(line)
        if len(tokens) not in (6, 7):
            raise FormatMismatch(line)

        year = _parse_year(tokens[0])
        month = _parse_u8(tokens[1], InvalidMonth)
        day = _parse_u8(tokens[2], InvalidDay)
        hour = _parse_u8(tokens[3], InvalidHours)
        minute = _parse_u8(tokens[4], InvalidMinutes)
        second, nanos = _parse_seconds(tokens[5])

        flag = EpochFlag.default()
        if len(tokens) == 7:
            flag = self._parse_flag(tokens[6])

        epoch = Epoch.from_calendar_utc(
            year, month, day, hour, minute, second, nanos, engine=self.engine
        )
        return epoch.with_flag(flag)

    def _parse_flag(self, token: str) -> EpochFlag:
        try:
            return self.flag_parser(token.strip())
        except ValueError as exc:
            logger.debug("Ignoring unparsable epoch flag %r: %s", token, exc)
            return EpochFlag.default()


_DEFAULT_PARSER = EpochParser()


def parse_epoch(line: str) -> Epoch:
    """Parse ``line`` with the default engine and flag parser."""
    return _DEFAULT_PARSER.parse(line)
