# gnssepoch/core/epoch.py
from __future__ import annotations

import datetime as _dt
import logging
from dataclasses import dataclass, field

import numpy as np

from .calendar import CalendarEngine, CalendarFields, resolve_engine
from .exceptions import ClockUnavailable, InvalidEpoch
from .flag import EpochFlag
from .instant import Instant, TimeScale, as_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class Epoch:
    """
    A sampling instant: nanosecond-resolution timestamp + sampling flag.

    Immutable; every transformation returns a new Epoch. Equality, ordering
    and hashing are lexicographic over ``(instant, flag)``, so two epochs at
    the same instant but with different flags are distinct keys.

    Calendar projections go through a CalendarEngine; pass ``engine=`` to
    override the numpy-backed default.
    """

    instant: Instant
    flag: EpochFlag = field(default=EpochFlag.Ok)

    def __post_init__(self) -> None:
        if not isinstance(self.instant, Instant):
            raise InvalidEpoch("Epoch.instant must be an Instant.")
        if not isinstance(self.flag, EpochFlag):
            raise InvalidEpoch("Epoch.flag must be an EpochFlag.")

    def __str__(self) -> str:
        # Default text form is the modern observation layout.
        from gnssepoch.io.epoch_writer import format_observation

        return format_observation(self)

    # ---- constructors ----
    @classmethod
    def now(cls, *, engine: CalendarEngine | None = None) -> "Epoch":
        """Current UTC instant with the default flag.

        Falls back to the zero instant if the clock cannot be read.
        """
        try:
            instant = resolve_engine(engine).now()
        except ClockUnavailable as exc:
            logger.warning("Clock unavailable (%s); using zero instant.", exc)
            instant = Instant()
        return cls(instant, EpochFlag.default())

    @classmethod
    def from_calendar_utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanos: int,
        *,
        engine: CalendarEngine | None = None,
    ) -> "Epoch":
        instant = resolve_engine(engine).from_calendar(
            year, month, day, hour, minute, second, nanos, TimeScale.UTC
        )
        return cls(instant, EpochFlag.default())

    @classmethod
    def from_calendar_utc_midnight(
        cls,
        year: int,
        month: int,
        day: int,
        *,
        engine: CalendarEngine | None = None,
    ) -> "Epoch":
        return cls.from_calendar_utc(year, month, day, 0, 0, 0, 0, engine=engine)

    # ---- accessors / rebinding ----
    @property
    def timescale(self) -> TimeScale:
        return self.instant.timescale

    def with_flag(self, flag: EpochFlag) -> "Epoch":
        return Epoch(self.instant, flag)

    def with_timescale(self, timescale: TimeScale) -> "Epoch":
        # NOTE: relabels the scale tag only, the stored instant is not
        # converted between time scales.
        return Epoch(self.instant.with_timescale(timescale), self.flag)

    # ---- projections ----
    def to_calendar_utc(self, *, engine: CalendarEngine | None = None) -> CalendarFields:
        """(year, month, day, hour, minute, second, nanosecond)."""
        return resolve_engine(engine).to_calendar(self.instant)

    def to_mjd_utc(self, *, engine: CalendarEngine | None = None) -> float:
        return resolve_engine(engine).to_mjd(self.instant)

    # ---- arithmetic ----
    def __add__(self, other):
        if isinstance(other, (np.timedelta64, _dt.timedelta)):
            return Epoch(self.instant + as_duration(other), self.flag)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Epoch):
            return self.instant - other.instant
        if isinstance(other, (np.timedelta64, _dt.timedelta)):
            return Epoch(self.instant - as_duration(other), self.flag)
        return NotImplemented
