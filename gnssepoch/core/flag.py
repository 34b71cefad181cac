# gnssepoch/core/flag.py
from __future__ import annotations

from enum import IntEnum

from .exceptions import InvalidEpochFlag


class EpochFlag(IntEnum):
    """
    Sampling condition attached to an epoch.

    Records that carry no flag column are sampled normally (``Ok``).
    Flags 2..5 announce special event records rather than measurements.
    """

    Ok = 0
    PowerFailure = 1
    AntennaBeingMoved = 2
    NewSiteOccupation = 3
    HeaderInformationFollows = 4
    ExternalEvent = 5
    CycleSlip = 6

    @classmethod
    def default(cls) -> "EpochFlag":
        return cls.Ok

    @classmethod
    def parse(cls, token: str) -> "EpochFlag":
        text = token.strip()
        # single ASCII digit only: "00", "+1" or " 1 2" are not flags
        if len(text) != 1 or text not in "0123456":
            raise InvalidEpochFlag(f"unknown epoch flag {token!r}")
        return cls(int(text))

    def is_ok(self) -> bool:
        return self is EpochFlag.Ok

    def is_event(self) -> bool:
        return EpochFlag.AntennaBeingMoved <= self <= EpochFlag.ExternalEvent

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)
