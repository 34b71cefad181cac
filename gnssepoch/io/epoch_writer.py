# gnssepoch/io/epoch_writer.py
"""Fixed-width renderings of an Epoch, one per record generation.

Field widths are part of each format and must not be changed.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

from gnssepoch.core import CalendarEngine, Epoch


def format_observation(epoch: Epoch, *, engine: CalendarEngine | None = None) -> str:
    """Modern observation layout: ``"2022 01 09 00 00  0.1234000  0"``."""
    y, m, d, hh, mm, ss, ns = epoch.to_calendar_utc(engine=engine)
    return f"{y:04d} {m:02d} {d:02d} {hh:02d} {mm:02d} {ss:>2d}.{ns // 100:07d}  {epoch.flag}"


def format_legacy_observation(epoch: Epoch, *, engine: CalendarEngine | None = None) -> str:
    """Two-digit-year observation layout: ``"21  1  1  0  7 30.0000000  0"``."""
    y, m, d, hh, mm, ss, ns = epoch.to_calendar_utc(engine=engine)
    # years outside 2000..2099 are rendered as-is after the offset
    return (
        f"{y - 2000:02d} {m:>2d} {d:>2d} {hh:>2d} {mm:>2d} {ss:>2d}.{ns // 100:07d}  {epoch.flag}"
    )


def format_legacy_navigation(epoch: Epoch, *, engine: CalendarEngine | None = None) -> str:
    """Old navigation layout, 0.1 s precision, no flag: ``"2020 12 31 23 45  0.1"``."""
    y, m, d, hh, mm, ss, ns = epoch.to_calendar_utc(engine=engine)
    return f"{y:04d} {m:>2d} {d:>2d} {hh:>2d} {mm:>2d} {ss:>2d}.{ns // 100_000_000:1d}"


def format_navigation(epoch: Epoch, *, engine: CalendarEngine | None = None) -> str:
    """Modern navigation layout, whole seconds, no flag: ``"2021  1  1  9 45  0"``."""
    y, m, d, hh, mm, ss, _ = epoch.to_calendar_utc(engine=engine)
    return f"{y:04d} {m:>2d} {d:>2d} {hh:>2d} {mm:>2d} {ss:>2d}"


class EpochLayout(Enum):
    OBSERVATION = "observation"
    LEGACY_OBSERVATION = "legacy_observation"
    LEGACY_NAVIGATION = "legacy_navigation"
    NAVIGATION = "navigation"


_FORMATTERS: dict[EpochLayout, Callable[..., str]] = {
    EpochLayout.OBSERVATION: format_observation,
    EpochLayout.LEGACY_OBSERVATION: format_legacy_observation,
    EpochLayout.LEGACY_NAVIGATION: format_legacy_navigation,
    EpochLayout.NAVIGATION: format_navigation,
}


def format_epoch(
    epoch: Epoch,
    layout: EpochLayout = EpochLayout.OBSERVATION,
    *,
    engine: CalendarEngine | None = None,
) -> str:
    """Render ``epoch`` in the given layout (observation by default)."""
    try:
        formatter = _FORMATTERS[EpochLayout(layout)]
    except ValueError as exc:
        raise ValueError(f"unknown epoch layout: {layout!r}") from exc
    return formatter(epoch, engine=engine)
