# test/test_instant.py
import datetime as dt

import numpy as np
import pytest

from gnssepoch.core.instant import Instant, TimeScale, DEFAULT_TIMESCALE, NS_MAX, NS_MIN, as_duration
from gnssepoch.core.exceptions import DurationOverflow, InstantOutOfRange, InvalidEpoch


def test_default_instant_is_zero_utc():
    i = Instant()
    assert i.ns == 0
    assert i.timescale is TimeScale.UTC
    assert DEFAULT_TIMESCALE is TimeScale.UTC


def test_instant_accepts_numpy_integers():
    i = Instant(np.int64(42))
    assert i.ns == 42
    assert type(i.ns) is int


def test_instant_rejects_bad_types():
    with pytest.raises(InvalidEpoch):
        Instant(1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidEpoch):
        Instant(True)  # type: ignore[arg-type]
    with pytest.raises(InvalidEpoch):
        Instant(np.timedelta64(1, "ns"))  # type: ignore[arg-type]
    with pytest.raises(InvalidEpoch):
        Instant(0, "UTC")  # type: ignore[arg-type]


def test_nanosecond_component_in_range():
    assert Instant(1_500_000_000).nanosecond == 500_000_000
    assert Instant(-1).nanosecond == 999_999_999


def test_as_duration_converts_to_ns():
    d = as_duration(np.timedelta64(2, "s"))
    assert d.dtype == np.dtype("timedelta64[ns]")
    assert int(d.astype(np.int64)) == 2_000_000_000

    d2 = as_duration(dt.timedelta(milliseconds=3))
    assert int(d2.astype(np.int64)) == 3_000_000


def test_as_duration_rejects_nat_and_non_durations():
    with pytest.raises(ValueError):
        as_duration(np.timedelta64("NaT"))
    with pytest.raises(TypeError):
        as_duration(5)  # type: ignore[arg-type]


def test_instant_arithmetic():
    i = Instant(1_000, TimeScale.GPST)
    d = np.timedelta64(250, "ns")

    assert (i + d) == Instant(1_250, TimeScale.GPST)
    assert (i - d) == Instant(750, TimeScale.GPST)
    assert (i + d) - i == np.timedelta64(250, "ns")
    assert (i + d) - d == i


def test_instant_with_timescale_relabels_only():
    i = Instant(123, TimeScale.UTC)
    j = i.with_timescale(TimeScale.TAI)
    assert j.ns == 123
    assert j.timescale is TimeScale.TAI
    assert i != j


def test_instant_ordering():
    assert Instant(1) < Instant(2)
    assert Instant(1, TimeScale.TAI) < Instant(1, TimeScale.UTC)
    assert sorted([Instant(3), Instant(1), Instant(2)]) == [Instant(1), Instant(2), Instant(3)]


def test_timescale_str():
    assert str(TimeScale.GPST) == "GPST"


def test_as_duration_is_exact_near_int64_limit():
    d = as_duration(np.timedelta64(106_751, "D"))
    assert int(d.astype(np.int64)) == 106_751 * 86_400 * 10**9

    assert int(as_duration(np.timedelta64(2_500, "ps")).astype(np.int64)) == 2


@pytest.mark.parametrize(
    "value",
    [
        np.timedelta64(2_000_000, "D"),
        np.timedelta64(-2_000_000, "D"),
        dt.timedelta(days=999_999),
        dt.timedelta(days=-999_999),
    ],
)
def test_as_duration_rejects_values_beyond_int64_ns(value):
    with pytest.raises(DurationOverflow):
        as_duration(value)


def test_instant_stays_inside_datetime64_span():
    assert Instant(NS_MAX).ns == NS_MAX
    assert Instant(NS_MIN).ns == NS_MIN
    with pytest.raises(InstantOutOfRange):
        Instant(NS_MIN - 1)
    with pytest.raises(InstantOutOfRange):
        Instant(NS_MAX) + np.timedelta64(1, "ns")
    with pytest.raises(InstantOutOfRange):
        Instant(NS_MIN) - dt.timedelta(microseconds=1)


def test_instant_difference_beyond_int64_ns():
    with pytest.raises(DurationOverflow):
        Instant(NS_MAX) - Instant(NS_MIN)
