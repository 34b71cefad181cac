# test/test_flag.py
import pytest

from gnssepoch.core import EpochFlag, InvalidEpochFlag


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0", EpochFlag.Ok),
        ("1", EpochFlag.PowerFailure),
        ("2", EpochFlag.AntennaBeingMoved),
        ("3", EpochFlag.NewSiteOccupation),
        ("4", EpochFlag.HeaderInformationFollows),
        ("5", EpochFlag.ExternalEvent),
        ("6", EpochFlag.CycleSlip),
    ],
)
def test_parse_known_tokens(token, expected):
    assert EpochFlag.parse(token) is expected
    assert str(expected) == token


def test_parse_strips_whitespace():
    assert EpochFlag.parse("  3 ") is EpochFlag.NewSiteOccupation


@pytest.mark.parametrize("token", ["", "7", "01", "+1", "-1", "a", "1 2"])
def test_parse_rejects_unknown_tokens(token):
    with pytest.raises(InvalidEpochFlag):
        EpochFlag.parse(token)


def test_default_is_ok():
    assert EpochFlag.default() is EpochFlag.Ok
    assert EpochFlag.Ok.is_ok()
    assert not EpochFlag.CycleSlip.is_ok()


def test_event_flags():
    events = {f for f in EpochFlag if f.is_event()}
    assert events == {
        EpochFlag.AntennaBeingMoved,
        EpochFlag.NewSiteOccupation,
        EpochFlag.HeaderInformationFollows,
        EpochFlag.ExternalEvent,
    }


def test_format_spec_pads_digit():
    assert f"{EpochFlag.PowerFailure:>3}" == "  1"
    assert f"{EpochFlag.Ok}" == "0"
