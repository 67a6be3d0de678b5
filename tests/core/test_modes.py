"""Tests for the mode vocabulary and parsing."""

import pytest

from smart_building.core.modes import (
    EMERGENCY_MODES,
    FORBIDDEN_TRANSITIONS,
    Mode,
    NORMAL_MODES,
    is_emergency,
    is_normal,
    parse_mode,
)


def test_normal_and_emergency_partition_modes():
    """Every mode is Normal or Emergency, never both."""
    assert NORMAL_MODES.isdisjoint(EMERGENCY_MODES)
    assert NORMAL_MODES | EMERGENCY_MODES == set(Mode)


def test_forbidden_pairs_are_normal_modes():
    for frm, to in FORBIDDEN_TRANSITIONS:
        assert is_normal(frm) and is_normal(to)
    assert (Mode.CLOSED, Mode.OPEN) in FORBIDDEN_TRANSITIONS
    assert (Mode.OPEN, Mode.CLOSED) in FORBIDDEN_TRANSITIONS


@pytest.mark.parametrize(
    "value,expected",
    [
        ("closed", Mode.CLOSED),
        ("OPEN", Mode.OPEN),
        ("Out Of Hours", Mode.OUT_OF_HOURS),
        ("fire ALARM", Mode.FIRE_ALARM),
        ("Fire Drill", Mode.FIRE_DRILL),
        (Mode.FIRE_DRILL, Mode.FIRE_DRILL),
    ],
)
def test_parse_valid(value, expected):
    assert parse_mode(value) is expected


@pytest.mark.parametrize("value", [None, "", " open", "out-of-hours", "firealarm", 3])
def test_parse_invalid(value):
    assert parse_mode(value) is None


def test_classification():
    assert is_emergency(Mode.FIRE_ALARM)
    assert not is_emergency(Mode.OUT_OF_HOURS)
    assert is_normal(Mode.CLOSED)


def test_modes_compare_equal_to_names():
    assert Mode.OPEN == "open"
    assert Mode.OUT_OF_HOURS == "out of hours"
    assert Mode.FIRE_DRILL != "fire alarm"
