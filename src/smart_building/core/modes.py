"""
Building operating modes.

The mode vocabulary is fixed. Strings are only accepted at the boundary
(construction and transition requests) and are parsed into Mode here.
"""

from enum import Enum
from typing import FrozenSet, Optional, Union


class Mode(str, Enum):
    """Operating mode of a building. Members compare equal to their names."""

    CLOSED = "closed"
    OPEN = "open"
    OUT_OF_HOURS = "out of hours"
    FIRE_ALARM = "fire alarm"
    FIRE_DRILL = "fire drill"


NORMAL_MODES: FrozenSet[Mode] = frozenset({Mode.CLOSED, Mode.OPEN, Mode.OUT_OF_HOURS})
EMERGENCY_MODES: FrozenSet[Mode] = frozenset({Mode.FIRE_ALARM, Mode.FIRE_DRILL})

# Normal -> Normal pairs that may not be taken directly
FORBIDDEN_TRANSITIONS: FrozenSet[tuple] = frozenset(
    {
        (Mode.CLOSED, Mode.OPEN),
        (Mode.OPEN, Mode.CLOSED),
    }
)

DEFAULT_MODE = Mode.OUT_OF_HOURS


def parse_mode(value: Union[Mode, str, None]) -> Optional[Mode]:
    """
    Parse a mode name.

    Matching is case-insensitive but otherwise exact ("Fire Alarm" is
    accepted, "fire  alarm" and " open" are not).

    Args:
        value: A Mode, a mode name, or None

    Returns:
        The matching Mode, or None if the value names no mode
    """
    if isinstance(value, Mode):
        return value
    if not value or not isinstance(value, str):
        return None

    try:
        return Mode(value.lower())
    except ValueError:
        return None


def is_normal(mode: Mode) -> bool:
    return mode in NORMAL_MODES


def is_emergency(mode: Mode) -> bool:
    return mode in EMERGENCY_MODES
