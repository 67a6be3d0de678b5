"""
Core components of the smart-building controller.

This package contains:
- modes: Mode vocabulary and transition tables
- status: Manager status parsing and fault detection
- bus: Event Bus implementation
- config: ControllerConfig
- controller: BuildingController state machine
"""

from smart_building.core.modes import (
    Mode,
    NORMAL_MODES,
    EMERGENCY_MODES,
    FORBIDDEN_TRANSITIONS,
    parse_mode,
)
from smart_building.core.status import ManagerStatus, parse_status, format_engineer_listing
from smart_building.core.bus import Event, EventBus, EventFilter
from smart_building.core.config import ControllerConfig
from smart_building.core.controller import (
    BuildingController,
    TransitionRecord,
    INITIAL_STATE_ERROR,
)

__all__ = [
    "Mode",
    "NORMAL_MODES",
    "EMERGENCY_MODES",
    "FORBIDDEN_TRANSITIONS",
    "parse_mode",
    "ManagerStatus",
    "parse_status",
    "format_engineer_listing",
    "Event",
    "EventBus",
    "EventFilter",
    "ControllerConfig",
    "BuildingController",
    "TransitionRecord",
    "INITIAL_STATE_ERROR",
]
