"""
smart-building: operating-mode control for a single smart building.

This library provides:
- A mode state machine (closed, open, out of hours, fire alarm, fire drill)
- Coordination of lighting, door and fire alarm managers on mode changes
- Status sweeps that detect faulty managers and call for an engineer
- A synchronous Event Bus for mode and fault announcements
"""

from smart_building.core.modes import Mode, parse_mode
from smart_building.core.bus import Event, EventBus, EventFilter
from smart_building.core.config import ControllerConfig
from smart_building.core.controller import BuildingController, TransitionRecord

__version__ = "0.1.0"

__all__ = [
    "Mode",
    "parse_mode",
    "Event",
    "EventBus",
    "EventFilter",
    "ControllerConfig",
    "BuildingController",
    "TransitionRecord",
]
