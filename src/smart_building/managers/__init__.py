"""
Device managers for smart-building.

Managers front the building hardware. The controller talks to them only
through the interfaces in base.
"""

from smart_building.managers.base import (
    DeviceManager,
    LightManager,
    DoorManager,
    FireAlarmManager,
)
from smart_building.managers.simulated import (
    SimulatedLightManager,
    SimulatedDoorManager,
    SimulatedFireAlarmManager,
)

__all__ = [
    "DeviceManager",
    "LightManager",
    "DoorManager",
    "FireAlarmManager",
    "SimulatedLightManager",
    "SimulatedDoorManager",
    "SimulatedFireAlarmManager",
]
