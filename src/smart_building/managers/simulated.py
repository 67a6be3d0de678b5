"""
In-memory device managers.

Stand-ins for real hardware, used by the example script and tests. Each
manager tracks per-device state and a set of faulty devices, and renders
its status in the manager wire format.
"""

import logging
from typing import Dict, List, Set

from smart_building.core.status import STATUS_FAULT, STATUS_OK, build_status
from smart_building.managers.base import DoorManager, FireAlarmManager, LightManager

logger = logging.getLogger(__name__)


class _SimulatedManager:
    """Shared fault and engineer bookkeeping for simulated managers."""

    def __init__(self, name: str, device_count: int) -> None:
        if device_count < 0:
            raise ValueError(f"device_count must be non-negative, got {device_count}")
        self.name = name
        self.device_count = device_count
        self.engineer_required = False
        self._faulty: Set[int] = set()

    def set_fault(self, device_id: int, faulty: bool = True) -> None:
        """Mark a device as faulty (or healthy again)."""
        self._check_device(device_id)
        if faulty:
            self._faulty.add(device_id)
        else:
            self._faulty.discard(device_id)

    def get_status(self) -> str:
        tokens = [
            STATUS_FAULT if i in self._faulty else STATUS_OK
            for i in range(self.device_count)
        ]
        return build_status(self.name, tokens)

    def set_engineer_required(self, needs_engineer: bool) -> bool:
        self.engineer_required = needs_engineer
        logger.info(f"{self.name}: engineer required = {needs_engineer}")
        return True

    def _check_device(self, device_id: int) -> None:
        if not 0 <= device_id < self.device_count:
            raise ValueError(f"{self.name} has no device {device_id}")


class SimulatedLightManager(_SimulatedManager, LightManager):
    """Lights that switch instantly."""

    def __init__(self, light_count: int = 2, name: str = "Lights") -> None:
        super().__init__(name, light_count)
        self.lights: Dict[int, bool] = {i: False for i in range(light_count)}

    def set_light(self, is_on: bool, light_id: int) -> None:
        self._check_device(light_id)
        self.lights[light_id] = is_on

    def set_all_lights(self, is_on: bool) -> None:
        for light_id in self.lights:
            self.lights[light_id] = is_on
        logger.debug(f"{self.name}: all lights {'on' if is_on else 'off'}")


class SimulatedDoorManager(_SimulatedManager, DoorManager):
    """
    Doors that can jam.

    A jammed door refuses both open and lock commands. Door state is one of
    "open", "closed" or "locked".
    """

    def __init__(self, door_count: int = 2, name: str = "Doors") -> None:
        super().__init__(name, door_count)
        self.doors: Dict[int, str] = {i: "closed" for i in range(door_count)}
        self._jammed: Set[int] = set()

    def set_jammed(self, door_id: int, jammed: bool = True) -> None:
        self._check_device(door_id)
        if jammed:
            self._jammed.add(door_id)
        else:
            self._jammed.discard(door_id)

    def open_door(self, door_id: int) -> bool:
        return self._move(door_id, "open")

    def lock_door(self, door_id: int) -> bool:
        return self._move(door_id, "locked")

    def open_all_doors(self) -> bool:
        results = [self.open_door(door_id) for door_id in self.doors]
        return all(results)

    def lock_all_doors(self) -> bool:
        results = [self.lock_door(door_id) for door_id in self.doors]
        return all(results)

    def _move(self, door_id: int, state: str) -> bool:
        self._check_device(door_id)
        if door_id in self._jammed:
            logger.warning(f"{self.name}: door {door_id} jammed, cannot set {state}")
            return False
        self.doors[door_id] = state
        return True

    @property
    def open_doors(self) -> List[int]:
        return [i for i, state in self.doors.items() if state == "open"]


class SimulatedFireAlarmManager(_SimulatedManager, FireAlarmManager):
    """Fire alarm with a fixed number of detectors."""

    def __init__(self, detector_count: int = 1, name: str = "FireAlarm") -> None:
        super().__init__(name, detector_count)
        self.alarm_active = False

    def set_alarm(self, is_active: bool) -> None:
        self.alarm_active = is_active
        logger.info(f"{self.name}: alarm {'sounding' if is_active else 'silenced'}")
