"""
Base classes for device managers.

A manager fronts a group of devices of one kind. The controller only needs
an opaque status string and a handful of commands from each.
"""

from abc import ABC, abstractmethod


class DeviceManager(ABC):
    """
    Base class for device managers.

    A manager:
    - Reports the health of its devices as a status string
    - Accepts commands for all of its devices at once
    - Can be flagged as needing an engineer
    """

    @abstractmethod
    def get_status(self) -> str:
        """
        Get the manager status string.

        Returns:
            "<ManagerName>,<device1>,...,<deviceN>," where each device
            token is "OK" or "FAULT"
        """
        pass

    @abstractmethod
    def set_engineer_required(self, needs_engineer: bool) -> bool:
        """
        Flag or clear the engineer-required state.

        Returns:
            True if the flag was recorded
        """
        pass


class LightManager(DeviceManager):
    """Manager for the building lights."""

    @abstractmethod
    def set_light(self, is_on: bool, light_id: int) -> None:
        """Switch a single light on or off."""
        pass

    @abstractmethod
    def set_all_lights(self, is_on: bool) -> None:
        """Switch every light on or off."""
        pass


class DoorManager(DeviceManager):
    """Manager for the building doors."""

    @abstractmethod
    def open_door(self, door_id: int) -> bool:
        pass

    @abstractmethod
    def lock_door(self, door_id: int) -> bool:
        pass

    @abstractmethod
    def open_all_doors(self) -> bool:
        """
        Open every door.

        Returns:
            True only if every door opened
        """
        pass

    @abstractmethod
    def lock_all_doors(self) -> bool:
        """
        Lock every door.

        Returns:
            True only if every door locked
        """
        pass


class FireAlarmManager(DeviceManager):
    """Manager for the fire alarm system."""

    @abstractmethod
    def set_alarm(self, is_active: bool) -> None:
        """Sound or silence the fire alarm."""
        pass
