"""
Configuration for a building controller.

The host process owns loading and storage; it hands the controller a plain
dict, which is turned into a ControllerConfig here.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict

from smart_building.core.modes import DEFAULT_MODE

logger = logging.getLogger(__name__)

CURRENT_CONFIG_VERSION = 1

DEFAULT_OPERATOR_EMAIL = "smartbuilding@uclan.ac.uk"
DEFAULT_ALARM_FAILURE_SUBJECT = "failed to log alarm"
DEFAULT_HISTORY_SIZE = 64


def _default_expected_names() -> Dict[str, str]:
    return {
        "lights": "Lights",
        "doors": "Doors",
        "fire_alarm": "FireAlarm",
    }


@dataclass
class ControllerConfig:
    """Per-building controller configuration."""

    version: int = CURRENT_CONFIG_VERSION
    building_id: str = ""
    start_mode: str = DEFAULT_MODE.value
    operator_email: str = DEFAULT_OPERATOR_EMAIL       # Receives alarm-logging failures
    alarm_failure_subject: str = DEFAULT_ALARM_FAILURE_SUBJECT
    history_size: int = DEFAULT_HISTORY_SIZE           # Transition ring buffer length
    expected_names: Dict[str, str] = field(default_factory=_default_expected_names)

    def __post_init__(self) -> None:
        """Fill manager names the caller left out."""
        self.expected_names = {**_default_expected_names(), **self.expected_names}

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "version": self.version,
            "building_id": self.building_id,
            "start_mode": self.start_mode,
            "operator_email": self.operator_email,
            "alarm_failure_subject": self.alarm_failure_subject,
            "history_size": self.history_size,
            "expected_names": dict(self.expected_names),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ControllerConfig":
        """Deserialize from dict, filling missing keys with defaults."""
        data = cls.migrate(dict(data))

        return cls(
            version=data.get("version", CURRENT_CONFIG_VERSION),
            building_id=data.get("building_id", ""),
            start_mode=data.get("start_mode", DEFAULT_MODE.value),
            operator_email=data.get("operator_email", DEFAULT_OPERATOR_EMAIL),
            alarm_failure_subject=data.get(
                "alarm_failure_subject", DEFAULT_ALARM_FAILURE_SUBJECT
            ),
            history_size=data.get("history_size", DEFAULT_HISTORY_SIZE),
            expected_names=data.get("expected_names") or {},
        )

    @staticmethod
    def migrate(data: dict) -> dict:
        """Migrate a configuration dict to the current version."""
        version = data.get("version", CURRENT_CONFIG_VERSION)

        if version == CURRENT_CONFIG_VERSION:
            return data

        # Future migrations go here

        logger.info(f"Migrated controller config from v{version} to v{CURRENT_CONFIG_VERSION}")
        data["version"] = CURRENT_CONFIG_VERSION
        return data
