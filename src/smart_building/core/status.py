"""
Status string parsing and fault detection.

Device managers report their state as a single comma-separated string:

    "<ManagerName>,<device1>,<device2>,...,<deviceN>,"

Each device token is "OK" or "FAULT". The trailing comma is part of the
format, so a string without it is treated as malformed.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

STATUS_OK = "OK"
STATUS_FAULT = "FAULT"
SEPARATOR = ","


@dataclass
class ManagerStatus:
    """
    Parsed status report from a single device manager.

    Attributes:
        expected_name: Name the manager should report as its leading token
        raw: The status string exactly as reported
        name: Leading token actually reported (None if the string was empty)
        devices: Per-device status tokens, in reported order
        fault_reason: Why the status is faulty (None if healthy)
    """

    expected_name: str
    raw: str
    name: Optional[str] = None
    devices: List[str] = field(default_factory=list)
    fault_reason: Optional[str] = None

    @property
    def is_faulty(self) -> bool:
        return self.fault_reason is not None

    @property
    def faulty_devices(self) -> List[int]:
        """Indexes of devices that did not report OK."""
        return [i for i, token in enumerate(self.devices) if token != STATUS_OK]


def parse_status(raw: Optional[str], expected_name: str) -> ManagerStatus:
    """
    Parse a manager status string and decide whether it is faulty.

    A status is faulty if it is empty, does not start with the expected
    manager name, lacks the trailing separator, or contains any device
    token other than "OK".

    Args:
        raw: Status string from the manager
        expected_name: Manager name the string must start with

    Returns:
        ManagerStatus with fault_reason set when faulty
    """
    raw = raw or ""
    status = ManagerStatus(expected_name=expected_name, raw=raw)

    if not raw:
        status.fault_reason = "empty"
        return status

    tokens = raw.split(SEPARATOR)
    status.name = tokens[0]

    if not raw.endswith(SEPARATOR):
        status.devices = tokens[1:]
        status.fault_reason = "missing trailing separator"
        return status

    # Last token is the empty string after the trailing separator
    status.devices = tokens[1:-1]

    if status.name != expected_name:
        status.fault_reason = f"unexpected manager name '{status.name}'"
    elif status.faulty_devices:
        status.fault_reason = f"device fault at {status.faulty_devices}"

    return status


def find_faulty(statuses: Sequence[ManagerStatus]) -> List[str]:
    """Names of faulty managers, in the order given."""
    return [s.expected_name for s in statuses if s.is_faulty]


def format_engineer_listing(names: Sequence[str]) -> str:
    """
    Build the device listing sent with an engineer-required notification.

    A single manager is sent as its bare name. Several are joined with the
    separator and keep the status format's trailing separator.

    Examples:
        ["Lights"] -> "Lights"
        ["Lights", "Doors"] -> "Lights,Doors,"
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return SEPARATOR.join(names) + SEPARATOR


def build_status(name: str, devices: Sequence[str]) -> str:
    """Render a status string in the manager wire format."""
    return SEPARATOR.join([name, *devices]) + SEPARATOR

