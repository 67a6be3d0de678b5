"""
BuildingController: operating-mode state machine for a single building.

Modes:
- Normal: closed, open, out of hours
- Emergency: fire alarm, fire drill

Transition rules:
- Requesting the current mode always succeeds and does nothing.
- From a Normal mode, any mode may be entered except closed <-> open.
- From an Emergency mode, the only way out is back to the Normal mode that
  was active when the emergency began.
- Device side effects of the target mode run before the change is
  committed. If they fail, the mode is left unchanged.

Every set_mode attempt is recorded in a bounded transition history.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import TYPE_CHECKING, Deque, List, Optional, Tuple, Union
import logging

from smart_building.core.bus import (
    Event,
    FAULT_DETECTED,
    MODE_CHANGED,
    TRANSITION_REJECTED,
)
from smart_building.core.config import ControllerConfig
from smart_building.core.modes import (
    DEFAULT_MODE,
    FORBIDDEN_TRANSITIONS,
    Mode,
    is_emergency,
    is_normal,
    parse_mode,
)
from smart_building.core.status import (
    ManagerStatus,
    find_faulty,
    format_engineer_listing,
    parse_status,
)

if TYPE_CHECKING:
    from smart_building.core.bus import EventBus
    from smart_building.managers.base import (
        DeviceManager,
        DoorManager,
        FireAlarmManager,
        LightManager,
    )
    from smart_building.services.base import EmailService, WebService

logger = logging.getLogger(__name__)

INITIAL_STATE_ERROR = (
    "Argument Exception: BuildingController can only be initialised "
    "to the following states 'open', 'closed', 'out of hours'"
)

REASON_UNKNOWN_MODE = "unknown_mode"
REASON_ILLEGAL = "illegal_transition"
REASON_SIDE_EFFECT = "side_effect_failed"


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class TransitionRecord:
    """
    A single set_mode attempt.

    Attributes:
        frm: Mode before the attempt
        requested: Mode name as requested by the caller
        to: Mode after the attempt (equal to frm when rejected)
        accepted: True if set_mode returned True
        reason: Rejection reason (None when accepted)
        timestamp: When the attempt was made
    """

    frm: Mode
    requested: Optional[str]
    to: Mode
    accepted: bool
    reason: Optional[str] = None
    timestamp: datetime = field(default_factory=_utc_now)


class BuildingController:
    """
    Controls the operating mode of one building.

    Collaborators are optional and not owned by the controller. Any work
    that needs a missing collaborator is skipped silently.
    """

    def __init__(
        self,
        building_id: Optional[str],
        start_mode: Union[Mode, str, None] = None,
        light_manager: Optional["LightManager"] = None,
        fire_alarm_manager: Optional["FireAlarmManager"] = None,
        door_manager: Optional["DoorManager"] = None,
        web_service: Optional["WebService"] = None,
        email_service: Optional["EmailService"] = None,
        *,
        event_bus: Optional["EventBus"] = None,
        config: Optional[ControllerConfig] = None,
    ) -> None:
        """
        Initialize a building controller.

        Args:
            building_id: Building identifier (stored lower-cased)
            start_mode: Initial Normal mode (None = out of hours)
            light_manager: Lighting manager
            fire_alarm_manager: Fire alarm manager
            door_manager: Door manager
            web_service: Web logging service
            email_service: Email service for operator alerts
            event_bus: Optional bus for mode/fault announcements
            config: Controller configuration (None = defaults)

        Raises:
            ValueError: If start_mode is not a Normal mode
        """
        mode = DEFAULT_MODE if start_mode is None else parse_mode(start_mode)
        if mode is None or not is_normal(mode):
            raise ValueError(INITIAL_STATE_ERROR)

        self._config = config or ControllerConfig()
        self._building_id = ""
        self.set_id(building_id)

        self._mode: Mode = mode
        self._previous_mode: Mode = DEFAULT_MODE

        self._light_manager = light_manager
        self._fire_alarm_manager = fire_alarm_manager
        self._door_manager = door_manager
        self._web_service = web_service
        self._email_service = email_service
        self._bus = event_bus

        self._history: Deque[TransitionRecord] = deque(
            maxlen=max(1, self._config.history_size)
        )

        logger.info(f"BuildingController '{self._building_id}' created in mode '{mode.value}'")

    @classmethod
    def from_config(
        cls,
        config: ControllerConfig,
        **collaborators,
    ) -> "BuildingController":
        """
        Create a controller from configuration.

        Args:
            config: Controller configuration
            **collaborators: Manager, service and event_bus keyword arguments

        Raises:
            ValueError: If config.start_mode is not a Normal mode
        """
        return cls(config.building_id, config.start_mode, config=config, **collaborators)

    # =========================================================================
    # Identity & mode accessors
    # =========================================================================

    def get_id(self) -> str:
        return self._building_id

    def set_id(self, building_id: Optional[str]) -> None:
        self._building_id = building_id.lower() if building_id else ""

    def get_mode(self) -> Mode:
        return self._mode

    @property
    def building_id(self) -> str:
        return self._building_id

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def previous_mode(self) -> Mode:
        """Normal mode to resume when the current emergency ends."""
        return self._previous_mode

    # =========================================================================
    # Transitions
    # =========================================================================

    def set_mode(self, target: Union[Mode, str, None]) -> bool:
        """
        Request a mode change.

        Args:
            target: Mode or mode name (case-insensitive)

        Returns:
            True if the building is in the requested mode afterwards,
            False if the request was rejected (mode unchanged)
        """
        requested = target.value if isinstance(target, Mode) else target
        mode = parse_mode(target)

        if mode is None:
            return self._reject(requested, REASON_UNKNOWN_MODE)

        if mode is self._mode:
            logger.debug(f"{self._building_id}: already in '{mode.value}'")
            self._record(requested, mode, accepted=True)
            return True

        if not self.can_transition(mode):
            return self._reject(requested, REASON_ILLEGAL)

        if not self._run_side_effects(mode):
            return self._reject(requested, REASON_SIDE_EFFECT)

        self._commit(requested, mode)
        return True

    def can_transition(self, target: Mode) -> bool:
        """
        Check whether target is reachable from the current mode.

        Does not consider device side effects.
        """
        if target is self._mode:
            return True
        if is_emergency(self._mode):
            return target is self._previous_mode
        return (self._mode, target) not in FORBIDDEN_TRANSITIONS

    def _commit(self, requested: Optional[str], target: Mode) -> None:
        before = self._mode
        if is_normal(before):
            self._previous_mode = before
        self._mode = target

        logger.info(f"{self._building_id}: mode '{before.value}' -> '{target.value}'")
        self._record(requested, target, accepted=True, frm=before)
        self._publish(MODE_CHANGED, {"from": before.value, "to": target.value})

    def _reject(self, requested: Optional[str], reason: str) -> bool:
        logger.warning(
            f"{self._building_id}: rejected mode '{requested}' "
            f"from '{self._mode.value}' ({reason})"
        )
        self._record(requested, self._mode, accepted=False, reason=reason)
        self._publish(
            TRANSITION_REJECTED,
            {"requested": requested, "current": self._mode.value, "reason": reason},
        )
        return False

    # =========================================================================
    # Side effects
    # =========================================================================

    def _run_side_effects(self, target: Mode) -> bool:
        """
        Drive devices for the target mode.

        Returns:
            False if a side effect failed in a way that blocks the transition
        """
        if target is Mode.OPEN:
            return self._enter_open()
        if target is Mode.CLOSED:
            self._enter_closed()
        elif target is Mode.FIRE_ALARM:
            self._enter_fire_alarm()
        return True

    def _enter_open(self) -> bool:
        if self._door_manager is None:
            return True
        if not self._door_manager.open_all_doors():
            logger.warning(f"{self._building_id}: doors failed to open")
            return False
        return True

    def _enter_closed(self) -> None:
        if self._door_manager is not None:
            if not self._door_manager.lock_all_doors():
                logger.warning(f"{self._building_id}: not all doors locked")
        if self._light_manager is not None:
            self._light_manager.set_all_lights(False)

    def _enter_fire_alarm(self) -> None:
        if self._fire_alarm_manager is not None:
            self._fire_alarm_manager.set_alarm(True)

        # Egress first: a door failure does not block the alarm
        if self._door_manager is not None:
            if not self._door_manager.open_all_doors():
                logger.warning(f"{self._building_id}: doors failed to open during fire alarm")

        if self._light_manager is not None:
            self._light_manager.set_all_lights(True)

        if self._web_service is None:
            return

        try:
            self._web_service.log_fire_alarm(Mode.FIRE_ALARM.value)
        except Exception as e:
            logger.error(f"{self._building_id}: failed to log fire alarm: {e}", exc_info=True)
            self._email_operator(str(e))

    def _email_operator(self, message: str) -> None:
        if self._email_service is None:
            return
        try:
            self._email_service.send_email(
                self._config.operator_email,
                self._config.alarm_failure_subject,
                message,
            )
        except Exception as e:
            logger.error(f"{self._building_id}: failed to email operator: {e}", exc_info=True)

    # =========================================================================
    # Status
    # =========================================================================

    def get_status_report(self) -> str:
        """
        Collect manager statuses and report faulty managers.

        Requires all three device managers. Faulty managers are flagged as
        needing an engineer and reported to the web service.

        Returns:
            Light, door and fire alarm statuses concatenated, or "" if any
            device manager is missing
        """
        if (
            self._light_manager is None
            or self._door_manager is None
            or self._fire_alarm_manager is None
        ):
            return ""

        names = self._config.expected_names
        lights = self._read_status(self._light_manager, names["lights"])
        doors = self._read_status(self._door_manager, names["doors"])
        fire_alarm = self._read_status(self._fire_alarm_manager, names["fire_alarm"])

        # Fault check order differs from report order
        checked: List[Tuple[ManagerStatus, "DeviceManager"]] = [
            (lights, self._light_manager),
            (fire_alarm, self._fire_alarm_manager),
            (doors, self._door_manager),
        ]
        faulty = find_faulty([status for status, _ in checked])
        if faulty:
            self._report_faults(checked, faulty)

        return lights.raw + doors.raw + fire_alarm.raw

    def _read_status(self, manager: "DeviceManager", expected_name: str) -> ManagerStatus:
        return parse_status(manager.get_status(), expected_name)

    def _report_faults(
        self,
        checked: List[Tuple[ManagerStatus, "DeviceManager"]],
        faulty: List[str],
    ) -> None:
        listing = format_engineer_listing(faulty)
        for status, manager in checked:
            if status.is_faulty:
                logger.warning(
                    f"{self._building_id}: {status.expected_name} faulty ({status.fault_reason})"
                )
                manager.set_engineer_required(True)

        if self._web_service is not None:
            self._web_service.log_engineer_required(listing)

        self._publish(FAULT_DETECTED, {"managers": list(faulty), "listing": listing})

    # =========================================================================
    # History
    # =========================================================================

    def history(self) -> List[TransitionRecord]:
        """Return a copy of the transition history (most-recent last)."""
        return list(self._history)

    def last_transition(self) -> Optional[TransitionRecord]:
        """Return the most recent transition record, or None if empty."""
        try:
            return self._history[-1]
        except IndexError:
            return None

    def clear_history(self) -> None:
        self._history.clear()

    def _record(
        self,
        requested: Optional[str],
        to: Mode,
        accepted: bool,
        reason: Optional[str] = None,
        frm: Optional[Mode] = None,
    ) -> None:
        self._history.append(
            TransitionRecord(
                frm=frm if frm is not None else self._mode,
                requested=requested,
                to=to,
                accepted=accepted,
                reason=reason,
            )
        )

    def _publish(self, event_type: str, payload: dict) -> None:
        if self._bus is None:
            return
        self._bus.publish(
            Event(
                type=event_type,
                source="controller",
                building_id=self._building_id,
                payload=payload,
            )
        )

    def __repr__(self) -> str:
        return (
            f"BuildingController(id={self._building_id!r}, mode={self._mode.value!r}, "
            f"previous_mode={self._previous_mode.value!r})"
        )
