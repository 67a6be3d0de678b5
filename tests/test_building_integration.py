"""
End-to-end tests with simulated managers and recording services.

A full day of mode changes, an alarm with a broken web log, and a
status sweep over faulty hardware.
"""

import pytest

from smart_building import BuildingController, EventBus, Mode
from smart_building.managers import (
    SimulatedDoorManager,
    SimulatedFireAlarmManager,
    SimulatedLightManager,
)
from smart_building.services import RecordingEmailService, RecordingWebService


@pytest.fixture
def building():
    """Controller wired to simulated hardware."""
    lights = SimulatedLightManager(light_count=3)
    alarm = SimulatedFireAlarmManager(detector_count=2)
    doors = SimulatedDoorManager(door_count=2)
    web = RecordingWebService()
    email = RecordingEmailService()
    controller = BuildingController(
        "UCLan", "closed", lights, alarm, doors, web, email, event_bus=EventBus()
    )
    return controller, lights, alarm, doors, web, email


def test_daily_cycle(building):
    controller, lights, alarm, doors, web, email = building

    assert controller.set_mode("open") is False
    assert controller.set_mode("out of hours")
    assert controller.set_mode("open")
    assert doors.open_doors == [0, 1]

    assert controller.set_mode("out of hours")
    assert controller.set_mode("closed")
    assert doors.doors == {0: "locked", 1: "locked"}
    assert not any(lights.lights.values())


def test_fire_alarm_and_resume(building):
    controller, lights, alarm, doors, web, email = building
    controller.set_mode("out of hours")
    controller.set_mode("open")

    assert controller.set_mode("fire alarm")
    assert alarm.alarm_active
    assert all(lights.lights.values())
    assert web.fire_alarms == ["fire alarm"]

    assert controller.set_mode("closed") is False
    assert controller.set_mode("open")
    assert controller.get_mode() is Mode.OPEN


def test_fire_alarm_with_jammed_door_and_broken_log(building):
    controller, lights, alarm, doors, web, email = building
    doors.set_jammed(1)
    web.fail_with = ConnectionError("log server unreachable")

    assert controller.set_mode("fire alarm")
    assert doors.open_doors == [0]
    assert len(email.sent) == 1
    assert email.sent[0].email_address == "smartbuilding@uclan.ac.uk"
    assert email.sent[0].message == "log server unreachable"


def test_status_sweep(building):
    controller, lights, alarm, doors, web, email = building
    assert controller.get_status_report() == "Lights,OK,OK,OK,Doors,OK,OK,FireAlarm,OK,OK,"
    assert web.engineer_requests == []

    lights.set_fault(2)
    doors.set_fault(0)
    report = controller.get_status_report()

    assert report == "Lights,OK,OK,FAULT,Doors,FAULT,OK,FireAlarm,OK,OK,"
    assert web.engineer_requests == ["Lights,Doors,"]
    assert lights.engineer_required and doors.engineer_required
    assert not alarm.engineer_required
