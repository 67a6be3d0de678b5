#!/usr/bin/env python3
"""
Quick example demonstrating smart-building basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from smart_building import BuildingController, EventBus, EventFilter
from smart_building.managers import (
    SimulatedDoorManager,
    SimulatedFireAlarmManager,
    SimulatedLightManager,
)
from smart_building.services import RecordingEmailService, RecordingWebService

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

print("=" * 60)
print("smart-building Example")
print("=" * 60)

# 1. Hardware and services
print("\n1. Creating managers and services...")
lights = SimulatedLightManager(light_count=4)
alarm = SimulatedFireAlarmManager(detector_count=2)
doors = SimulatedDoorManager(door_count=3)
web = RecordingWebService()
email = RecordingEmailService()
bus = EventBus()
bus.subscribe(
    lambda e: print(f"   → {e.payload['from']} -> {e.payload['to']}"),
    EventFilter(event_type="building.mode_changed"),
)
print("   ✓ Simulated hardware ready")

# 2. Controller
print("\n2. Creating controller...")
controller = BuildingController("UCLan", "closed", lights, alarm, doors, web, email, event_bus=bus)
print(f"   ✓ {controller}")

# 3. A normal day
print("\n3. Opening the building...")
print(f"   closed -> open directly: {controller.set_mode('open')}")
controller.set_mode("out of hours")
controller.set_mode("open")
print(f"   Open doors: {doors.open_doors}")

# 4. Fire alarm with a broken web log
print("\n4. Fire alarm...")
web.fail_with = ConnectionError("log server unreachable")
controller.set_mode("fire alarm")
print(f"   Alarm sounding: {alarm.alarm_active}")
print(f"   Operator emails: {len(email.sent)}")
print(f"   Leave to closed: {controller.set_mode('closed')}")
print(f"   Resume open: {controller.set_mode('open')}")

# 5. Status sweep
print("\n5. Status sweep...")
lights.set_fault(3)
print(f"   Report: {controller.get_status_report()}")
print(f"   Engineer requests: {web.engineer_requests}")

print("\n" + "=" * 60)
print("Done")
print("=" * 60)
