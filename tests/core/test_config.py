"""Tests for ControllerConfig."""

from smart_building import ControllerConfig
from smart_building.core.config import CURRENT_CONFIG_VERSION


def test_defaults():
    config = ControllerConfig()
    assert config.version == CURRENT_CONFIG_VERSION
    assert config.start_mode == "out of hours"
    assert config.operator_email == "smartbuilding@uclan.ac.uk"
    assert config.alarm_failure_subject == "failed to log alarm"
    assert config.history_size == 64
    assert config.expected_names == {
        "lights": "Lights",
        "doors": "Doors",
        "fire_alarm": "FireAlarm",
    }


def test_round_trip_through_dict():
    config = ControllerConfig(building_id="hq", start_mode="closed", history_size=8)
    assert ControllerConfig.from_dict(config.to_dict()) == config


def test_from_dict_fills_defaults():
    config = ControllerConfig.from_dict({"operator_email": "ops@example.com"})
    assert config.operator_email == "ops@example.com"
    assert config.start_mode == "out of hours"
    assert config.expected_names["fire_alarm"] == "FireAlarm"


def test_from_dict_merges_expected_names():
    config = ControllerConfig.from_dict({"expected_names": {"doors": "Entrances"}})
    assert config.expected_names["doors"] == "Entrances"
    assert config.expected_names["lights"] == "Lights"


def test_migrate_old_version():
    data = ControllerConfig.migrate({"version": 0, "building_id": "hq"})
    assert data["version"] == CURRENT_CONFIG_VERSION
    assert data["building_id"] == "hq"


def test_from_dict_does_not_mutate_input():
    data = {"version": 0}
    ControllerConfig.from_dict(data)
    assert data == {"version": 0}


def test_direct_construction_fills_expected_names():
    config = ControllerConfig(expected_names={"lights": "Lighting"})
    assert config.expected_names == {
        "lights": "Lighting",
        "doors": "Doors",
        "fire_alarm": "FireAlarm",
    }
