"""Tests for manager status parsing and fault detection."""

import pytest

from smart_building.core.status import (
    build_status,
    find_faulty,
    format_engineer_listing,
    parse_status,
)


class TestParseStatus:
    """parse_status fault rules."""

    def test_healthy(self):
        status = parse_status("Lights,OK,OK,", "Lights")
        assert status.is_faulty is False
        assert status.name == "Lights"
        assert status.devices == ["OK", "OK"]
        assert status.raw == "Lights,OK,OK,"

    def test_device_fault(self):
        status = parse_status("Doors,OK,FAULT,OK,", "Doors")
        assert status.is_faulty
        assert status.faulty_devices == [1]

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_is_fault(self, raw):
        status = parse_status(raw, "Lights")
        assert status.is_faulty
        assert status.raw == ""
        assert status.fault_reason == "empty"

    def test_wrong_name_is_fault(self):
        status = parse_status("Doors,OK,", "Lights")
        assert status.is_faulty
        assert "Doors" in status.fault_reason

    def test_missing_trailing_separator_is_fault(self):
        status = parse_status("FireAlarm,OK", "FireAlarm")
        assert status.is_faulty
        assert status.fault_reason == "missing trailing separator"

    @pytest.mark.parametrize("token", ["ok", "FAULT", "", "UNKNOWN"])
    def test_any_non_ok_token_is_fault(self, token):
        status = parse_status(f"Lights,OK,{token},", "Lights")
        assert status.is_faulty

    def test_manager_without_devices(self):
        status = parse_status("Lights,", "Lights")
        assert status.is_faulty is False
        assert status.devices == []


def test_find_faulty_keeps_order():
    statuses = [
        parse_status("Lights,FAULT,", "Lights"),
        parse_status("FireAlarm,OK,", "FireAlarm"),
        parse_status("Doors,FAULT,", "Doors"),
    ]
    assert find_faulty(statuses) == ["Lights", "Doors"]


@pytest.mark.parametrize(
    "names,expected",
    [
        ([], ""),
        (["Lights"], "Lights"),
        (["Lights", "Doors"], "Lights,Doors,"),
        (["Lights", "FireAlarm", "Doors"], "Lights,FireAlarm,Doors,"),
    ],
)
def test_format_engineer_listing(names, expected):
    assert format_engineer_listing(names) == expected


def test_build_status():
    assert build_status("Doors", ["OK", "FAULT"]) == "Doors,OK,FAULT,"
    assert build_status("Doors", []) == "Doors,"
