from __future__ import annotations

import pytest

from src.fleet_attendance.fleet_attendance.core.exceptions import DriverNotFound
from src.fleet_attendance.fleet_attendance.drivers.model import Driver
from src.fleet_attendance.fleet_attendance.drivers.resolver import DriverNameResolver, normalize_name


def test_normalize_name_folds_case_and_whitespace():
    assert normalize_name("  RAMESH   kumar ") == "ramesh kumar"
    assert normalize_name(None) == ""


def test_match_ignores_case_and_spacing(roster):
    resolver = DriverNameResolver(roster)

    assert resolver.find("ramesh kumar").driver_id == "d-ramesh"
    assert resolver.find(" SURESH  SINGH ").driver_id == "d-suresh"


def test_partial_names_do_not_match(roster):
    resolver = DriverNameResolver(roster)

    assert resolver.find("Ramesh") is None
    assert resolver.find("Ramesh Kumar Jr") is None


def test_duplicate_roster_names_are_treated_as_not_found():
    resolver = DriverNameResolver(
        [Driver(driver_id="a", full_name="Raju"), Driver(driver_id="b", full_name="raju ")]
    )

    assert resolver.find("Raju") is None


def test_resolve_reports_row_reference(roster):
    resolver = DriverNameResolver(roster)

    with pytest.raises(DriverNotFound) as exc:
        resolver.resolve("Nobody", row_reference="Row 14")

    assert str(exc.value) == "Row 14: Driver 'Nobody' not found"


def test_lookup_by_id(roster):
    resolver = DriverNameResolver(roster)

    assert resolver.by_id("d-mahesh").full_name == "Mahesh Yadav"
    assert resolver.by_id("missing") is None
