from __future__ import annotations

from datetime import date, datetime

from src.fleet_attendance.fleet_attendance.core.enums import AttendanceStatus, SheetFormat
from src.fleet_attendance.fleet_attendance.imports.parsers.list_parser import ListSheetParser


def test_missing_status_defaults_to_absent():
    rows = [["Driver", "Date"], ["Suresh Singh", "2025-11-05"]]

    result = ListSheetParser().parse(rows)

    assert result.sheet_format == SheetFormat.LIST
    assert result.errors == []
    [entry] = result.entries
    assert entry.driver_name == "Suresh Singh"
    assert entry.work_date == date(2025, 11, 5)
    assert entry.status == AttendanceStatus.ABSENT
    assert entry.row_reference == "Row 2"


def test_status_tokens_and_unrecognized_default():
    rows = [
        ["Driver Name", "Date", "Status"],
        ["A", "2025-11-01", "p"],
        ["A", "2025-11-02", "Present"],
        ["A", "2025-11-03", "a"],
        ["A", "2025-11-04", "ABSENT"],
        ["A", "2025-11-05", "Leave"],
    ]

    result = ListSheetParser().parse(rows)

    assert [e.status for e in result.entries] == [
        AttendanceStatus.PRESENT,
        AttendanceStatus.PRESENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.ABSENT,
    ]


def test_aliases_are_tried_in_priority_order():
    rows = [["Name", "Driver Name", "date", "Attendance"], ["Other", "Ramesh Kumar", "2025-11-05", "P"]]

    [entry] = ListSheetParser().parse(rows).entries

    assert entry.driver_name == "Ramesh Kumar"
    assert entry.status == AttendanceStatus.PRESENT


def test_bad_rows_are_reported_and_skipped():
    rows = [
        ["Driver Name", "Date", "Status"],
        ["Ramesh Kumar", "2025-11-05", "P"],
        [None, "2025-11-05", "P"],
        ["Suresh Singh", None, "A"],
        ["Mahesh Yadav", "someday", "A"],
        ["Mahesh Yadav", "2025-11-06", "A"],
    ]

    result = ListSheetParser().parse(rows)

    assert [e.driver_name for e in result.entries] == ["Ramesh Kumar", "Mahesh Yadav"]
    assert result.errors[0] == "Row 3: Missing driver name"
    assert result.errors[1] == "Row 4: Missing date"
    assert result.errors[2].startswith("Row 5: Unrecognized date")


def test_serial_and_datetime_cells_are_accepted():
    rows = [
        ["Driver Name", "Date", "Status", "Notes"],
        ["Ramesh Kumar", 45600, "P", "late start"],
        ["Ramesh Kumar", datetime(2024, 11, 5, 0, 0), "P", None],
    ]

    entries = ListSheetParser().parse(rows).entries

    assert [e.work_date for e in entries] == [date(2024, 11, 4), date(2024, 11, 5)]
    assert entries[0].notes == "late start"
    assert entries[1].notes is None


def test_blank_rows_are_ignored():
    rows = [["Driver Name", "Date"], [None, None], ["Ramesh Kumar", "2025-11-05"], ["", "  "]]

    result = ListSheetParser().parse(rows)

    assert result.errors == []
    assert len(result.entries) == 1
    assert result.entries[0].row_reference == "Row 3"
