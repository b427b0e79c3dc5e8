from __future__ import annotations

import io
from datetime import date, datetime

import pytest
from openpyxl import Workbook

from src.fleet_attendance.fleet_attendance.core.enums import SheetFormat
from src.fleet_attendance.fleet_attendance.core.exceptions import ValidationError
from src.fleet_attendance.fleet_attendance.imports.detector import detect_format
from src.fleet_attendance.fleet_attendance.imports.parsers.grid_parser import GridSheetParser
from src.fleet_attendance.fleet_attendance.imports.parsers.list_parser import ListSheetParser
from src.fleet_attendance.fleet_attendance.imports.reader import read_sheet_rows


def _xlsx_bytes(rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def test_reads_first_sheet_without_header_interpretation():
    data = _xlsx_bytes([["S.NO", "NAME", "November,2025"], [None, None, 1, 2], [1, "Ramesh Kumar", "P", None]])

    rows = read_sheet_rows(data, "grid.xlsx")

    assert rows[0][:3] == ["S.NO", "NAME", "November,2025"]
    assert rows[1][2] == 1
    assert rows[1][0] is None
    assert rows[2][1] == "Ramesh Kumar"
    assert rows[2][3] is None


def test_reads_csv_with_blank_cells_as_none():
    data = b"Driver Name,Date,Status\nRamesh Kumar,2025-11-05,P\nSuresh Singh,2025-11-05,\n"

    rows = read_sheet_rows(data, "list.CSV")

    assert rows[0] == ["Driver Name", "Date", "Status"]
    assert rows[2] == ["Suresh Singh", "2025-11-05", None]


def test_rejects_unsupported_and_empty_files():
    with pytest.raises(ValidationError):
        read_sheet_rows(b"abc", "notes.txt")
    with pytest.raises(ValidationError):
        read_sheet_rows(b"", "list.csv")
    with pytest.raises(ValidationError):
        read_sheet_rows(b"not a zip", "broken.xlsx")


def test_csv_serial_dates_parse_as_list_entries():
    data = b"Driver Name,Date,Status\nRamesh Kumar,45600,P\nSuresh Singh,45601.0,A\n"

    result = ListSheetParser().parse(read_sheet_rows(data, "export.csv"))

    assert result.errors == []
    assert [(e.driver_name, e.work_date) for e in result.entries] == [
        ("Ramesh Kumar", date(2024, 11, 4)),
        ("Suresh Singh", date(2024, 11, 5)),
    ]


def test_xlsx_grid_with_date_typed_month_header():
    data = _xlsx_bytes(
        [["S.NO", "NAME", datetime(2025, 11, 1)], [None, None, 1, 2], [1, "Ramesh Kumar", "P", "A"]]
    )

    rows = read_sheet_rows(data, "grid.xlsx")

    assert detect_format(rows) == SheetFormat.GRID
    result = GridSheetParser(today=lambda: date(2026, 3, 15)).parse(rows)
    assert result.warnings == []
    assert [e.work_date for e in result.entries] == [date(2025, 11, 1), date(2025, 11, 2)]
