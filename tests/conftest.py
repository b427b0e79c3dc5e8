from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import Any, Optional

import pytest
from openpyxl import Workbook
from openpyxl.styles import Font

from src.fleet_attendance.fleet_attendance.attendance.model import AttendanceRecord, AttendanceRow, LedgerEntry
from src.fleet_attendance.fleet_attendance.core.constants import UNMARKED_STATUS
from src.fleet_attendance.fleet_attendance.core.enums import EmploymentStatus
from src.fleet_attendance.fleet_attendance.core.exceptions import StorageFailure
from src.fleet_attendance.fleet_attendance.drivers.model import Driver

RAMESH = Driver(driver_id="d-ramesh", full_name="Ramesh Kumar")
SURESH = Driver(driver_id="d-suresh", full_name="Suresh Singh")
MAHESH = Driver(driver_id="d-mahesh", full_name="Mahesh Yadav")
DINESH = Driver(driver_id="d-dinesh", full_name="Dinesh Patel", employment_status=EmploymentStatus.INACTIVE)


@dataclass
class InMemoryDrivers:
    drivers: list[Driver]
    calls: int = 0

    def list_roster(self, *, active_only: bool = False):
        self.calls += 1
        if active_only:
            return [d for d in self.drivers if d.is_active]
        return list(self.drivers)


class InMemoryAttendance:
    """Dict-backed ledger keyed on (driver_id, work_date), like the unique index."""

    def __init__(self, drivers: Optional[list[Driver]] = None):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._names = {d.driver_id: d.full_name for d in (drivers or [])}
        self._drivers = list(drivers or [])
        self._id = 0
        self.fail_on_write = False
        self.batches: list[list[LedgerEntry]] = []

    def _apply(self, store, entry: LedgerEntry) -> AttendanceRecord:
        key = (entry.driver_id, entry.work_date)
        existing = store.get(key)
        if existing:
            record = replace(
                existing,
                status=entry.status,
                notes=entry.notes if entry.notes is not None else existing.notes,
            )
        else:
            self._id += 1
            record = AttendanceRecord(
                attendance_id=self._id,
                driver_id=entry.driver_id,
                work_date=entry.work_date,
                status=entry.status,
                notes=entry.notes,
            )
        store[key] = record
        return record

    def upsert(self, entry: LedgerEntry) -> AttendanceRecord:
        if self.fail_on_write:
            raise StorageFailure("Ledger write failed")
        return self._apply(self._by_key, entry)

    def upsert_many(self, entries) -> int:
        if self.fail_on_write:
            raise StorageFailure("Ledger write failed")
        staged = dict(self._by_key)
        for entry in entries:
            self._apply(staged, entry)
        self._by_key = staged
        self.batches.append(list(entries))
        return len(entries)

    def all(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())

    def get(self, driver_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((driver_id, work_date))

    def list_rows(self, *, work_date=None, driver_id=None):
        rows = [
            AttendanceRow(
                attendance_id=r.attendance_id,
                driver_id=r.driver_id,
                full_name=self._names.get(r.driver_id),
                work_date=r.work_date,
                status=r.status.value,
                notes=r.notes,
            )
            for r in self._by_key.values()
            if (work_date is None or r.work_date == work_date) and (driver_id is None or r.driver_id == driver_id)
        ]
        rows.sort(key=lambda r: r.work_date, reverse=True)
        return rows

    def list_day_sheet(self, *, work_date, driver_id=None):
        out = []
        for d in self._drivers:
            if not d.is_active or (driver_id is not None and d.driver_id != driver_id):
                continue
            r = self._by_key.get((d.driver_id, work_date))
            out.append(
                AttendanceRow(
                    attendance_id=r.attendance_id if r else None,
                    driver_id=d.driver_id,
                    full_name=d.full_name,
                    work_date=work_date,
                    status=r.status.value if r else UNMARKED_STATUS,
                    notes=r.notes if r else None,
                )
            )
        return out

    def get_by_id(self, attendance_id: int):
        for r in self._by_key.values():
            if r.attendance_id == attendance_id:
                return r
        return None

    def delete_by_id(self, attendance_id: int) -> bool:
        for key, r in list(self._by_key.items()):
            if r.attendance_id == attendance_id:
                del self._by_key[key]
                return True
        return False


@dataclass
class RecordingSynchronizer:
    path: Path = Path("missing.xlsx")
    items: list = field(default_factory=list)

    def sync_many(self, items) -> int:
        self.items.extend(items)
        return len(items)


@dataclass
class RecordingAuditRepo:
    entries: list = field(default_factory=list)

    def insert(self, *, user_id, action, details) -> None:
        self.entries.append((user_id, action, details))


@pytest.fixture
def roster() -> list[Driver]:
    return [RAMESH, SURESH, MAHESH, DINESH]


@pytest.fixture
def drivers_repo(roster) -> InMemoryDrivers:
    return InMemoryDrivers(roster)


@pytest.fixture
def attendance_repo(roster) -> InMemoryAttendance:
    return InMemoryAttendance(roster)


def build_grid_workbook(path: Path, *, month_header: Any = "November,2025", days: int = 30) -> Path:
    """Legacy-style grid: S.NO | NAME | <Month>,<Year>, day row, driver rows."""

    wb = Workbook()
    ws = wb.active
    ws.title = "Attendance"
    ws.append(["S.NO", "NAME", month_header])
    ws.append([None, None, *range(1, days + 1), "TOTAL P"])
    ws.append([1, "Ramesh Kumar", "P", "A", None, "P"])
    ws.append([None, "OFFICE"])
    ws.append([2, "Suresh Singh", None, "A"])
    ws.append([3, "  MAHESH   yadav "])
    ws["A1"].font = Font(bold=True)
    wb.save(path)
    wb.close()
    return path


@pytest.fixture
def legacy_workbook(tmp_path) -> Path:
    return build_grid_workbook(tmp_path / "attendance.xlsx")
