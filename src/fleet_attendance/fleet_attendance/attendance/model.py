from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one driver's status on one calendar day."""

    attendance_id: int
    driver_id: str
    work_date: date
    status: AttendanceStatus
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "driver_id": self.driver_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class LedgerEntry:
    """A resolved write for the upsert engine, keyed on (driver_id, work_date).

    ``notes=None`` leaves any stored note untouched.
    """

    driver_id: str
    work_date: date
    status: AttendanceStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for listings; ``status`` may be the unmarked sentinel."""

    attendance_id: Optional[int]
    driver_id: str
    full_name: Optional[str]
    work_date: date
    status: str
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "driver_id": self.driver_id,
            "full_name": self.full_name,
            "date": self.work_date.isoformat(),
            "status": self.status,
            "notes": self.notes,
        }
