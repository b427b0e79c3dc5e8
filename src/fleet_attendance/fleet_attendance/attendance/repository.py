from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceRow, LedgerEntry


class AttendanceRepository(Protocol):
    """Ledger storage. (driver_id, work_date) is unique at the schema level."""

    def upsert(self, entry: LedgerEntry) -> AttendanceRecord:
        """Insert-or-update one entry as its own transaction."""

        raise NotImplementedError

    def upsert_many(self, entries: Sequence[LedgerEntry]) -> int:
        """Apply entries in order inside one transaction; all or nothing."""

        raise NotImplementedError

    def list_rows(self, *, work_date: Optional[date] = None, driver_id: Optional[str] = None) -> Sequence[AttendanceRow]:
        raise NotImplementedError

    def list_day_sheet(self, *, work_date: date, driver_id: Optional[str] = None) -> Sequence[AttendanceRow]:
        """One row per active driver for ``work_date``, unmarked ones included."""

        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError
