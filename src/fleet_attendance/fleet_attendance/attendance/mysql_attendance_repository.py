from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import UNMARKED_STATUS
from ..core.enums import AttendanceStatus, EmploymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceRow, LedgerEntry
from .repository import AttendanceRepository

# Keyed on uq_attendance_driver_date; a missing note keeps the stored one.
UPSERT_SQL = """
    INSERT INTO attendance(driver_id, work_date, status, notes)
    VALUES(%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE
        status=VALUES(status),
        notes=COALESCE(VALUES(notes), notes)
"""


def _params(entry: LedgerEntry) -> tuple:
    return (str(entry.driver_id), entry.work_date, entry.status.value, entry.notes)


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        driver_id=str(r["driver_id"]),
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
    )


def _to_row(r: dict) -> AttendanceRow:
    return AttendanceRow(
        attendance_id=int(r["attendance_id"]) if r.get("attendance_id") is not None else None,
        driver_id=str(r["driver_id"]),
        full_name=r.get("full_name"),
        work_date=r["work_date"],
        status=r.get("status") or UNMARKED_STATUS,
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, entry: LedgerEntry) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(UPSERT_SQL, _params(entry))
            cur.execute(
                """
                SELECT attendance_id, driver_id, work_date, status, notes
                FROM attendance
                WHERE driver_id=%s AND work_date=%s
                """,
                (str(entry.driver_id), entry.work_date),
            )
            return _to_record(fetchone(cur))

    def upsert_many(self, entries: Sequence[LedgerEntry]) -> int:
        if not entries:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            # Row by row to keep input order within the batch.
            for entry in entries:
                cur.execute(UPSERT_SQL, _params(entry))
        return len(entries)

    def list_rows(self, *, work_date: Optional[date] = None, driver_id: Optional[str] = None) -> Sequence[AttendanceRow]:
        clauses: list[str] = []
        params: list[object] = []
        if work_date is not None:
            clauses.append("a.work_date=%s")
            params.append(work_date)
        if driver_id is not None:
            clauses.append("a.driver_id=%s")
            params.append(str(driver_id))
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.attendance_id, a.driver_id, d.full_name, a.work_date, a.status, a.notes
                FROM attendance a
                LEFT JOIN drivers d ON d.driver_id = a.driver_id
                {where}
                ORDER BY a.work_date DESC, d.full_name ASC
                """,
                tuple(params),
            )
            return [_to_row(r) for r in fetchall(cur)]

    def list_day_sheet(self, *, work_date: date, driver_id: Optional[str] = None) -> Sequence[AttendanceRow]:
        params: list[object] = [work_date, EmploymentStatus.ACTIVE.value]
        extra = ""
        if driver_id is not None:
            extra = "AND d.driver_id=%s"
            params.append(str(driver_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.attendance_id, d.driver_id, d.full_name, a.status, a.notes
                FROM drivers d
                LEFT JOIN attendance a ON a.driver_id = d.driver_id AND a.work_date = %s
                WHERE d.employment_status=%s {extra}
                ORDER BY d.full_name ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [_to_row({**r, "work_date": work_date}) for r in rows]

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, driver_id, work_date, status, notes
                FROM attendance
                WHERE attendance_id=%s
                """,
                (int(attendance_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def delete_by_id(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0
