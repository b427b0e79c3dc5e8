from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .audit.logger import AuditLogger
from .audit.mysql_audit_repository import MySQLAuditRepository
from .database.connection import DBConfig, DatabaseConnection
from .drivers.mysql_driver_repository import MySQLDriverRepository
from .imports.factory import SheetParserFactory
from .legacy.synchronizer import LegacySheetSynchronizer


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    drivers_repo: MySQLDriverRepository
    attendance_repo: MySQLAttendanceRepository
    audit_repo: MySQLAuditRepository

    audit_logger: AuditLogger
    legacy_synchronizer: LegacySheetSynchronizer
    attendance_service: AttendanceService


def build_container(
    *,
    db_config: dict,
    legacy_workbook_path: str | Path,
    legacy_sync_enabled: bool = True,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    drivers_repo = MySQLDriverRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    audit_repo = MySQLAuditRepository(conn)

    audit_logger = AuditLogger(audit_repo)
    legacy_synchronizer = LegacySheetSynchronizer(legacy_workbook_path, enabled=legacy_sync_enabled)
    attendance_service = AttendanceService(
        attendance_repo,
        drivers_repo,
        synchronizer=legacy_synchronizer,
        audit=audit_logger,
        parser_factory=SheetParserFactory(),
    )

    return Container(
        conn=conn,
        drivers_repo=drivers_repo,
        attendance_repo=attendance_repo,
        audit_repo=audit_repo,
        audit_logger=audit_logger,
        legacy_synchronizer=legacy_synchronizer,
        attendance_service=attendance_service,
    )
