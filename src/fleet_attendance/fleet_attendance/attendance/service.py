from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from ..audit.logger import (
    ATTENDANCE_BULK_MARKED,
    ATTENDANCE_DELETED,
    ATTENDANCE_IMPORTED,
    ATTENDANCE_MARKED,
    AuditLogger,
)
from ..common.validators import optional_text, require_date, require_non_empty, require_status
from ..core.enums import SheetFormat
from ..core.exceptions import DriverNotFound, ImportRejected, RecordNotFound, ValidationError
from ..drivers.model import Driver
from ..drivers.repository import DriverRepository
from ..drivers.resolver import DriverNameResolver
from ..imports.detector import detect_format
from ..imports.factory import SheetParserFactory
from ..imports.reader import read_sheet_rows
from ..legacy.synchronizer import LegacySheetSynchronizer, SyncItem
from .model import AttendanceRecord, AttendanceRow, LedgerEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkOutcome:
    count: int
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImportOutcome:
    count: int
    sheet_format: SheetFormat
    warnings: list[str] = field(default_factory=list)


class AttendanceService:
    """Reconciliation orchestrator for manual marks, bulk marks and imports.

    Every path resolves drivers against a fresh roster snapshot, writes the
    ledger through the upsert engine, then mirrors the committed rows into the
    legacy workbook (best effort).
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        drivers: DriverRepository,
        *,
        synchronizer: Optional[LegacySheetSynchronizer] = None,
        audit: Optional[AuditLogger] = None,
        parser_factory: Optional[SheetParserFactory] = None,
    ):
        self._attendance = attendance
        self._drivers = drivers
        self._synchronizer = synchronizer
        self._audit = audit
        self._parsers = parser_factory or SheetParserFactory()

    # ----- read path -----

    def list_attendance(
        self,
        *,
        work_date: Optional[date] = None,
        driver_id: Optional[str] = None,
        include_all_drivers: bool = False,
    ) -> Sequence[AttendanceRow]:
        if include_all_drivers and work_date is not None:
            return self._attendance.list_day_sheet(work_date=work_date, driver_id=driver_id)
        return self._attendance.list_rows(work_date=work_date, driver_id=driver_id)

    # ----- single mark -----

    def mark(self, payload: Mapping[str, Any], *, actor_id: Optional[Any] = None) -> AttendanceRecord:
        driver_id = require_non_empty(payload.get("driver_id"), "driver_id")
        entry_date = require_date(payload.get("date"))
        status = require_status(payload.get("status"))
        notes = optional_text(payload.get("notes"))

        resolver = self._snapshot()
        driver = resolver.by_id(driver_id)
        if driver is None:
            raise DriverNotFound(f"Driver '{driver_id}' not found")

        record = self._attendance.upsert(
            LedgerEntry(driver_id=driver.driver_id, work_date=entry_date, status=status, notes=notes)
        )
        self._mirror([(driver, record.work_date, record.status)])
        self._log(actor_id, ATTENDANCE_MARKED, record.to_dict())
        return record

    # ----- bulk mark -----

    def bulk_mark(self, records: Any, *, actor_id: Optional[Any] = None) -> BulkOutcome:
        """Apply a list of marks as one transaction.

        Records that fail validation or name an unknown driver are skipped and
        reported as warnings; the rest are committed together.
        """

        if not isinstance(records, (list, tuple)):
            raise ValidationError("Invalid data format")

        resolver = self._snapshot()
        warnings: list[str] = []
        resolved: list[tuple[Driver, LedgerEntry]] = []

        for idx, payload in enumerate(records, start=1):
            ref = f"Record {idx}"
            if not isinstance(payload, Mapping):
                warnings.append(f"{ref}: Invalid data format")
                continue
            try:
                driver = self._bulk_driver(resolver, payload)
                entry = LedgerEntry(
                    driver_id=driver.driver_id,
                    work_date=require_date(payload.get("date")),
                    status=require_status(payload.get("status")),
                    notes=optional_text(payload.get("notes")),
                )
            except (ValidationError, DriverNotFound) as exc:
                warnings.append(f"{ref}: {exc}")
                continue
            resolved.append((driver, entry))

        count = self._attendance.upsert_many([entry for _, entry in resolved])
        if count:
            self._mirror([(driver, e.work_date, e.status) for driver, e in resolved])
            self._log(actor_id, ATTENDANCE_BULK_MARKED, {"count": count, "skipped": len(warnings)})
        for message in warnings:
            logger.warning("Bulk attendance: %s", message)
        return BulkOutcome(count=count, warnings=warnings)

    def _bulk_driver(self, resolver: DriverNameResolver, payload: Mapping[str, Any]) -> Driver:
        driver_id = optional_text(payload.get("driver_id"))
        if driver_id is not None:
            driver = resolver.by_id(driver_id)
            if driver is None:
                raise DriverNotFound(f"Driver '{driver_id}' not found")
            return driver

        name = optional_text(payload.get("driver_name"))
        if name is None:
            raise ValidationError("driver_id is required")
        return resolver.resolve(name)

    # ----- spreadsheet import -----

    def import_sheet(self, data: bytes, filename: str, *, actor_id: Optional[Any] = None) -> ImportOutcome:
        rows = read_sheet_rows(data, filename)
        return self.import_rows(rows, actor_id=actor_id, source=filename)

    def import_rows(
        self,
        rows: Sequence[Sequence[Any]],
        *,
        actor_id: Optional[Any] = None,
        source: str = "",
    ) -> ImportOutcome:
        """Detect, parse, resolve; persist only when no row failed."""

        sheet_format = detect_format(rows)
        parser = self._parsers.for_format(sheet_format)
        parsed = parser.parse(rows)
        logger.info("Import %s: %s format, %d entries parsed", source or "<rows>", sheet_format.value, len(parsed.entries))

        errors = list(parsed.errors)
        warnings = list(parsed.warnings)
        reported: set[str] = set()

        resolver = self._snapshot()
        resolved: list[tuple[Driver, LedgerEntry]] = []
        for item in parsed.entries:
            driver = resolver.find(item.driver_name)
            if driver is None:
                if item.row_reference not in reported:
                    reported.add(item.row_reference)
                    message = f"{item.row_reference}: Driver '{item.driver_name}' not found"
                    if parser.strict_driver_match:
                        errors.append(message)
                    else:
                        warnings.append(message)
                continue
            resolved.append(
                (
                    driver,
                    LedgerEntry(
                        driver_id=driver.driver_id,
                        work_date=item.work_date,
                        status=item.status,
                        notes=item.notes,
                    ),
                )
            )

        if errors:
            raise ImportRejected(errors, success_count=len(resolved))
        if not resolved:
            raise ImportRejected(["No attendance entries found in file"], success_count=0)

        count = self._attendance.upsert_many([entry for _, entry in resolved])
        self._mirror([(driver, e.work_date, e.status) for driver, e in resolved])
        self._log(
            actor_id,
            ATTENDANCE_IMPORTED,
            {"count": count, "format": sheet_format.value, "source": source, "warnings": len(warnings)},
        )
        return ImportOutcome(count=count, sheet_format=sheet_format, warnings=warnings)

    # ----- delete / export -----

    def delete(self, attendance_id: Any, *, actor_id: Optional[Any] = None) -> None:
        try:
            record_id = int(attendance_id)
        except (TypeError, ValueError) as exc:
            raise ValidationError("id is invalid") from exc

        record = self._attendance.get_by_id(record_id)
        if record is None or not self._attendance.delete_by_id(record_id):
            raise RecordNotFound(f"Attendance record {record_id} not found")
        self._log(actor_id, ATTENDANCE_DELETED, record.to_dict())

    def legacy_workbook_path(self) -> Optional[Path]:
        if self._synchronizer is None:
            return None
        path = self._synchronizer.path
        return path if path.is_file() else None

    # ----- helpers -----

    def _snapshot(self) -> DriverNameResolver:
        return DriverNameResolver(self._drivers.list_roster())

    def _mirror(self, written: Sequence[tuple[Driver, date, Any]]) -> None:
        if self._synchronizer is None or not written:
            return
        self._synchronizer.sync_many([SyncItem(d.full_name, work_date, status) for d, work_date, status in written])

    def _log(self, actor_id: Optional[Any], action: str, details: dict) -> None:
        if self._audit is not None:
            self._audit.log_action(actor_id, action, details)
