from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Any, Iterator, Optional

from openpyxl import load_workbook

from ..core.constants import LEGACY_ABSENT_MARK, LEGACY_PRESENT_MARK
from ..core.enums import AttendanceStatus
from ..core.exceptions import SynchronizationFailure
from ..drivers.resolver import normalize_name
from ..imports.grid_layout import (
    GridPeriod,
    cell_at,
    day_columns,
    find_name_column,
    find_serial_column,
    resolve_period,
)

HEADER_ROW = 1
DAY_ROW = 2
FIRST_DRIVER_ROW = 3


class LegacyWorkbook:
    """Scoped handle on the legacy grid workbook.

    Use :meth:`open`; the file is saved on a clean exit when a cell changed and
    closed either way. Only the targeted cells are touched.
    """

    def __init__(self, path: Path, workbook, *, today: date):
        self.path = path
        self._workbook = workbook
        self._sheet = workbook.active
        self._today = today
        self._dirty = False

        header = self._row_values(HEADER_ROW)
        self._name_col = find_name_column(header)
        if self._name_col is None:
            raise SynchronizationFailure(f"{path.name}: no NAME column in the header row")
        self._period = resolve_period(header, today=today)
        self._days = day_columns(self._row_values(DAY_ROW), skip=(self._name_col, find_serial_column(header)))

    @classmethod
    @contextmanager
    def open(cls, path: str | Path, *, today: Optional[date] = None) -> Iterator["LegacyWorkbook"]:
        path = Path(path)
        if not path.is_file():
            raise SynchronizationFailure(f"Legacy workbook not found: {path}")

        keep_vba = path.suffix.lower() == ".xlsm"
        try:
            workbook = load_workbook(path, keep_vba=keep_vba)
        except Exception as exc:
            raise SynchronizationFailure(f"Could not read legacy workbook: {exc}") from exc

        try:
            book = cls(path, workbook, today=today or date.today())
            yield book
            if book.dirty:
                book._save()
        finally:
            workbook.close()

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def period(self) -> GridPeriod:
        return self._period

    def _row_values(self, row: int) -> tuple[Any, ...]:
        for values in self._sheet.iter_rows(min_row=row, max_row=row, values_only=True):
            return values
        return ()

    def find_day_column(self, day: int) -> Optional[int]:
        """1-based sheet column holding ``day`` in the day-number row."""

        for idx, value in self._days.items():
            if value == day:
                return idx + 1
        return None

    def find_driver_row(self, full_name: str) -> Optional[int]:
        """1-based sheet row whose name cell matches ``full_name``."""

        wanted = normalize_name(full_name)
        if not wanted:
            return None
        for offset, values in enumerate(self._sheet.iter_rows(min_row=FIRST_DRIVER_ROW, values_only=True)):
            if normalize_name(cell_at(values, self._name_col)) == wanted:
                return FIRST_DRIVER_ROW + offset
        return None

    def set_status(self, full_name: str, work_date: date, status: AttendanceStatus) -> str:
        """Write P/A into the driver's cell for ``work_date``; returns the cell address."""

        if not self._period.resolved:
            raise SynchronizationFailure("legacy sheet month header not recognized")
        if not self._period.contains(work_date):
            raise SynchronizationFailure(
                f"legacy sheet covers {self._period.label()}, not {work_date.isoformat()}"
            )

        col = self.find_day_column(work_date.day)
        if col is None:
            raise SynchronizationFailure(f"day {work_date.day} not found in legacy sheet")
        row = self.find_driver_row(full_name)
        if row is None:
            raise SynchronizationFailure(f"driver '{full_name}' not found in legacy sheet")

        cell = self._sheet.cell(row=row, column=col)
        cell.value = LEGACY_PRESENT_MARK if status == AttendanceStatus.PRESENT else LEGACY_ABSENT_MARK
        self._dirty = True
        return cell.coordinate

    def _save(self) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.stem}.", suffix=self.path.suffix, dir=str(self.path.parent))
        os.close(fd)
        temp_path = Path(tmp_name)
        try:
            self._workbook.save(temp_path)
            shutil.copymode(self.path, temp_path)
            os.replace(temp_path, self.path)
        finally:
            if temp_path.exists():
                temp_path.unlink()
