from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, SheetFormat


@dataclass(frozen=True)
class ParsedEntry:
    """One (driver name, date, status) triple read from a sheet.

    ``row_reference`` is only used in error messages.
    """

    driver_name: str
    work_date: date
    status: AttendanceStatus
    row_reference: str
    notes: Optional[str] = None


@dataclass
class ParseResult:
    sheet_format: SheetFormat
    entries: list[ParsedEntry] = field(default_factory=list)
    # Row-level problems that block an import.
    errors: list[str] = field(default_factory=list)
    # Problems that only drop the affected cell/row.
    warnings: list[str] = field(default_factory=list)
