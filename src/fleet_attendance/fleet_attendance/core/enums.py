from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Stored attendance states. "Unmarked" is the absence of a row."""

    PRESENT = "present"
    ABSENT = "absent"


class SheetFormat(str, Enum):
    """Spreadsheet layouts understood by the importer."""

    LIST = "list"
    GRID = "grid"


class EmploymentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
