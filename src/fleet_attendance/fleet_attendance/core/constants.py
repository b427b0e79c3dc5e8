"""Constants and named default policies.

Note: Keep constants here to avoid magic values spread across code.
"""

from __future__ import annotations

from datetime import date

from .enums import AttendanceStatus

# Day zero of spreadsheet serial dates (serial 1 == 1899-12-31).
SPREADSHEET_EPOCH = date(1899, 12, 30)

# Month-first reading for ambiguous locale strings such as "05/11/2025".
DATE_DAYFIRST = False

# Dates read from text (parsed strings and serials typed as text) must land
# inside this year range.
TEXT_DATE_MIN_YEAR = 1970
TEXT_DATE_MAX_YEAR = 2100

# Status used when a list-format row carries no status, or one that is neither
# P/PRESENT nor A/ABSENT. Kept as-is because existing imports rely on it.
UNRECOGNIZED_STATUS_DEFAULT = AttendanceStatus.ABSENT

PRESENT_TOKENS = frozenset({"P", "PRESENT"})
ABSENT_TOKENS = frozenset({"A", "ABSENT"})

# Grid month header fallback when the "<Month>,<Year>" cell cannot be read:
# January of the current year.
GRID_FALLBACK_MONTH_INDEX = 0

# List-format header aliases, tried in order.
DRIVER_NAME_ALIASES = ("Driver Name", "driver_name", "Driver", "Name")
DATE_ALIASES = ("Date", "date")
STATUS_ALIASES = ("Status", "status", "Attendance")
NOTES_ALIASES = ("Notes", "notes", "Remarks")

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# Header spellings of the serial-number column, compared without punctuation.
SERIAL_HEADERS = frozenset({"sno", "srno", "slno", "serialno", "serial", "sn", "no"})

# Section labels that appear in the name column of grid sheets.
NON_DRIVER_LABELS = frozenset({"OFFICE", "SITE", "STAFF", "DRIVERS", "TOTAL", "NAME"})

LEGACY_PRESENT_MARK = "P"
LEGACY_ABSENT_MARK = "A"

# Status reported for a driver with no ledger row on the requested date.
UNMARKED_STATUS = "none"
