"""Structural helpers for the driver-by-day grid layout.

Row 0 holds ``S.NO | NAME | <Month>,<Year> ...``, row 1 holds day numbers
(1-31) under the day columns, later rows hold one driver each. Shared by the
grid parser and the legacy workbook synchronizer.
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..core.constants import GRID_FALLBACK_MONTH_INDEX, MONTH_NAMES, NON_DRIVER_LABELS, SERIAL_HEADERS

_SPLIT = re.compile(r"[\s,./\-]+")


@dataclass(frozen=True)
class GridPeriod:
    year: int
    month_index: int  # 0-based
    resolved: bool = True

    @property
    def month(self) -> int:
        return self.month_index + 1

    def label(self) -> str:
        return f"{MONTH_NAMES[self.month_index].capitalize()} {self.year}"

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month


def cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def cell_at(row: Sequence[Any], index: int) -> Any:
    return row[index] if 0 <= index < len(row) else None


def is_serial_header(value: Any) -> bool:
    compact = re.sub(r"[^a-z]", "", cell_text(value).lower())
    return compact in SERIAL_HEADERS


def find_serial_column(header: Sequence[Any]) -> Optional[int]:
    for idx, value in enumerate(header):
        if is_serial_header(value):
            return idx
    return None


def find_name_column(header: Sequence[Any]) -> Optional[int]:
    for idx, value in enumerate(header):
        if "name" in cell_text(value).lower():
            return idx
    return None


def find_month_column(header: Sequence[Any]) -> Optional[int]:
    """Header cell naming the month, as text or as a date-typed cell."""

    for idx, value in enumerate(header):
        if isinstance(value, date):
            return idx
        text = cell_text(value).lower()
        if text and any(month in text for month in MONTH_NAMES):
            return idx
    return None


def _month_from_token(token: str) -> Optional[int]:
    token = token.lower()
    for idx, name in enumerate(MONTH_NAMES):
        if token == name or (len(token) >= 3 and name.startswith(token)):
            return idx
    return None


def resolve_period(header: Sequence[Any], *, today: date) -> GridPeriod:
    """Read ``<Month>,<Year>`` (or a date-typed cell) from the header row.

    Falls back to January / ``today.year`` for whatever part cannot be read;
    ``resolved`` is False in that case.
    """

    month_index: Optional[int] = None
    year: Optional[int] = None

    col = find_month_column(header)
    if col is not None and isinstance(header[col], date):
        return GridPeriod(year=header[col].year, month_index=header[col].month - 1)
    if col is not None:
        for token in _SPLIT.split(cell_text(header[col])):
            if not token:
                continue
            if month_index is None:
                month_index = _month_from_token(token)
                if month_index is not None:
                    continue
            if year is None and token.isdigit() and len(token) == 4:
                year = int(token)

    if month_index is None or year is None:
        return GridPeriod(
            year=year if year is not None else today.year,
            month_index=month_index if month_index is not None else GRID_FALLBACK_MONTH_INDEX,
            resolved=False,
        )
    return GridPeriod(year=year, month_index=month_index)


def day_number(value: Any) -> Optional[int]:
    """Return 1-31 for day-header cells, ``None`` for anything else."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        if not math.isfinite(value) or value != int(value):
            return None
        number = int(value)
    else:
        text = cell_text(value)
        if text.endswith(".0"):
            text = text[:-2]
        if not text.isdigit():
            return None
        number = int(text)
    return number if 1 <= number <= 31 else None


def day_columns(day_row: Sequence[Any], *, skip: Sequence[Optional[int]] = ()) -> dict[int, int]:
    """Column index -> day of month, ignoring non-day cells."""

    skipped = {i for i in skip if i is not None}
    out: dict[int, int] = {}
    for idx, value in enumerate(day_row):
        if idx in skipped:
            continue
        day = day_number(value)
        if day is not None:
            out[idx] = day
    return out


def is_driver_label(value: Any) -> bool:
    """True when a name cell holds a driver name rather than a blank or section label."""

    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text:
        return False
    return text.upper() not in NON_DRIVER_LABELS
