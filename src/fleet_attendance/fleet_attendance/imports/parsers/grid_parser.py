from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Optional, Sequence

from ...common.datetime_utils import normalize_date
from ...core.enums import SheetFormat
from ..grid_layout import (
    cell_at,
    cell_text,
    day_columns,
    find_name_column,
    find_serial_column,
    is_driver_label,
    resolve_period,
)
from ..model import ParsedEntry, ParseResult
from ..statuses import map_status_token
from .base import SheetParser

logger = logging.getLogger(__name__)


class GridSheetParser(SheetParser):
    """Driver-by-day matrix: month header row, day-number row, one row per driver.

    Blank cells are unmarked days and produce nothing.
    """

    sheet_format = SheetFormat.GRID
    strict_driver_match = False

    def __init__(self, *, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today

    def parse(self, rows: Sequence[Sequence[Any]]) -> ParseResult:
        result = ParseResult(sheet_format=self.sheet_format)
        if len(rows) < 2:
            result.errors.append("Grid sheet needs a month header row and a day-number row")
            return result

        header, day_row = rows[0], rows[1]
        name_col = find_name_column(header)
        if name_col is None:
            result.errors.append("Row 1: Grid header has no NAME column")
            return result

        period = resolve_period(header, today=self._today())
        if not period.resolved:
            message = f"Row 1: Month header not recognized; using {period.label()}"
            logger.warning("%s", message)
            result.warnings.append(message)

        days = day_columns(day_row, skip=(name_col, find_serial_column(header)))
        if not days:
            result.errors.append("Row 2: No day numbers found")
            return result

        for idx in range(2, len(rows)):
            row = rows[idx]
            name = cell_at(row, name_col)
            if not is_driver_label(name):
                continue

            ref = f"Row {idx + 1}"
            for col, day in days.items():
                status = map_status_token(cell_at(row, col))
                if status is None:
                    continue
                try:
                    work_date = normalize_date(date(period.year, period.month, day))
                except ValueError:
                    result.warnings.append(f"{ref}: Day {day} does not exist in {period.label()}")
                    continue

                result.entries.append(
                    ParsedEntry(
                        driver_name=cell_text(name),
                        work_date=work_date,
                        status=status,
                        row_reference=ref,
                    )
                )

        return result
