from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ...common.datetime_utils import normalize_date
from ...core.constants import (
    DATE_ALIASES,
    DRIVER_NAME_ALIASES,
    NOTES_ALIASES,
    STATUS_ALIASES,
    UNRECOGNIZED_STATUS_DEFAULT,
)
from ...core.enums import SheetFormat
from ...core.exceptions import DateParseError
from ..grid_layout import cell_text
from ..model import ParsedEntry, ParseResult
from ..statuses import map_status_token
from .base import SheetParser


def pick_field(record: Mapping[str, Any], aliases: Sequence[str]) -> Optional[Any]:
    """Value of the first alias present with a non-blank value."""

    for alias in aliases:
        value = record.get(alias)
        if value is not None and cell_text(value):
            return value
    return None


class ListSheetParser(SheetParser):
    """One row per (driver, date, status) with a named header row."""

    sheet_format = SheetFormat.LIST
    strict_driver_match = True

    def parse(self, rows: Sequence[Sequence[Any]]) -> ParseResult:
        result = ParseResult(sheet_format=self.sheet_format)
        if not rows:
            result.errors.append("Sheet is empty")
            return result

        headers = [cell_text(h) for h in rows[0]]

        for idx in range(1, len(rows)):
            row = rows[idx]
            if not any(cell_text(v) for v in row):
                continue

            # 1-indexed, counting the header row.
            ref = f"Row {idx + 1}"
            record = {h: row[i] for i, h in enumerate(headers) if h and i < len(row)}

            name = pick_field(record, DRIVER_NAME_ALIASES)
            raw_date = pick_field(record, DATE_ALIASES)
            if name is None:
                result.errors.append(f"{ref}: Missing driver name")
                continue
            if raw_date is None:
                result.errors.append(f"{ref}: Missing date")
                continue

            try:
                work_date = normalize_date(raw_date)
            except DateParseError as exc:
                result.errors.append(f"{ref}: {exc}")
                continue

            status = map_status_token(pick_field(record, STATUS_ALIASES)) or UNRECOGNIZED_STATUS_DEFAULT
            notes = pick_field(record, NOTES_ALIASES)

            result.entries.append(
                ParsedEntry(
                    driver_name=cell_text(name),
                    work_date=work_date,
                    status=status,
                    row_reference=ref,
                    notes=cell_text(notes) if notes is not None else None,
                )
            )

        return result
