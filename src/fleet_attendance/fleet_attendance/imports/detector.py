from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.constants import DATE_ALIASES, DRIVER_NAME_ALIASES, STATUS_ALIASES
from ..core.enums import SheetFormat
from ..core.exceptions import FormatDetectionAmbiguous
from .grid_layout import cell_text, find_month_column, find_name_column, find_serial_column

logger = logging.getLogger(__name__)

_LIST_HEADERS = frozenset(a.lower() for a in (*DRIVER_NAME_ALIASES, *DATE_ALIASES, *STATUS_ALIASES))


def looks_like_grid(header: Sequence[Any]) -> bool:
    """``S.NO | NAME | <Month>,<Year>`` header shape."""

    return (
        find_serial_column(header) is not None
        and find_name_column(header) is not None
        and find_month_column(header) is not None
    )


def looks_like_list(header: Sequence[Any]) -> bool:
    return any(cell_text(value).lower() in _LIST_HEADERS for value in header)


def classify_sheet(rows: Sequence[Sequence[Any]]) -> SheetFormat:
    """Strict classifier: raises when neither header shape matches.

    Grid wins when both match.
    """

    header = rows[0] if rows else []
    if looks_like_grid(header):
        return SheetFormat.GRID
    if looks_like_list(header):
        return SheetFormat.LIST
    raise FormatDetectionAmbiguous("Header row matches neither the grid nor the list layout")


def detect_format(rows: Sequence[Sequence[Any]]) -> SheetFormat:
    """Classify a sheet from its first rows, defaulting to list format."""

    try:
        return classify_sheet(rows)
    except FormatDetectionAmbiguous as exc:
        logger.info("%s; treating sheet as list format", exc)
        return SheetFormat.LIST
