from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from ..core.enums import SheetFormat
from .parsers.base import SheetParser
from .parsers.grid_parser import GridSheetParser
from .parsers.list_parser import ListSheetParser


@dataclass
class SheetParserFactory:
    """Factory Pattern: choose the parser for a detected sheet format."""

    today: Callable[[], date] = field(default=date.today)

    def for_format(self, sheet_format: SheetFormat) -> SheetParser:
        if sheet_format == SheetFormat.GRID:
            return GridSheetParser(today=self.today)
        return ListSheetParser()
