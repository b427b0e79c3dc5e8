from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ...core.enums import SheetFormat
from ..model import ParseResult


class SheetParser(ABC):
    """Turns decoded sheet rows into parsed attendance entries."""

    sheet_format: SheetFormat

    # When True an unknown driver name blocks the whole import; when False the
    # driver's entries are dropped with a warning.
    strict_driver_match: bool = True

    @abstractmethod
    def parse(self, rows: Sequence[Sequence[Any]]) -> ParseResult:
        raise NotImplementedError
