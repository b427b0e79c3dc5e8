from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import SynchronizationFailure
from .workbook import LegacyWorkbook

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncItem:
    full_name: str
    work_date: date
    status: AttendanceStatus


class LegacySheetSynchronizer:
    """Mirrors committed ledger writes into the legacy workbook.

    Best effort: every failure is logged and swallowed so the ledger write
    that triggered it is never affected. Concurrent calls are not serialized;
    the last save wins.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        enabled: bool = True,
        today: Optional[Callable[[], date]] = None,
    ):
        self._path = Path(path)
        self._enabled = bool(enabled)
        self._today = today or date.today

    @property
    def path(self) -> Path:
        return self._path

    def sync(self, full_name: str, work_date: date, status: AttendanceStatus) -> bool:
        return self.sync_many([SyncItem(full_name, work_date, status)]) == 1

    def sync_many(self, items: Sequence[SyncItem]) -> int:
        """Write every resolvable cell in one open/save cycle; returns cells written."""

        if not self._enabled or not items:
            return 0

        written = 0
        try:
            with LegacyWorkbook.open(self._path, today=self._today()) as book:
                for item in items:
                    try:
                        coordinate = book.set_status(item.full_name, item.work_date, item.status)
                    except SynchronizationFailure as exc:
                        logger.warning(
                            "Legacy sheet not updated for %s on %s: %s",
                            item.full_name,
                            item.work_date.isoformat(),
                            exc,
                        )
                        continue
                    logger.debug("Legacy sheet %s <- %s", coordinate, item.status.value)
                    written += 1
        except SynchronizationFailure as exc:
            logger.warning("Legacy sheet sync skipped: %s", exc)
            return 0
        except Exception:
            logger.exception("Legacy sheet sync failed for %s", self._path)
            return 0

        return written
