from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.exceptions import DriverNotFound
from .model import Driver

logger = logging.getLogger(__name__)


def normalize_name(value: object) -> str:
    """Case-fold and collapse whitespace so "  RAMESH   kumar" == "Ramesh Kumar"."""

    if value is None:
        return ""
    return " ".join(str(value).split()).casefold()


class DriverNameResolver:
    """Exact, normalized name lookup over a roster snapshot.

    No fuzzy or partial matching. A name shared by two roster entries is
    ambiguous and resolves to nothing rather than to a guess.
    """

    def __init__(self, roster: Iterable[Driver]):
        self._by_name: dict[str, Driver] = {}
        self._ambiguous: set[str] = set()
        self._by_id: dict[str, Driver] = {}

        for driver in roster:
            self._by_id[str(driver.driver_id)] = driver
            key = normalize_name(driver.full_name)
            if not key:
                continue
            if key in self._by_name and self._by_name[key].driver_id != driver.driver_id:
                self._ambiguous.add(key)
            self._by_name[key] = driver

        for key in self._ambiguous:
            self._by_name.pop(key, None)
        if self._ambiguous:
            logger.warning("Roster has %d ambiguous driver names", len(self._ambiguous))

    def find(self, name: object) -> Optional[Driver]:
        return self._by_name.get(normalize_name(name))

    def resolve(self, name: object, *, row_reference: str = "") -> Driver:
        driver = self.find(name)
        if driver is None:
            prefix = f"{row_reference}: " if row_reference else ""
            raise DriverNotFound(f"{prefix}Driver '{name}' not found")
        return driver

    def by_id(self, driver_id: object) -> Optional[Driver]:
        return self._by_id.get(str(driver_id))
