from __future__ import annotations

from typing import Protocol, Sequence

from .model import Driver


class DriverRepository(Protocol):
    """Roster source consumed by the reconciliation engine."""

    def list_roster(self, *, active_only: bool = False) -> Sequence[Driver]:
        raise NotImplementedError
