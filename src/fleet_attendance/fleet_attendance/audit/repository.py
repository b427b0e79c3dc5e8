from __future__ import annotations

from typing import Optional, Protocol


class AuditRepository(Protocol):
    def insert(self, *, user_id: Optional[str], action: str, details: dict) -> None:
        raise NotImplementedError
