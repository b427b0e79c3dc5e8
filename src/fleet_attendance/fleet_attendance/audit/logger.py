from __future__ import annotations

import logging
from typing import Any, Optional

from .repository import AuditRepository

logger = logging.getLogger(__name__)

ATTENDANCE_MARKED = "ATTENDANCE_MARKED"
ATTENDANCE_BULK_MARKED = "ATTENDANCE_BULK_MARKED"
ATTENDANCE_IMPORTED = "ATTENDANCE_IMPORTED"
ATTENDANCE_DELETED = "ATTENDANCE_DELETED"


class AuditLogger:
    """Fire-and-forget audit trail of coarse actions.

    A failed audit write is logged and never propagates to the caller.
    """

    def __init__(self, repo: AuditRepository):
        self._repo = repo

    def log_action(self, user_id: Optional[Any], action: str, details: Optional[dict] = None) -> None:
        try:
            self._repo.insert(
                user_id=str(user_id) if user_id is not None else None,
                action=action,
                details=dict(details or {}),
            )
        except Exception:
            logger.exception("Failed to log audit action %s", action)
