from __future__ import annotations

from typing import Any, Optional

from ..core.constants import ABSENT_TOKENS, PRESENT_TOKENS, UNRECOGNIZED_STATUS_DEFAULT
from ..core.enums import AttendanceStatus


def map_status_token(
    value: Any,
    *,
    default: AttendanceStatus = UNRECOGNIZED_STATUS_DEFAULT,
) -> Optional[AttendanceStatus]:
    """Map a sheet cell to a status.

    Blank cells give ``None``. P/PRESENT and A/ABSENT match case-insensitively;
    any other text falls back to ``default``.
    """

    if value is None:
        return None
    text = str(value).strip().upper()
    if not text:
        return None
    if text in PRESENT_TOKENS:
        return AttendanceStatus.PRESENT
    if text in ABSENT_TOKENS:
        return AttendanceStatus.ABSENT
    return default
