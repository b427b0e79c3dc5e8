from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import DateParseError, ValidationError
from .datetime_utils import normalize_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_date(value: Any, field_name: str = "date") -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    try:
        return normalize_date(value)
    except DateParseError as exc:
        raise ValidationError(f"{field_name} is invalid: {exc}") from exc


def require_status(value: Any) -> AttendanceStatus:
    """Strict status check for API payloads (no default policy here)."""

    text = require_non_empty(value, "status").lower()
    try:
        return AttendanceStatus(text)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"status must be one of: {allowed}") from exc


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
