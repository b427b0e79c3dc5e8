from __future__ import annotations

import math
import numbers
import re
import warnings
from datetime import date, datetime, timedelta
from typing import Any

import pandas as pd

from ..core.constants import (
    DATE_DAYFIRST,
    MONTH_NAMES,
    SPREADSHEET_EPOCH,
    TEXT_DATE_MAX_YEAR,
    TEXT_DATE_MIN_YEAR,
)
from ..core.exceptions import DateParseError

_SERIAL_TEXT = re.compile(r"^\d+(\.\d+)?$")


def from_serial(serial: float) -> date:
    """Spreadsheet serial number to calendar date, dropping any time fraction."""

    if isinstance(serial, float) and (math.isnan(serial) or math.isinf(serial)):
        raise DateParseError(f"Invalid serial date: {serial!r}")
    if serial < 0:
        raise DateParseError(f"Invalid serial date: {serial!r}")
    try:
        return SPREADSHEET_EPOCH + timedelta(days=math.floor(serial))
    except OverflowError as exc:
        raise DateParseError(f"Invalid serial date: {serial!r}") from exc


def _has_month_name(text: str) -> bool:
    for word in re.findall(r"[a-z]+", text.lower()):
        if len(word) >= 3 and any(name.startswith(word) for name in MONTH_NAMES):
            return True
    return False


def _is_complete(text: str, parsed: date) -> bool:
    """True when day, month and year all come from ``text`` rather than parser defaults."""

    numbers_in_text = {int(n) for n in re.findall(r"\d+", text)}
    if parsed.day not in numbers_in_text:
        return False
    if parsed.year not in numbers_in_text and parsed.year % 100 not in numbers_in_text:
        return False
    return parsed.month in numbers_in_text or _has_month_name(text)


def _parse_text(text: str) -> date:
    if _SERIAL_TEXT.match(text):
        parsed = from_serial(float(text))
    else:
        try:
            # Per-call "could not infer format" notices are noise for single cells.
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", UserWarning)
                stamp = pd.to_datetime(text, dayfirst=DATE_DAYFIRST)
        except (ValueError, OverflowError) as exc:
            raise DateParseError(f"Unrecognized date: {text!r}") from exc
        if stamp is pd.NaT:
            raise DateParseError(f"Unrecognized date: {text!r}")
        parsed = stamp.date()
        if not _is_complete(text, parsed):
            raise DateParseError(f"Incomplete date: {text!r}")

    if not TEXT_DATE_MIN_YEAR <= parsed.year <= TEXT_DATE_MAX_YEAR:
        raise DateParseError(f"Date out of range: {text!r}")
    return parsed


def normalize_date(value: Any) -> date:
    """Normalize a cell value into a calendar date.

    Spreadsheet readers surface dates as either raw serial numbers or strings
    depending on the source cell's formatting, and sometimes as real dates.
    All three are accepted:

    - ``date`` / ``datetime`` (incl. pandas ``Timestamp``): time part dropped
    - numbers: day offset from the spreadsheet epoch (1899-12-30)
    - strings: a bare number is a serial; anything else must name day, month
      and year. Impossible or out-of-range dates are rejected.
    """

    if value is None or value is pd.NaT:
        raise DateParseError("Missing date")

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, bool):
        raise DateParseError(f"Unrecognized date: {value!r}")
    if isinstance(value, numbers.Real):
        return from_serial(float(value))

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise DateParseError("Missing date")
        return _parse_text(text)

    raise DateParseError(f"Unrecognized date: {value!r}")
