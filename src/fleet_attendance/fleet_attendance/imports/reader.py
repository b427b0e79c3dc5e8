from __future__ import annotations

import io
from pathlib import PurePath
from typing import Any

import pandas as pd

from ..core.exceptions import ValidationError

EXCEL_SUFFIXES = frozenset({".xlsx", ".xlsm"})
CSV_SUFFIXES = frozenset({".csv"})


def _clean(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def read_sheet_rows(data: bytes, filename: str) -> list[list[Any]]:
    """Decode the first sheet of an uploaded file into raw rows.

    No header interpretation happens here; row 0 is whatever the file's first
    row holds. Blank cells become ``None``.
    """

    if not data:
        raise ValidationError("Uploaded file is empty")

    suffix = PurePath(filename or "").suffix.lower()
    buf = io.BytesIO(data)
    try:
        if suffix in CSV_SUFFIXES:
            df = pd.read_csv(buf, header=None, dtype=str, keep_default_na=False, skip_blank_lines=False)
        elif suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(buf, sheet_name=0, header=None, dtype=object, engine="openpyxl")
        else:
            raise ValidationError("Only .xlsx and .csv files can be imported")
    except ValidationError:
        raise
    except pd.errors.EmptyDataError as exc:
        raise ValidationError("Uploaded file is empty") from exc
    except Exception as exc:
        raise ValidationError(f"Could not read spreadsheet: {exc}") from exc

    return [[_clean(v) for v in row] for row in df.itertuples(index=False, name=None)]
