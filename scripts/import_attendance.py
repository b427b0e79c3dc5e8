"""Import an attendance spreadsheet without going through HTTP.

Usage: python scripts/import_attendance.py path/to/sheet.xlsx
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.fleet_attendance.fleet_attendance.container import build_container
from src.fleet_attendance.fleet_attendance.core.exceptions import DomainError, ImportRejected


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import a list- or grid-format attendance sheet into the ledger.")
    parser.add_argument("input", help="Input .xlsx or .csv file")
    parser.add_argument("--no-sync", action="store_true", help="Do not update the legacy workbook")
    parser.add_argument("--user", dest="user_id", help="User id recorded in the audit log")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    legacy_path = Path(settings.LEGACY_WORKBOOK_PATH)
    if not legacy_path.is_absolute():
        legacy_path = REPO_ROOT / legacy_path

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        legacy_workbook_path=legacy_path,
        legacy_sync_enabled=bool(getattr(settings, "LEGACY_SYNC_ENABLED", True)) and not args.no_sync,
    )

    path = Path(args.input)
    try:
        outcome = container.attendance_service.import_sheet(path.read_bytes(), path.name, actor_id=args.user_id)
    except ImportRejected as exc:
        print(f"Import failed ({exc.success_count} rows were valid):", file=sys.stderr)
        for message in exc.errors:
            print(f"  {message}", file=sys.stderr)
        return 1
    except (DomainError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"OK: imported {outcome.count} records ({outcome.sheet_format.value} format)")
    for message in outcome.warnings:
        print(f"  warning: {message}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
