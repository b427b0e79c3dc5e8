"""Create the ledger database and apply database/schema.sql.

Usage: python scripts/init_db.py

Safe to re-run; every statement in the schema is idempotent.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.fleet_attendance.fleet_attendance.database.bootstrap import apply_schema, list_tables

SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SCHEMA_PATH)
    tables = list_tables(db_config)
    missing = {"drivers", "attendance", "audit_logs"} - set(tables)
    if missing:
        print(f"ERROR: schema applied but tables are missing: {', '.join(sorted(missing))}", file=sys.stderr)
        return 1

    print(f"OK: ledger schema ready in {db_config.get('database')} ({', '.join(sorted(tables))})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
