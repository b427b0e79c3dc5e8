"""Load the demo driver roster from database/seed.sql.

Usage: python scripts/seed_db.py

Run scripts/init_db.py first. Existing drivers are updated in place.
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

from src.fleet_attendance.fleet_attendance.database.bootstrap import apply_seed_sql

SEED_PATH = REPO_ROOT / "database" / "seed.sql"


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=SEED_PATH)
    print(f"OK: demo roster loaded into {db_config.get('database')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
