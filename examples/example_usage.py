"""Example: use the service layer directly (no Flask).

Prints today's sheet: one line per active driver, "none" when unmarked.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.fleet_attendance.fleet_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        legacy_workbook_path=settings.LEGACY_WORKBOOK_PATH,
        legacy_sync_enabled=False,
    )
    for row in container.attendance_service.list_attendance(work_date=date.today(), include_all_drivers=True):
        print(f"{row.full_name:<30} {row.status}")


if __name__ == "__main__":
    main()
