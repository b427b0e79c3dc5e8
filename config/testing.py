import os

from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LEGACY_WORKBOOK_PATH = os.getenv("LEGACY_WORKBOOK_PATH", "data/attendance-test.xlsx")
LEGACY_SYNC_ENABLED = Config.LEGACY_SYNC_ENABLED
MAX_IMPORT_BYTES = Config.MAX_IMPORT_BYTES

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
