import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

LEGACY_WORKBOOK_PATH = Config.LEGACY_WORKBOOK_PATH
LEGACY_SYNC_ENABLED = Config.LEGACY_SYNC_ENABLED
MAX_IMPORT_BYTES = Config.MAX_IMPORT_BYTES

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
