import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

LEGACY_WORKBOOK_PATH = Config.LEGACY_WORKBOOK_PATH
LEGACY_SYNC_ENABLED = Config.LEGACY_SYNC_ENABLED
MAX_IMPORT_BYTES = Config.MAX_IMPORT_BYTES

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the demo roster on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
