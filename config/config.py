import os


class Config:
    """Defaults shared by every environment; each one overrides via env vars."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "fleet_attendance")

    # Mirror written after every ledger write; relative paths are resolved
    # against the repository root.
    LEGACY_WORKBOOK_PATH = os.environ.get("LEGACY_WORKBOOK_PATH", "data/attendance.xlsx")
    LEGACY_SYNC_ENABLED = bool(int(os.environ.get("LEGACY_SYNC_ENABLED", "1")))

    MAX_IMPORT_BYTES = int(os.environ.get("MAX_IMPORT_BYTES", str(10 * 1024 * 1024)))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
