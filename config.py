# config.py
# Role: Environment-driven settings for the finance ledger.
#       Values are read once at import time from the process environment,
#       after loading an optional .env file from the project root.

"""
Application configuration.

Supported environment variables:
- DATABASE_URL        SQLAlchemy URL (default: SQLite file under ./database)
- UPLOAD_DIR          where uploaded CSV files are stored until imported
- IMPORT_CHUNK_SIZE   rows read per pandas chunk during CSV import
- LOG_LEVEL           DEBUG / INFO / WARNING / ERROR
- AUTO_CREATE_TABLES  run Base.metadata.create_all on startup (default: 1)
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_truthy(name: str, default: str = "0") -> bool:
    v = os.getenv(name, default)
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


# -------------------------------------------------------------------
# Database
# -------------------------------------------------------------------

DEFAULT_DB_PATH = os.path.join(BASE_DIR, "database", "finance.db")
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DEFAULT_DB_PATH}"

# create_all on startup; managed databases run `alembic upgrade head` instead
AUTO_CREATE_TABLES = _env_truthy("AUTO_CREATE_TABLES", "1")

# -------------------------------------------------------------------
# CSV import
# -------------------------------------------------------------------

UPLOAD_DIR = os.getenv("UPLOAD_DIR") or os.path.join(BASE_DIR, "uploads")
IMPORT_CHUNK_SIZE = _env_int("IMPORT_CHUNK_SIZE", 500)

# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
