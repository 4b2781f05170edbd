# db.py
# Role: Database bootstrap for the finance ledger.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.
#       For SQLite it also makes sure the database folder exists and that
#       foreign keys are enforced on every connection.

"""
Database setup for the finance ledger.

- URL comes from config.DATABASE_URL (SQLite file by default).
- SQLite needs PRAGMA foreign_keys=ON for ON DELETE SET NULL to apply.
"""

import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL


def make_engine(url: str) -> Engine:
    """
    Create an engine for `url`, applying the SQLite-specific setup when needed.
    """
    if not url.startswith("sqlite"):
        return create_engine(url)

    # File-backed SQLite: ensure the parent folder exists
    db_file = make_url(url).database
    if db_file and db_file != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(db_file)), exist_ok=True)

    # check_same_thread=False for FastAPI (threaded request handling)
    sqlite_engine = create_engine(url, connect_args={"check_same_thread": False})
    enable_sqlite_foreign_keys(sqlite_engine)
    return sqlite_engine


def enable_sqlite_foreign_keys(target: Engine) -> None:
    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = make_engine(DATABASE_URL)

# Standard session factory used via dependency injection (see app/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()
