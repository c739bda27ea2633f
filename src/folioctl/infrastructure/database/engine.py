"""SQLite storage under ``<site>/.folio/folio.db``.

Holds two small tables: the theme preference and the contact log.
SQLAlchemy Core is enough for that; every write is one short
transaction and the CLI process exits right after.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from folioctl.infrastructure.database.schema import metadata

DB_FILENAME = "folio.db"

# WAL lets `folioctl contact list` read while `folioctl serve` is writing.
_CONNECT_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA foreign_keys=ON",
    "PRAGMA busy_timeout=5000",
)


def database_path(state_dir: Path) -> Path:
    return state_dir / DB_FILENAME


def create_db_engine(db_path: Path) -> Engine:
    """Engine for *db_path* with the connection pragmas applied."""
    engine = create_engine(f"sqlite:///{db_path}")

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_conn: Any, _record: Any) -> None:
        cursor = dbapi_conn.cursor()
        try:
            for pragma in _CONNECT_PRAGMAS:
                cursor.execute(pragma)
        finally:
            cursor.close()

    return engine


def init_database(state_dir: Path) -> Engine:
    """Make sure ``.folio/`` (with ``plugins/``) and all tables exist.

    Safe to call repeatedly; existing rows are untouched.
    """
    (state_dir / "plugins").mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(database_path(state_dir))
    metadata.create_all(engine)
    return engine
