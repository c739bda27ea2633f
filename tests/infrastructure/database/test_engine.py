"""Tests for database initialisation."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import inspect, text

from folioctl.infrastructure.database.engine import DB_FILENAME, init_database


class TestInitDatabase:
    def test_creates_layout(self, tmp_path: Path) -> None:
        state = tmp_path / ".folio"
        engine = init_database(state)
        try:
            assert (state / DB_FILENAME).is_file()
            assert (state / "plugins").is_dir()
            tables = set(inspect(engine).get_table_names())
            assert {"preferences", "contact_messages"} <= tables
        finally:
            engine.dispose()

    def test_idempotent(self, tmp_path: Path) -> None:
        init_database(tmp_path / ".folio").dispose()
        engine = init_database(tmp_path / ".folio")
        engine.dispose()

    def test_wal_mode(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path / ".folio")
        try:
            with engine.connect() as conn:
                mode = conn.execute(text("PRAGMA journal_mode")).scalar_one()
            assert str(mode).lower() == "wal"
        finally:
            engine.dispose()
