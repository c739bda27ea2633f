"""Tests for the in-memory and SQLite preference stores."""

from __future__ import annotations

from pathlib import Path

from folioctl.infrastructure.database.engine import init_database
from folioctl.infrastructure.preferences import MemoryPreferenceStore, SqlPreferenceStore


class TestMemoryPreferenceStore:
    def test_get_set_delete(self) -> None:
        store = MemoryPreferenceStore()
        assert store.get("theme") is None
        store.set("theme", "dark")
        assert store.get("theme") == "dark"
        store.delete("theme")
        assert store.get("theme") is None

    def test_records_writes(self) -> None:
        store = MemoryPreferenceStore({"theme": "light"})
        store.set("theme", "dark")
        assert store.writes == [("theme", "dark")]

    def test_delete_missing_is_noop(self) -> None:
        MemoryPreferenceStore().delete("nothing")


class TestSqlPreferenceStore:
    def test_roundtrip_and_upsert(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path / ".folio")
        try:
            store = SqlPreferenceStore(engine)
            store.set("theme", "dark")
            store.set("theme", "light")
            assert store.get("theme") == "light"
            store.delete("theme")
            assert store.get("theme") is None
        finally:
            engine.dispose()

    def test_survives_reopen(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path / ".folio")
        SqlPreferenceStore(engine).set("theme", "dark")
        engine.dispose()

        engine = init_database(tmp_path / ".folio")
        try:
            assert SqlPreferenceStore(engine).get("theme") == "dark"
        finally:
            engine.dispose()
