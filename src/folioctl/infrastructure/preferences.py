"""Durable key-value preference stores.

The page keeps exactly one preference (``theme``), but the store is a
plain string map so the theme manager never knows where it lives.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert

from folioctl.infrastructure.database.schema import preferences

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryPreferenceStore:
    """Dict-backed store for tests and throwaway CLI sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes.append((key, value))

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SqlPreferenceStore:
    """Store backed by the ``preferences`` table (upsert on write)."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self, key: str) -> str | None:
        with self._engine.connect() as conn:
            return conn.execute(
                select(preferences.c.value).where(preferences.c.key == key)
            ).scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        now = datetime.now(UTC).isoformat()
        stmt = insert(preferences).values(key=key, value=value, updated=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[preferences.c.key],
            set_={"value": value, "updated": now},
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)

    def delete(self, key: str) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(preferences).where(preferences.c.key == key))
