"""Append-only log of contact messages received by the backend."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select

from folioctl.infrastructure.database.schema import contact_messages

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class ContactLog:
    """Records every delivery attempt with its outcome."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def record(
        self,
        *,
        name: str,
        email: str,
        subject: str,
        message: str,
        status: str,
        error: str | None = None,
        remote_addr: str | None = None,
    ) -> int:
        """Insert a row and return its id."""
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(contact_messages).values(
                    name=name,
                    email=email,
                    subject=subject,
                    message=message,
                    status=status,
                    error=error,
                    remote_addr=remote_addr,
                    created=datetime.now(UTC).isoformat(),
                )
            )
            assert result.inserted_primary_key is not None
            return int(result.inserted_primary_key[0])

    def recent(self, limit: int = 20) -> list[dict[str, Any]]:
        """Newest first."""
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(contact_messages)
                .order_by(contact_messages.c.id.desc())
                .limit(limit)
            ).mappings()
            return [dict(row) for row in rows]

    def count(self, status: str | None = None) -> int:
        stmt = select(func.count()).select_from(contact_messages)
        if status is not None:
            stmt = stmt.where(contact_messages.c.status == status)
        with self._engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one())
