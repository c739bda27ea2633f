"""SQLAlchemy Core table definitions for the folioctl database."""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

preferences = Table(
    "preferences",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated", Text, nullable=False),
)

contact_messages = Table(
    "contact_messages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("subject", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column("status", Text, nullable=False),  # sent | logged | failed
    Column("error", Text),
    Column("remote_addr", Text),
    Column("created", Text, nullable=False),
    Index("ix_contact_messages_created", "created"),
)
