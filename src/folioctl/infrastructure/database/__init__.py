"""SQLite database engine and schema via SQLAlchemy Core."""

from folioctl.infrastructure.database.engine import create_db_engine, init_database
from folioctl.infrastructure.database.schema import contact_messages, metadata, preferences

__all__ = [
    "contact_messages",
    "create_db_engine",
    "init_database",
    "metadata",
    "preferences",
]
