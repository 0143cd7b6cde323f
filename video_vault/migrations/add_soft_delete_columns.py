"""
Migration: Add soft-delete columns to folders and folder_permissions.

Databases created before soft deletion was introduced lack the
``deleted_at`` columns; this adds them as nullable timestamps so every
existing row starts out active.
"""

import logging

from sqlalchemy import inspect, text
from video_vault.database import engine

logger = logging.getLogger(__name__)

SOFT_DELETE_TABLES = ("folders", "folder_permissions")


def migrate():
    """Add ``deleted_at`` to each soft-delete table that doesn't have it."""
    inspector = inspect(engine)
    tables = inspector.get_table_names()

    for table in SOFT_DELETE_TABLES:
        if table not in tables:
            logger.info("Migration skipped: %s table does not exist.", table)
            continue

        columns = [col["name"] for col in inspector.get_columns(table)]
        if "deleted_at" in columns:
            logger.debug("Migration skipped: deleted_at already exists in %s table.", table)
            continue

        with engine.begin() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN deleted_at DATETIME"))
        logger.info("Migration complete: Added deleted_at column to %s table.", table)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    migrate()
