"""
SQLite schema definitions (DDL).

Tables:
    items: the catalogue the listing pages through

The (created_at, id) index backs the listing order, which must be total
so that offset paging is stable across requests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from lazyscroll.storage.connection import get_connection

logger = logging.getLogger(__name__)

# Current schema version. Bump when adding migrations.
SCHEMA_VERSION = 1

_ITEMS_DDL = """
CREATE TABLE IF NOT EXISTS items (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    name         TEXT NOT NULL,
    category     TEXT NOT NULL DEFAULT 'general',
    price_cents  INTEGER NOT NULL DEFAULT 0,
    created_at   TEXT NOT NULL
);
"""

_ITEMS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_items_listing ON items(created_at DESC, id DESC);",
    "CREATE INDEX IF NOT EXISTS idx_items_category ON items(category, created_at DESC, id DESC);",
]


def initialize_database(db_path: Optional[Path] = None) -> None:
    """
    Create all tables and indexes if they don't exist.

    Safe to call multiple times.
    """
    conn = get_connection(db_path)

    logger.info("Initializing database schema (version %d)...", SCHEMA_VERSION)

    with conn:
        conn.execute(_ITEMS_DDL)
        for idx_sql in _ITEMS_INDEXES:
            conn.execute(idx_sql)
        conn.execute(f"PRAGMA user_version={SCHEMA_VERSION}")


def get_schema_version(db_path: Optional[Path] = None) -> int:
    """Return the current schema version of the database."""
    conn = get_connection(db_path)
    row = conn.execute("PRAGMA user_version").fetchone()
    return row[0] if row else 0
