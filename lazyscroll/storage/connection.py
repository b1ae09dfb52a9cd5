"""
SQLite connection factory.

All database access in the project goes through get_connection().

- WAL mode: concurrent readers while a seed/import is writing.
- check_same_thread=False: FastAPI runs sync routes in a threadpool.
- Row factory: rows come back as sqlite3.Row (dict-like access).
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Optional

from lazyscroll.config.settings import get_settings

logger = logging.getLogger(__name__)

_lock = threading.Lock()

# One connection per database path
_connections: dict[str, sqlite3.Connection] = {}


def get_connection(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """
    Get the shared SQLite connection for ``db_path``.

    Args:
        db_path: Path to the SQLite database file. If None, uses
                 the default path from settings.
    """
    if db_path is None:
        db_path = get_settings().db_path

    db_key = str(db_path)

    with _lock:
        if db_key in _connections:
            return _connections[db_key]

        db_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info("Opening SQLite database: %s", db_path)

        conn = sqlite3.connect(
            str(db_path),
            check_same_thread=False,
            timeout=10.0,
        )

        storage = get_settings().storage
        conn.execute(f"PRAGMA journal_mode={storage.journal_mode}")
        conn.execute(f"PRAGMA busy_timeout={storage.busy_timeout_ms}")
        conn.execute("PRAGMA synchronous=NORMAL")  # Safe with WAL
        conn.row_factory = sqlite3.Row

        _connections[db_key] = conn
        return conn


def close_connection(db_path: Optional[Path] = None) -> None:
    """Close the connection for a given db_path (or the default)."""
    if db_path is None:
        db_path = get_settings().db_path

    with _lock:
        conn = _connections.pop(str(db_path), None)
        if conn is not None:
            conn.close()
            logger.info("Database connection closed: %s", db_path)

