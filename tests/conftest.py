"""
Shared test fixtures for the lazyscroll test suite.

Every test that touches storage gets a fresh SQLite file under tmp_path
with the schema already initialized.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from lazyscroll.storage.connection import close_connection, get_connection
from lazyscroll.storage.item_store import ItemStore
from lazyscroll.storage.models import Item
from lazyscroll.storage.schema import initialize_database


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Temporary SQLite database path, cleaned up by pytest."""
    return tmp_path / "test_lazyscroll.db"


@pytest.fixture
def db(db_path: Path):
    """Initialized database connection; closed after the test."""
    initialize_database(db_path)
    conn = get_connection(db_path)
    yield conn
    close_connection(db_path)


@pytest.fixture
def item_store(db, db_path: Path) -> ItemStore:
    return ItemStore(db_path)


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


def make_items(n: int, category: str = "general", start_minute: int = 0) -> list[Item]:
    """
    Items numbered 0..n-1 whose created_at increases with the number, so the
    newest-first listing order is the reverse of creation order.
    """
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return [
        Item(
            name=f"item_{start_minute + i:03d}",
            category=category,
            price_cents=100 + i,
            created_at=(base + timedelta(minutes=start_minute + i)).isoformat(),
        )
        for i in range(n)
    ]


class ListFetch:
    """In-memory fetch(offset, limit) that records every call."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.calls: list[tuple[int, int]] = []

    def __call__(self, offset: int, limit: int):
        self.calls.append((offset, limit))
        return self.rows[offset:offset + limit]


@pytest.fixture
def list_fetch():
    """Factory for recording in-memory fetch capabilities."""
    return ListFetch
