"""
Read/write operations for the items table.

``fetch`` is the offset/limit capability the page cursor runs against.
Listing order is newest first with the primary key as tie-breaker, which
makes it total and therefore stable between requests.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from lazyscroll.storage.connection import get_connection
from lazyscroll.storage.models import Item

logger = logging.getLogger(__name__)

_LISTING_ORDER = "ORDER BY created_at DESC, id DESC"


class ItemStore:
    """CRUD interface for the items table."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        self._db_path = db_path

    @property
    def _conn(self):
        return get_connection(self._db_path)

    # ----- Write operations -----

    def insert(self, item: Item) -> int:
        """Insert one item and return its new id."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO items (name, category, price_cents, created_at) VALUES (?, ?, ?, ?)",
                (item.name, item.category, item.price_cents, item.created_at),
            )
        item.id = cursor.lastrowid
        logger.debug("Inserted item %d", item.id)
        return item.id

    def insert_many(self, items: list[Item]) -> int:
        """Insert several items in one transaction. Returns the count inserted."""
        rows = [(i.name, i.category, i.price_cents, i.created_at) for i in items]
        with self._conn:
            cursor = self._conn.executemany(
                "INSERT INTO items (name, category, price_cents, created_at) VALUES (?, ?, ?, ?)",
                rows,
            )
        logger.info("Bulk insert: %d items", cursor.rowcount)
        return cursor.rowcount

    # ----- Read operations -----

    def _row_to_item(self, row) -> Item:
        return Item(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            price_cents=row["price_cents"],
            created_at=row["created_at"],
        )

    def get_by_id(self, item_id: int) -> Optional[Item]:
        row = self._conn.execute("SELECT * FROM items WHERE id = ?", (item_id,)).fetchone()
        return self._row_to_item(row) if row else None

    def fetch(self, offset: int, limit: int, category: Optional[str] = None) -> list[Item]:
        """Return up to ``limit`` items starting at ``offset`` in listing order."""
        if category:
            rows = self._conn.execute(
                f"SELECT * FROM items WHERE category = ? {_LISTING_ORDER} LIMIT ? OFFSET ?",
                (category, limit, offset),
            ).fetchall()
        else:
            rows = self._conn.execute(
                f"SELECT * FROM items {_LISTING_ORDER} LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
        return [self._row_to_item(r) for r in rows]

    def fetcher(self, category: Optional[str] = None) -> Callable[[int, int], list[Item]]:
        """``fetch`` with the category filter bound in, for the page cursor."""
        return partial(self.fetch, category=category)

    def count(self, category: Optional[str] = None) -> int:
        """Count items. Not used by paging; for seeding and stats."""
        if category:
            row = self._conn.execute(
                "SELECT COUNT(*) AS cnt FROM items WHERE category = ?", (category,)
            ).fetchone()
        else:
            row = self._conn.execute("SELECT COUNT(*) AS cnt FROM items").fetchone()
        return row["cnt"]

    def categories(self) -> list[str]:
        rows = self._conn.execute("SELECT DISTINCT category FROM items ORDER BY category").fetchall()
        return [r["category"] for r in rows]
