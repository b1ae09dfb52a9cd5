"""
Data models for the storage layer.

Plain dataclasses; every field maps 1:1 to a column.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Item:
    """A row of the ``items`` table."""

    name: str
    category: str = "general"
    price_cents: int = 0
    created_at: str = field(default_factory=_utc_now_iso)

    # Assigned by SQLite on insert
    id: Optional[int] = None
