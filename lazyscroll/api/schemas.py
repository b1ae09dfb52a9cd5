"""Pydantic response models for the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ItemResponse(BaseModel):
    """A single item."""

    id: int
    name: str
    category: str
    price_cents: int
    created_at: str


class PageResponse(BaseModel):
    """One page of items, JSON flavor. No totals: only whether more exist."""

    items: list[ItemResponse]
    page: int
    page_size: int
    next_page: Optional[int] = None
    next_url: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
