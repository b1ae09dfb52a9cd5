"""Item listing route: one page per request, shaped by the delivery strategy."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Header, Query, Request
from fastapi.responses import HTMLResponse

from lazyscroll.api.schemas import ErrorResponse, ItemResponse, PageResponse
from lazyscroll.delivery.locator import PageLocator
from lazyscroll.delivery.models import RequestMode
from lazyscroll.pagination.cursor import PageCursor, parse_page_index
from lazyscroll.storage.models import Item

logger = logging.getLogger(__name__)

router = APIRouter(tags=["items"])


def item_cells(item: Item) -> list[object]:
    """Columns shown for an item row."""
    return [item.id, item.name, item.category, f"{item.price_cents / 100:.2f}"]


def resolve_request_mode(
    raw: bool,
    format_: str,
    accept: Optional[str],
    stream_media_type: str,
) -> RequestMode:
    """Map request parameters and headers onto a delivery flavor."""
    if format_ == "stream" or (accept and stream_media_type in accept):
        return RequestMode.STREAM
    if raw:
        return RequestMode.RAW
    return RequestMode.FULL


@router.get(
    "/items",
    response_model=None,
    responses={422: {"model": ErrorResponse}, 406: {"model": ErrorResponse}},
)
def list_items(
    request: Request,
    page: Optional[str] = Query(None, description="Zero-based page index"),
    category: Optional[str] = Query(None, description="Filter by category"),
    raw: bool = Query(False, description="Render the fragment without the page layout"),
    format_: str = Query("html", alias="format", pattern="^(html|stream|json)$"),
    accept: Optional[str] = Header(None),
):
    """Return one page of items as HTML, a stream of actions, or JSON."""
    settings = request.app.state.settings
    store = request.app.state.item_store
    strategy = request.app.state.strategy

    page_index = parse_page_index(page)
    cursor = PageCursor(store.fetcher(category), settings.pagination.page_size)
    result = cursor.fetch_page(page_index)
    locator = PageLocator.from_request(request)

    if format_ == "json":
        next_url = None
        if result.has_next:
            next_url = locator.url_for(result.next_page_index, extra={"format": "json"})
        return PageResponse(
            items=[ItemResponse(**vars(item)) for item in result.items],
            page=result.page_index,
            page_size=result.page_size,
            next_page=result.next_page_index,
            next_url=next_url,
        )

    mode = resolve_request_mode(raw, format_, accept, settings.delivery.stream_media_type)
    instruction = strategy.render(result, mode, locator)

    logger.info(
        "GET /items page=%d mode=%s delivery=%s rows=%d trigger=%s",
        page_index, mode.value, instruction.mode.value, len(result.items), instruction.has_trigger,
    )
    return HTMLResponse(content=instruction.body_fragment, media_type=instruction.media_type)
