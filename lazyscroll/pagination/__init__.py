"""Over-fetch page cursor: next-page detection without a COUNT query."""

from lazyscroll.pagination.cursor import Page, PageCursor, fetch_page, parse_page_index
from lazyscroll.pagination.errors import (
    ConfigurationError,
    LazyScrollError,
    MalformedPageIndex,
    UnsupportedRequestMode,
)

__all__ = [
    "Page",
    "PageCursor",
    "fetch_page",
    "parse_page_index",
    "LazyScrollError",
    "MalformedPageIndex",
    "ConfigurationError",
    "UnsupportedRequestMode",
]
