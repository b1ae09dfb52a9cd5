"""
Page cursor: offset paging that detects the next page without a COUNT query.

The cursor asks the fetch capability for ``page_size + 1`` rows. If the
extra row comes back, a next page exists and the extra row is dropped.
Total counts and page counts are never known, and never needed: the UI
only ever asks "is there more?".

Page indices are zero-based.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from lazyscroll.pagination.errors import MalformedPageIndex

logger = logging.getLogger(__name__)

T = TypeVar("T")

# fetch(offset, limit) -> rows in a stable order
FetchFn = Callable[[int, int], Sequence[Any]]

# SQLite binds LIMIT and OFFSET as signed 64-bit integers
MAX_WINDOW_END = 2**63 - 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of results plus whether another window follows."""

    items: tuple[T, ...]
    page_index: int
    page_size: int
    next_page_index: Optional[int] = None

    @property
    def has_next(self) -> bool:
        return self.next_page_index is not None

    @property
    def is_first(self) -> bool:
        return self.page_index == 0

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def from_overfetch(
        cls,
        rows: Sequence[T],
        page_index: int,
        page_size: int,
    ) -> "Page[T]":
        """Interpret a batch fetched with ``limit=page_size + 1``."""
        if len(rows) > page_size:
            return cls(
                items=tuple(rows[:page_size]),
                page_index=page_index,
                page_size=page_size,
                next_page_index=page_index + 1,
            )
        return cls(
            items=tuple(rows),
            page_index=page_index,
            page_size=page_size,
            next_page_index=None,
        )


def _validate(page_index: Any, page_size: Any) -> None:
    # bool is an int subclass; True is not a page number
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise MalformedPageIndex(f"page_size must be a positive integer, got {page_size!r}")
    if isinstance(page_index, bool) or not isinstance(page_index, int) or page_index < 0:
        raise MalformedPageIndex(f"page_index must be an integer >= 0, got {page_index!r}")
    if page_index * page_size + page_size + 1 > MAX_WINDOW_END:
        raise MalformedPageIndex(
            f"page_index {page_index} with page_size {page_size} is out of range"
        )


class PageCursor(Generic[T]):
    """
    Turns a page request into a bounded query window.

    The fetch capability is supplied by the caller with any filtering and
    ordering already bound in. It must return rows in a deterministic
    order across calls, otherwise the next-page contract breaks.

    Exactly one fetch is issued per ``fetch_page`` call. Fetch errors are
    not retried or wrapped.
    """

    def __init__(self, fetch: FetchFn, page_size: int) -> None:
        _validate(0, page_size)
        self._fetch = fetch
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def window(self, page_index: int) -> tuple[int, int]:
        """Return the ``(offset, limit)`` pair the fetch will be called with."""
        _validate(page_index, self._page_size)
        return page_index * self._page_size, self._page_size + 1

    def fetch_page(self, page_index: int) -> Page[T]:
        """Fetch the page at ``page_index``."""
        offset, limit = self.window(page_index)
        rows = self._fetch(offset, limit)
        page = Page.from_overfetch(rows, page_index, self._page_size)

        logger.debug(
            "Fetched page %d (offset=%d, rows=%d, has_next=%s)",
            page_index, offset, len(rows), page.has_next,
        )
        return page


def fetch_page(fetch: FetchFn, page_index: int, page_size: int) -> Page:
    """One-shot form of ``PageCursor(fetch, page_size).fetch_page(page_index)``."""
    return PageCursor(fetch, page_size).fetch_page(page_index)


def parse_page_index(raw: Optional[str]) -> int:
    """
    Convert a request parameter into a page index.

    Missing or blank means the first page. Anything that is not a
    non-negative integer raises MalformedPageIndex.
    """
    if raw is None or str(raw).strip() == "":
        return 0
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise MalformedPageIndex(f"page must be an integer, got {raw!r}") from None
    if value < 0:
        raise MalformedPageIndex(f"page must be >= 0, got {value}")
    return value
