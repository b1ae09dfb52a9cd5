"""Tests for the over-fetch page cursor."""

from __future__ import annotations

import pytest

from lazyscroll.pagination.cursor import (
    MAX_WINDOW_END,
    Page,
    PageCursor,
    fetch_page,
    parse_page_index,
)
from lazyscroll.pagination.errors import MalformedPageIndex


def _walk(cursor: PageCursor) -> list[Page]:
    """Follow the next_page_index chain from page 0 to the end."""
    pages = [cursor.fetch_page(0)]
    while pages[-1].has_next:
        pages.append(cursor.fetch_page(pages[-1].next_page_index))
    return pages


class TestPageFromOverfetch:
    def test_extra_row_means_next_page(self):
        page = Page.from_overfetch(list(range(11)), page_index=0, page_size=10)
        assert page.items == tuple(range(10))
        assert page.next_page_index == 1
        assert page.has_next is True

    def test_short_batch_is_last_page(self):
        page = Page.from_overfetch([1, 2, 3], page_index=4, page_size=10)
        assert page.items == (1, 2, 3)
        assert page.next_page_index is None
        assert page.has_next is False

    def test_exact_batch_is_last_page(self):
        page = Page.from_overfetch(list(range(10)), page_index=0, page_size=10)
        assert len(page) == 10
        assert page.next_page_index is None

    def test_page_is_immutable(self):
        page = Page.from_overfetch([1], page_index=0, page_size=10)
        with pytest.raises(AttributeError):
            page.next_page_index = 1

    def test_offset_and_first(self):
        page = Page.from_overfetch([], page_index=3, page_size=7)
        assert page.offset == 21
        assert page.is_first is False


class TestPageCursor:
    def test_twenty_five_rows_in_pages_of_ten(self, list_fetch):
        fetch = list_fetch(range(25))
        cursor = PageCursor(fetch, page_size=10)

        p0 = cursor.fetch_page(0)
        assert p0.items == tuple(range(10))
        assert p0.next_page_index == 1

        p1 = cursor.fetch_page(1)
        assert p1.items == tuple(range(10, 20))
        assert p1.next_page_index == 2

        p2 = cursor.fetch_page(2)
        assert p2.items == tuple(range(20, 25))
        assert p2.next_page_index is None

        assert fetch.calls == [(0, 11), (10, 11), (20, 11)]

    @pytest.mark.parametrize("n,page_size", [(0, 3), (1, 1), (7, 3), (9, 3), (10, 1), (30, 7)])
    def test_chain_reproduces_dataset(self, list_fetch, n, page_size):
        pages = _walk(PageCursor(list_fetch(range(n)), page_size=page_size))

        collected = [x for p in pages for x in p.items]
        assert collected == list(range(n))
        assert pages[-1].next_page_index is None
        assert all(p.next_page_index == p.page_index + 1 for p in pages[:-1])

    def test_exact_multiple_has_no_phantom_page(self, list_fetch):
        pages = _walk(PageCursor(list_fetch(range(20)), page_size=10))
        assert len(pages) == 2
        assert len(pages[-1].items) == 10
        assert pages[-1].next_page_index is None

    def test_one_fetch_per_call(self, list_fetch):
        fetch = list_fetch(range(100))
        cursor = PageCursor(fetch, page_size=10)
        cursor.fetch_page(3)
        assert fetch.calls == [(30, 11)]

    def test_page_past_the_end_is_empty(self, list_fetch):
        page = PageCursor(list_fetch(range(5)), page_size=10).fetch_page(8)
        assert page.items == ()
        assert page.next_page_index is None

    def test_window(self, list_fetch):
        cursor = PageCursor(list_fetch([]), page_size=25)
        assert cursor.window(2) == (50, 26)

    def test_fetch_errors_propagate_unchanged(self):
        boom = RuntimeError("connection reset")

        def failing_fetch(offset, limit):
            raise boom

        with pytest.raises(RuntimeError) as exc_info:
            PageCursor(failing_fetch, page_size=10).fetch_page(0)
        assert exc_info.value is boom

    def test_module_level_fetch_page(self, list_fetch):
        page = fetch_page(list_fetch(range(3)), page_index=0, page_size=2)
        assert page.items == (0, 1)
        assert page.next_page_index == 1


class TestValidation:
    @pytest.mark.parametrize("page_size", [0, -1])
    def test_bad_page_size_rejected_before_fetch(self, list_fetch, page_size):
        fetch = list_fetch(range(10))
        with pytest.raises(MalformedPageIndex):
            fetch_page(fetch, page_index=0, page_size=page_size)
        assert fetch.calls == []

    def test_bad_page_size_in_constructor(self, list_fetch):
        with pytest.raises(MalformedPageIndex):
            PageCursor(list_fetch([]), page_size=0)

    @pytest.mark.parametrize("page_index", [-1, -10, True, 1.5])
    def test_bad_page_index_rejected_before_fetch(self, list_fetch, page_index):
        fetch = list_fetch(range(10))
        with pytest.raises(MalformedPageIndex):
            PageCursor(fetch, page_size=5).fetch_page(page_index)
        assert fetch.calls == []

    def test_malformed_index_is_a_value_error(self, list_fetch):
        with pytest.raises(ValueError):
            PageCursor(list_fetch([]), page_size=5).fetch_page(-1)

    @pytest.mark.parametrize("page_index", [10**18, 2**62, 2**63])
    def test_window_past_sql_integer_range_rejected(self, list_fetch, page_index):
        fetch = list_fetch(range(10))
        with pytest.raises(MalformedPageIndex):
            PageCursor(fetch, page_size=25).fetch_page(page_index)
        assert fetch.calls == []

    def test_largest_window_in_range_is_accepted(self, list_fetch):
        page_index = (MAX_WINDOW_END - 11) // 10
        offset, limit = PageCursor(list_fetch([]), page_size=10).window(page_index)
        assert offset + limit <= MAX_WINDOW_END


class TestParsePageIndex:
    @pytest.mark.parametrize("raw,expected", [(None, 0), ("", 0), ("  ", 0), ("0", 0), ("12", 12), (" 3 ", 3)])
    def test_valid(self, raw, expected):
        assert parse_page_index(raw) == expected

    @pytest.mark.parametrize("raw", ["-1", "abc", "1.5"])
    def test_invalid(self, raw):
        with pytest.raises(MalformedPageIndex):
            parse_page_index(raw)
