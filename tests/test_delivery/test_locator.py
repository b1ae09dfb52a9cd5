"""Tests for next-page URL construction."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

import pytest

from lazyscroll.delivery.locator import PageLocator
from lazyscroll.delivery.models import RequestMode
from lazyscroll.pagination.errors import ConfigurationError


def _query(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query)


class TestPageLocator:
    def test_full_page_url(self):
        locator = PageLocator("/items")
        assert locator.url_for(2) == "/items?page=2"

    def test_raw_flavor(self):
        url = PageLocator("/items").url_for(1, RequestMode.RAW)
        assert _query(url) == [("page", "1"), ("raw", "1")]

    def test_stream_flavor(self):
        url = PageLocator("/items").url_for(1, "stream")
        assert _query(url) == [("page", "1"), ("format", "stream")]

    def test_keeps_other_params_drops_paging_ones(self):
        locator = PageLocator(
            "/items",
            [("category", "tools"), ("page", "4"), ("raw", "1"), ("format", "stream"), ("q", "a b")],
        )
        url = locator.url_for(5, RequestMode.RAW)
        assert urlsplit(url).path == "/items"
        assert _query(url) == [("category", "tools"), ("q", "a b"), ("page", "5"), ("raw", "1")]

    def test_accepts_mapping(self):
        locator = PageLocator("/items", {"category": "books", "page": "0"})
        assert locator.params == [("category", "books")]

    def test_extra_params(self):
        url = PageLocator("/items").url_for(1, extra={"format": "json"})
        assert _query(url) == [("page", "1"), ("format", "json")]

    def test_callable_as_locate(self):
        locator = PageLocator("/items")
        assert locator(3, RequestMode.FULL) == locator.url_for(3)

    @pytest.mark.parametrize("base_path", ["", None])
    def test_missing_base_path(self, base_path):
        with pytest.raises(ConfigurationError):
            PageLocator(base_path)
