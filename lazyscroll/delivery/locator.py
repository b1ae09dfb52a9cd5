"""Next-page URL construction."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Union
from urllib.parse import urlencode

from lazyscroll.delivery.models import RequestMode, coerce_request_mode
from lazyscroll.pagination.errors import ConfigurationError

# locate(page_index, request_mode) -> URL of that page in that flavor
Locate = Callable[[int, RequestMode], str]

# Owned by the paging machinery; everything else in the query string is kept
RESERVED_PARAMS = frozenset({"page", "raw", "format"})

QueryParams = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def _pairs(params: QueryParams) -> list[tuple[str, str]]:
    if hasattr(params, "multi_items"):
        items = params.multi_items()
    elif hasattr(params, "items"):
        items = params.items()
    else:
        items = params
    return [(str(k), str(v)) for k, v in items if k not in RESERVED_PARAMS]


class PageLocator:
    """
    Builds the address of another page of the current listing.

    The current request's filters (everything except page/raw/format) are
    carried over verbatim so the next page continues the same query.
    """

    def __init__(self, base_path: str, params: QueryParams = ()) -> None:
        if not base_path:
            raise ConfigurationError("PageLocator needs a base path to build page URLs")
        self._base_path = base_path
        self._params = _pairs(params)

    @classmethod
    def from_request(cls, request) -> "PageLocator":
        """Build a locator from a Starlette/FastAPI request."""
        return cls(request.url.path, request.query_params)

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def params(self) -> list[tuple[str, str]]:
        return list(self._params)

    def url_for(
        self,
        page_index: int,
        mode: Union[RequestMode, str] = RequestMode.FULL,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """URL of ``page_index`` in the given flavor; ``extra`` is appended last."""
        mode = coerce_request_mode(mode)
        query = list(self._params)
        query.append(("page", str(page_index)))
        if mode is RequestMode.RAW:
            query.append(("raw", "1"))
        elif mode is RequestMode.STREAM:
            query.append(("format", "stream"))
        if extra:
            query.extend((str(k), str(v)) for k, v in extra.items())
        return f"{self._base_path}?{urlencode(query)}"

    __call__ = url_for
