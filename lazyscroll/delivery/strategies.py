"""
Incremental delivery strategies.

Two ways of growing a listing as the user scrolls:

FullFrameStrategy
    Every response is a self-contained frame holding one page of rows and,
    when more rows exist, a nested lazy frame for the next page. Loading
    that frame replaces it in place, so the pages form a chain of frames
    nested inside each other. Simple, but each frame wraps its own rows,
    so it cannot live inside a strict table body.

AppendDeltaStrategy
    The first response establishes a named container and a named
    placeholder. Every later response is a pair of stream actions: append
    the new rows to the container, then replace the placeholder with one
    pointing at the following page (or remove it at the end). Rows already
    on the page are never re-rendered.

Strategies are picked by name at setup time with ``build_strategy``.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Optional, Protocol, Union

from lazyscroll.config.settings import DeliverySettings
from lazyscroll.delivery.locator import Locate
from lazyscroll.delivery.models import (
    DeliveryInstruction,
    DeliveryMode,
    RequestMode,
    StreamAction,
    Trigger,
    coerce_request_mode,
)
from lazyscroll.delivery.render import HtmlRenderer, Renderer, RowTemplate
from lazyscroll.pagination.cursor import Page
from lazyscroll.pagination.errors import ConfigurationError, UnsupportedRequestMode

logger = logging.getLogger(__name__)


class IncrementalDeliveryStrategy(Protocol):
    """Produces a DeliveryInstruction from a Page and a request flavor."""

    name: ClassVar[str]

    def render(
        self,
        page: Page,
        request_mode: Union[RequestMode, str],
        locate: Optional[Locate] = None,
    ) -> DeliveryInstruction: ...


def _next_page_url(page: Page, locate: Optional[Locate], mode: RequestMode) -> str:
    """
    URL of the page after ``page``.

    A page with a successor must always get a working trigger. Anything that
    prevents building one is a ConfigurationError.
    """
    if locate is None:
        raise ConfigurationError(
            f"Page {page.page_index} has a next page but no locator was supplied"
        )
    try:
        url = locate(page.next_page_index, mode)
    except ConfigurationError:
        raise
    except (LookupError, ValueError) as exc:
        raise ConfigurationError(
            f"Could not build URL for page {page.next_page_index}: {exc}"
        ) from exc
    if not url:
        raise ConfigurationError(f"Locator returned no URL for page {page.next_page_index}")
    return url


class FullFrameStrategy:
    """Chained, self-contained frames. Supports FULL and RAW requests."""

    name: ClassVar[str] = "full_frame"

    def __init__(
        self,
        renderer: Renderer,
        frame_prefix: str = "items_page_",
        activation: str = "lazy",
    ) -> None:
        if getattr(renderer, "tabular", False):
            raise ConfigurationError(
                "Full-frame delivery nests frames around rows; use a non-tabular renderer"
            )
        self._renderer = renderer
        self._frame_prefix = frame_prefix
        self._activation = activation

    def frame_id(self, page_index: int) -> str:
        return f"{self._frame_prefix}{page_index}"

    def render(
        self,
        page: Page,
        request_mode: Union[RequestMode, str],
        locate: Optional[Locate] = None,
    ) -> DeliveryInstruction:
        mode = coerce_request_mode(request_mode)
        if mode is RequestMode.STREAM:
            raise UnsupportedRequestMode("Full-frame delivery does not serve stream requests")

        parts = [self._renderer.render_items(page.items)]
        trigger = None
        if page.has_next:
            trigger = Trigger(
                target=self.frame_id(page.next_page_index),
                src=_next_page_url(page, locate, RequestMode.RAW),
                activation=self._activation,
            )
            parts.append(self._renderer.lazy_frame(trigger))

        body = self._renderer.frame(self.frame_id(page.page_index), "".join(parts))
        if mode is RequestMode.FULL:
            body = self._renderer.layout(body)

        logger.debug(
            "Full-frame delivery: page=%d mode=%s rows=%d trigger=%s",
            page.page_index, mode.value, len(page.items), trigger is not None,
        )
        return DeliveryInstruction(mode=DeliveryMode.FULL_FRAME, body_fragment=body, trigger=trigger)


class AppendDeltaStrategy:
    """Persistent container plus a swapped placeholder."""

    name: ClassVar[str] = "append_delta"

    def __init__(
        self,
        renderer: Renderer,
        container_id: str = "items",
        placeholder_id: str = "items_pagination",
        stream_media_type: str = "text/vnd.turbo-stream.html",
        activation: str = "lazy",
    ) -> None:
        if container_id == placeholder_id:
            raise ConfigurationError("Container and placeholder must have different ids")
        self._renderer = renderer
        self._container_id = container_id
        self._placeholder_id = placeholder_id
        self._stream_media_type = stream_media_type
        self._activation = activation

    @property
    def container_id(self) -> str:
        return self._container_id

    @property
    def placeholder_id(self) -> str:
        return self._placeholder_id

    def render(
        self,
        page: Page,
        request_mode: Union[RequestMode, str],
        locate: Optional[Locate] = None,
    ) -> DeliveryInstruction:
        mode = coerce_request_mode(request_mode)

        trigger = None
        if page.has_next:
            trigger = Trigger(
                target=self._placeholder_id,
                src=_next_page_url(page, locate, RequestMode.STREAM),
                activation=self._activation,
            )
        rows = self._renderer.render_items(page.items)

        if mode is RequestMode.STREAM:
            actions = [StreamAction("append", self._container_id, rows)]
            if trigger is not None:
                placeholder = self._renderer.placeholder(self._placeholder_id, trigger)
                actions.append(StreamAction("replace", self._placeholder_id, placeholder))
            else:
                actions.append(StreamAction("remove", self._placeholder_id))
            body = "\n".join(self._renderer.stream_action(a) for a in actions)

            logger.debug(
                "Append-delta stream: page=%d rows=%d actions=%s",
                page.page_index, len(page.items), [a.action for a in actions],
            )
            return DeliveryInstruction(
                mode=DeliveryMode.APPEND_DELTA,
                body_fragment=body,
                trigger=trigger,
                actions=tuple(actions),
                media_type=self._stream_media_type,
            )

        body = self._renderer.container(self._container_id, rows) + self._renderer.placeholder(
            self._placeholder_id, trigger
        )
        if mode is RequestMode.FULL:
            body = self._renderer.layout(body)

        logger.debug(
            "Append-delta initial load: page=%d mode=%s rows=%d trigger=%s",
            page.page_index, mode.value, len(page.items), trigger is not None,
        )
        return DeliveryInstruction(mode=DeliveryMode.APPEND_DELTA, body_fragment=body, trigger=trigger)


STRATEGY_NAMES = (FullFrameStrategy.name, AppendDeltaStrategy.name)


def build_strategy(
    settings: DeliverySettings,
    renderer: Optional[Renderer] = None,
    row_template: Optional[RowTemplate] = None,
) -> IncrementalDeliveryStrategy:
    """
    Create the strategy named by ``settings.strategy``.

    Without an explicit renderer, an HtmlRenderer suited to the strategy is
    used (div rows for full-frame, table rows for append-delta).
    """
    name = settings.strategy
    if name == FullFrameStrategy.name:
        renderer = renderer or HtmlRenderer(
            tabular=False, row_template=row_template, title=settings.page_title
        )
        strategy = FullFrameStrategy(
            renderer,
            frame_prefix=settings.frame_prefix,
            activation=settings.trigger_activation,
        )
    elif name == AppendDeltaStrategy.name:
        renderer = renderer or HtmlRenderer(
            tabular=True, row_template=row_template, title=settings.page_title
        )
        strategy = AppendDeltaStrategy(
            renderer,
            container_id=settings.container_id,
            placeholder_id=settings.placeholder_id,
            stream_media_type=settings.stream_media_type,
            activation=settings.trigger_activation,
        )
    else:
        raise ConfigurationError(
            f"Unknown delivery strategy {name!r}; expected one of {', '.join(STRATEGY_NAMES)}"
        )

    logger.info("Delivery strategy: %s", name)
    return strategy
