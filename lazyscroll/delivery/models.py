"""
Value objects produced by the delivery strategies.

Every instance is built fresh for one request and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from lazyscroll.pagination.errors import UnsupportedRequestMode


class RequestMode(str, Enum):
    """The flavor of request a page is being rendered for."""

    FULL = "full"  # normal navigation, wrapped in the page layout
    RAW = "raw"  # fragment only, used when a lazy frame activates
    STREAM = "stream"  # append/replace actions against an existing page


class DeliveryMode(str, Enum):
    FULL_FRAME = "full_frame"
    APPEND_DELTA = "append_delta"


def coerce_request_mode(value: Union[RequestMode, str]) -> RequestMode:
    """Accept a RequestMode or its string value."""
    if isinstance(value, RequestMode):
        return value
    try:
        return RequestMode(str(value).lower())
    except ValueError:
        raise UnsupportedRequestMode(f"Unknown request mode: {value!r}") from None


@dataclass(frozen=True)
class Trigger:
    """A region that fetches the next page once activated."""

    # DOM id of the element replaced when the response arrives
    target: str
    src: str
    activation: str = "lazy"


@dataclass(frozen=True)
class StreamAction:
    """One append/replace/remove instruction for the client."""

    action: str
    target: str
    content: str = ""


@dataclass(frozen=True)
class DeliveryInstruction:
    """How a page should be spliced into the client's document."""

    mode: DeliveryMode
    body_fragment: str
    trigger: Optional[Trigger] = None
    actions: tuple[StreamAction, ...] = ()
    media_type: str = "text/html"

    @property
    def has_trigger(self) -> bool:
        return self.trigger is not None
