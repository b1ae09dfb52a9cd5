"""Incremental delivery of pages: chained frames or append/replace streams."""

from lazyscroll.delivery.locator import PageLocator
from lazyscroll.delivery.models import (
    DeliveryInstruction,
    DeliveryMode,
    RequestMode,
    StreamAction,
    Trigger,
)
from lazyscroll.delivery.render import HtmlRenderer
from lazyscroll.delivery.strategies import (
    AppendDeltaStrategy,
    FullFrameStrategy,
    IncrementalDeliveryStrategy,
    build_strategy,
)

__all__ = [
    "PageLocator",
    "DeliveryInstruction",
    "DeliveryMode",
    "RequestMode",
    "StreamAction",
    "Trigger",
    "HtmlRenderer",
    "AppendDeltaStrategy",
    "FullFrameStrategy",
    "IncrementalDeliveryStrategy",
    "build_strategy",
]
