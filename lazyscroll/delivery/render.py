"""
Default HTML rendering for pages, lazy frames and stream actions.

The strategies only depend on the ``Renderer`` protocol; ``HtmlRenderer``
is the implementation the API uses. It emits Turbo-style markup:

    <turbo-frame id="..." src="..." loading="lazy">   lazy frame
    <turbo-stream action="append" target="...">       stream action

All record text is escaped.
"""

from __future__ import annotations

import dataclasses
import html
from typing import Any, Callable, Iterable, Optional, Protocol, Sequence

from lazyscroll.delivery.models import StreamAction, Trigger

RowTemplate = Callable[[Any], Sequence[Any]]


class Renderer(Protocol):
    """Rendering capability the delivery strategies call into."""

    tabular: bool

    def render_items(self, items: Iterable[Any]) -> str: ...

    def frame(self, frame_id: str, content: str) -> str: ...

    def lazy_frame(self, trigger: Trigger) -> str: ...

    def container(self, container_id: str, content: str) -> str: ...

    def placeholder(self, placeholder_id: str, trigger: Optional[Trigger]) -> str: ...

    def stream_action(self, action: StreamAction) -> str: ...

    def layout(self, body: str) -> str: ...


def default_row_template(item: Any) -> list[Any]:
    """One cell per field: dataclass fields, mapping values, or the item itself."""
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return [getattr(item, f.name) for f in dataclasses.fields(item)]
    if isinstance(item, dict):
        return list(item.values())
    return [item]


def _item_id(item: Any) -> Optional[Any]:
    if isinstance(item, dict):
        return item.get("id")
    return getattr(item, "id", None)


def _attr(value: Any) -> str:
    return html.escape(str(value), quote=True)


class HtmlRenderer:
    """
    Renders records as rows.

    With ``tabular=True`` rows are ``<tr>`` elements and the container is a
    ``<table>``. A table body cannot hold arbitrary wrappers, so chained
    frames (full-frame delivery) need ``tabular=False``, which renders rows
    as ``<div>`` elements instead.
    """

    def __init__(
        self,
        tabular: bool = True,
        row_template: Optional[RowTemplate] = None,
        title: str = "Items",
        item_id_prefix: str = "item_",
    ) -> None:
        self.tabular = tabular
        self._row_template = row_template or default_row_template
        self._title = title
        self._item_id_prefix = item_id_prefix

    # ----- Items -----

    def render_row(self, item: Any) -> str:
        cells = self._row_template(item)
        if self.tabular:
            row_tag, cell_tag = "tr", "td"
        else:
            row_tag, cell_tag = "div", "span"
        inner = "".join(
            f'<{cell_tag} class="cell">{html.escape(str(c))}</{cell_tag}>' for c in cells
        )
        item_id = _item_id(item)
        id_attr = f' id="{_attr(self._item_id_prefix)}{_attr(item_id)}"' if item_id is not None else ""
        return f'<{row_tag} class="row"{id_attr}>{inner}</{row_tag}>'

    def render_items(self, items: Iterable[Any]) -> str:
        return "".join(self.render_row(item) for item in items)

    # ----- Full-frame pieces -----

    def frame(self, frame_id: str, content: str) -> str:
        return f'<turbo-frame id="{_attr(frame_id)}">{content}</turbo-frame>'

    def lazy_frame(self, trigger: Trigger) -> str:
        return self._lazy_frame(trigger.target, trigger)

    def _lazy_frame(self, frame_id: str, trigger: Trigger) -> str:
        loading = "lazy" if trigger.activation == "lazy" else "eager"
        return (
            f'<turbo-frame id="{_attr(frame_id)}" src="{_attr(trigger.src)}" '
            f'loading="{loading}"></turbo-frame>'
        )

    # ----- Append-delta pieces -----

    def container(self, container_id: str, content: str) -> str:
        if self.tabular:
            return f'<table class="items"><tbody id="{_attr(container_id)}">{content}</tbody></table>'
        return f'<div class="items" id="{_attr(container_id)}">{content}</div>'

    def placeholder(self, placeholder_id: str, trigger: Optional[Trigger]) -> str:
        """Lazy frame that fetches the next stream once scrolled into view; empty at the end."""
        if trigger is None:
            return f'<turbo-frame id="{_attr(placeholder_id)}"></turbo-frame>'
        return self._lazy_frame(placeholder_id, trigger)

    def stream_action(self, action: StreamAction) -> str:
        if action.action == "remove":
            return f'<turbo-stream action="remove" target="{_attr(action.target)}"></turbo-stream>'
        return (
            f'<turbo-stream action="{_attr(action.action)}" target="{_attr(action.target)}">'
            f"<template>{action.content}</template></turbo-stream>"
        )

    # ----- Layout -----

    def layout(self, body: str) -> str:
        title = html.escape(self._title)
        return (
            "<!DOCTYPE html>"
            '<html><head><meta charset="utf-8">'
            f"<title>{title}</title></head>"
            f"<body><h1>{title}</h1>{body}</body></html>"
        )
