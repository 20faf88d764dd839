"""Layout context protocol: what the engine needs from its host."""

from __future__ import annotations

from typing import Mapping, Protocol

from forcelayout.types import HAlign, Point, Rect


class ContextNode(Protocol):
    """A node as seen by the layout engine during one layout call."""

    id: str
    position: Point
    content_bounds: Rect
    label_bounds: Rect | None
    container_id: str | None
    label_position: Point | None
    label_halign: HAlign | None


class ContextLink(Protocol):
    """A link as seen by the layout engine during one layout call."""

    id: str
    start_id: str
    end_id: str
    start_connector_offset: float | None
    end_connector_offset: float | None
    points: list[float]
    label_bounds: Rect | None
    label_position: Point | None
    label_halign: HAlign | None


class LayoutContext(Protocol):
    """Protocol that every layout context adapter must implement.

    Indexed access covers the nodes of the level being laid out; id lookup
    may resolve any node, including ones nested below that level.
    """

    def node_count(self) -> int: ...

    def node_by_index(self, index: int) -> ContextNode: ...

    def node_by_id(self, node_id: str) -> ContextNode | None: ...

    def link_count(self) -> int: ...

    def link_by_index(self, index: int) -> ContextLink: ...

    def layout_attributes(self) -> Mapping[str, object] | None: ...
