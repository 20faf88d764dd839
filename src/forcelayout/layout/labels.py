"""Node and link label placement."""

from __future__ import annotations

from forcelayout.context.base import LayoutContext
from forcelayout.types import HAlign, Point


def position_node_labels(context: LayoutContext) -> None:
    """Center each node label horizontally just below the node content."""
    for ni in range(context.node_count()):
        node = context.node_by_index(ni)
        if node.label_bounds is None:
            continue
        bounds = node.content_bounds.translated(node.position)
        node.label_position = Point(x=bounds.x + 0.5 * bounds.w, y=bounds.bottom)
        node.label_halign = HAlign.Center


def position_link_labels(context: LayoutContext) -> None:
    """Center each link label on the midpoint of the routed link.

    The label is raised by half its height so it straddles the link line.
    Unrouted links (fewer than 4 points) get no label position.
    """
    for li in range(context.link_count()):
        link = context.link_by_index(li)
        label_bounds = link.label_bounds
        if label_bounds is None:
            continue
        points = link.points
        if len(points) < 4:
            continue
        start_x, start_y = points[0], points[1]
        end_x, end_y = points[-2], points[-1]
        label_x = start_x + 0.5 * (end_x - start_x)
        label_y = start_y + 0.5 * (end_y - start_y - label_bounds.h)
        link.label_position = Point(x=label_x, y=label_y)
        link.label_halign = HAlign.Center
