"""Straight-line link routing clipped to node content boundaries."""

from __future__ import annotations

import logging
import math

from forcelayout.context.base import ContextLink, LayoutContext
from forcelayout.types import Point, Rect

logger = logging.getLogger(__name__)


def find_link_node_intersection(rect: Rect, start: Point, end: Point, conn_offset: float | None = None) -> Point:
    """Point where the line start → end leaves rect, used as the link end.

    start is the center of rect and end the center of the other node. The
    rectangle diagonals split the full circle into top/bottom/left/right
    sectors; the point is solved on the edge of the sector the line falls
    in, then pushed further along the line by conn_offset.
    """
    line_angle = math.atan2(end.y - start.y, end.x - start.x)
    corner_angle = math.atan2(rect.h, rect.w)  # diagonal from top left to bottom right
    bottom_right = corner_angle
    bottom_left = math.pi - bottom_right
    top_right = -bottom_right
    top_left = -bottom_left

    if top_left <= line_angle <= top_right:
        x = rect.x + rect.w * 0.5 + math.tan(math.pi / 2 - line_angle) * (-rect.h * 0.5)
        y = rect.y
    elif bottom_right <= line_angle <= bottom_left:
        x = rect.x + rect.w * 0.5 + math.tan(math.pi / 2 - line_angle) * (rect.h * 0.5)
        y = rect.bottom
    elif top_right <= line_angle <= bottom_right:
        x = rect.right
        y = rect.y + rect.h * 0.5 + math.tan(line_angle) * (rect.w * 0.5)
    else:
        x = rect.x
        y = rect.y + rect.h * 0.5 + math.tan(line_angle) * (-rect.w * 0.5)

    if conn_offset:
        x += math.cos(line_angle) * conn_offset
        y += math.sin(line_angle) * conn_offset
    return Point(x=x, y=y)


def link_endpoints(context: LayoutContext, link: ContextLink) -> list[float] | None:
    """[startX, startY, endX, endY] for link, or None if an end node is missing."""
    n1 = context.node_by_id(link.start_id)
    n2 = context.node_by_id(link.end_id)
    if n1 is None or n2 is None:
        return None

    b1 = n1.content_bounds.translated(n1.position)
    b2 = n2.content_bounds.translated(n2.position)
    c1 = b1.center()
    c2 = b2.center()

    start = find_link_node_intersection(b1, c1, c2, link.start_connector_offset)
    end = find_link_node_intersection(b2, c2, c1, link.end_connector_offset)
    return [start.x, start.y, end.x, end.y]


def route_links(context: LayoutContext) -> None:
    for li in range(context.link_count()):
        link = context.link_by_index(li)
        points = link_endpoints(context, link)
        if points is None:
            logger.debug("link %s references a missing node, not routed", link.id)
            continue
        link.points = points
