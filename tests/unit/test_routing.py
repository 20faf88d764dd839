"""Tests for layout/routing.py: boundary intersection and link endpoints."""

from __future__ import annotations

import math

import pytest

from forcelayout.context import Diagram, DiagramContext, LinkData, NodeData
from forcelayout.layout.routing import find_link_node_intersection, link_endpoints, route_links
from forcelayout.types import Point, Rect

TOL = 1e-9

# ─── Helpers ──────────────────────────────────────────────────────────────────


def on_boundary(rect: Rect, p: Point, tol: float = TOL) -> bool:
    """True if p lies on the outline of rect."""
    inside_x = rect.x - tol <= p.x <= rect.right + tol
    inside_y = rect.y - tol <= p.y <= rect.bottom + tol
    on_vertical = (abs(p.x - rect.x) < tol or abs(p.x - rect.right) < tol) and inside_y
    on_horizontal = (abs(p.y - rect.y) < tol or abs(p.y - rect.bottom) < tol) and inside_x
    return on_vertical or on_horizontal


def make_diagram(*nodes: NodeData, links: tuple[LinkData, ...] = ()) -> Diagram:
    diagram = Diagram()
    for node in nodes:
        diagram.add_node(node)
    for link in links:
        diagram.add_link(link)
    return diagram


def square(node_id: str, x: float, y: float, size: float = 10.0) -> NodeData:
    return NodeData(id=node_id, content_bounds=Rect(0, 0, size, size), position=Point(x, y))


# ─── Intersection Tests ───────────────────────────────────────────────────────


class TestFindLinkNodeIntersection:
    RECT = Rect(0, 0, 10, 10)
    CENTER = Point(5, 5)

    def test_right_side(self):
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(105, 5))
        assert p.x == pytest.approx(10)
        assert p.y == pytest.approx(5)

    def test_left_side(self):
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(-100, 5))
        assert p.x == pytest.approx(0)
        assert p.y == pytest.approx(5)

    def test_top_side(self):
        """Negative y is up: a target straight above exits through rect.y."""
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(5, -100))
        assert p.x == pytest.approx(5)
        assert p.y == pytest.approx(0)

    def test_bottom_side(self):
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(5, 100))
        assert p.x == pytest.approx(5)
        assert p.y == pytest.approx(10)

    def test_diagonal_hits_corner(self):
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(105, 105))
        assert p.x == pytest.approx(10)
        assert p.y == pytest.approx(10)

    def test_connector_offset_extends_along_line(self):
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(105, 5), conn_offset=3)
        assert p.x == pytest.approx(13)
        assert p.y == pytest.approx(5)

    def test_zero_offset_is_ignored(self):
        p = find_link_node_intersection(self.RECT, self.CENTER, Point(5, 100), conn_offset=0)
        assert p.y == pytest.approx(10)

    def test_coincident_centers_pick_right_edge(self):
        """atan2(0, 0) is 0, so coincident nodes connect on the right edge."""
        p = find_link_node_intersection(self.RECT, self.CENTER, self.CENTER)
        assert p.x == pytest.approx(10)
        assert p.y == pytest.approx(5)

    def test_zero_size_rect_is_finite(self):
        rect = Rect(3, 4, 0, 0)
        p = find_link_node_intersection(rect, Point(3, 4), Point(3, 4))
        assert math.isfinite(p.x) and math.isfinite(p.y)
        assert p.x == pytest.approx(3)
        assert p.y == pytest.approx(4)

    @pytest.mark.parametrize("degrees", list(range(0, 360, 7)))
    def test_point_on_boundary_all_directions(self, degrees: int):
        """For a wide rectangle, every direction exits on the outline along the ray."""
        rect = Rect(2, 3, 40, 10)
        center = rect.center()
        angle = math.radians(degrees)
        target = Point(center.x + 100 * math.cos(angle), center.y + 100 * math.sin(angle))
        p = find_link_node_intersection(rect, center, target)
        assert on_boundary(rect, p), f"{p} not on {rect} at {degrees}°"
        cross = (p.x - center.x) * (target.y - center.y) - (p.y - center.y) * (target.x - center.x)
        assert abs(cross) < 1e-6


# ─── Link Endpoint Tests ──────────────────────────────────────────────────────


class TestLinkEndpoints:
    def test_horizontal_pair(self):
        a = square("A", 0, 0)
        b = square("B", 100, 0)
        link = LinkData(id="L", start_id="A", end_id="B")
        ctx = DiagramContext(make_diagram(a, b, links=(link,)))
        assert link_endpoints(ctx, link) == pytest.approx([10, 5, 100, 5])

    def test_connector_offsets_per_end(self):
        a = square("A", 0, 0)
        b = square("B", 100, 0)
        link = LinkData(id="L", start_id="A", end_id="B", start_connector_offset=2, end_connector_offset=4)
        ctx = DiagramContext(make_diagram(a, b, links=(link,)))
        assert link_endpoints(ctx, link) == pytest.approx([12, 5, 96, 5])

    def test_content_bounds_offset_from_position(self):
        a = NodeData(id="A", content_bounds=Rect(-5, -5, 10, 10), position=Point(0, 0))
        b = NodeData(id="B", content_bounds=Rect(-5, -5, 10, 10), position=Point(0, 50))
        link = LinkData(id="L", start_id="A", end_id="B")
        ctx = DiagramContext(make_diagram(a, b, links=(link,)))
        assert link_endpoints(ctx, link) == pytest.approx([0, 5, 0, 45])

    def test_missing_node_returns_none(self):
        a = square("A", 0, 0)
        link = LinkData(id="L", start_id="A", end_id="Z")
        ctx = DiagramContext(make_diagram(a, links=(link,)))
        assert link_endpoints(ctx, link) is None

    def test_nested_endpoint_uses_its_own_node(self):
        """The router resolves ids directly, not through the container."""
        group = NodeData(id="G", content_bounds=Rect(0, 0, 50, 50), position=Point(0, 0))
        inner = NodeData(id="I", content_bounds=Rect(0, 0, 10, 10), position=Point(200, 0), container_id="G")
        a = square("A", 400, 0)
        link = LinkData(id="L", start_id="A", end_id="I")
        ctx = DiagramContext(make_diagram(group, inner, a, links=(link,)))
        points = link_endpoints(ctx, link)
        assert points[2] == pytest.approx(210)


class TestRouteLinks:
    def test_writes_points_for_resolvable_links_only(self):
        a = square("A", 0, 0)
        b = square("B", 0, 100)
        good = LinkData(id="L1", start_id="A", end_id="B")
        dangling = LinkData(id="L2", start_id="A", end_id="nowhere")
        ctx = DiagramContext(make_diagram(a, b, links=(good, dangling)))
        route_links(ctx)
        assert good.points == pytest.approx([5, 10, 5, 100])
        assert dangling.points == []

    def test_endpoints_on_each_boundary(self):
        a = NodeData(id="A", content_bounds=Rect(0, 0, 30, 12), position=Point(-40, 17))
        b = NodeData(id="B", content_bounds=Rect(0, 0, 8, 20), position=Point(25, -33))
        link = LinkData(id="L", start_id="A", end_id="B")
        ctx = DiagramContext(make_diagram(a, b, links=(link,)))
        route_links(ctx)
        sx, sy, ex, ey = link.points
        assert on_boundary(a.content_bounds.translated(a.position), Point(sx, sy))
        assert on_boundary(b.content_bounds.translated(b.position), Point(ex, ey))
