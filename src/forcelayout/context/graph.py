"""Diagram model: node/link collections backed by networkx graphs.

This module owns the canonical diagram data structure handed to layout
contexts. Nodes are stored in a MultiDiGraph (insertion order is layout
order) with links mirrored as keyed edges; containment is a separate
DiGraph of container → child edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from forcelayout.types import HAlign, Point, Rect


@dataclass
class NodeData:
    id: str
    content_bounds: Rect
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    label_bounds: Rect | None = None
    container_id: str | None = None
    group: str | None = None
    label_position: Point | None = None
    label_halign: HAlign | None = None


@dataclass
class LinkData:
    id: str
    start_id: str
    end_id: str
    start_connector_offset: float | None = None
    end_connector_offset: float | None = None
    label_bounds: Rect | None = None
    points: list[float] = field(default_factory=list)
    label_position: Point | None = None
    label_halign: HAlign | None = None


class Diagram:
    """An ordered set of nodes and links plus their grouping hierarchy.

    Links whose endpoints both exist are mirrored into ``digraph`` as edges
    keyed by link id. Links with a dangling end stay in the link list only.
    """

    def __init__(self, layout_attributes: dict[str, object] | None = None) -> None:
        self.digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        self.containment: nx.DiGraph = nx.DiGraph()
        self.layout_attributes: dict[str, object] = dict(layout_attributes or {})
        self._links: list[LinkData] = []
        self._link_ids: set[str] = set()
        # missing endpoint id -> links waiting for that node
        self._pending: dict[str, list[LinkData]] = {}

    # ─── Mutation ────────────────────────────────────────────────────────────

    def add_node(self, node: NodeData) -> None:
        if node.id in self.digraph:
            raise ValueError(f"Duplicate node id '{node.id}'")
        if node.content_bounds.w < 0 or node.content_bounds.h < 0:
            raise ValueError(f"Node '{node.id}' has negative content size")
        self.digraph.add_node(node.id, data=node)
        if node.container_id is not None:
            self.containment.add_edge(node.container_id, node.id)
        for link in self._pending.pop(node.id, []):
            self._mirror(link)

    def add_link(self, link: LinkData) -> None:
        if link.id in self._link_ids:
            raise ValueError(f"Duplicate link id '{link.id}'")
        self._links.append(link)
        self._link_ids.add(link.id)
        self._mirror(link)

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with every link that touches it.

        Nodes directly inside the removed node move up to its own container.
        """
        node = self.node(node_id)
        if node is None:
            raise ValueError(f"Unknown node id '{node_id}'")
        for child in self.children(node_id):
            child.container_id = node.container_id
            if node.container_id is not None:
                self.containment.add_edge(node.container_id, child.id)
        self.digraph.remove_node(node_id)
        if node_id in self.containment:
            self.containment.remove_node(node_id)

        dropped = {lk.id for lk in self._links if node_id in (lk.start_id, lk.end_id)}
        self._links = [lk for lk in self._links if lk.id not in dropped]
        self._link_ids -= dropped
        for waiting_on, links in list(self._pending.items()):
            kept = [lk for lk in links if lk.id not in dropped]
            if kept:
                self._pending[waiting_on] = kept
            else:
                del self._pending[waiting_on]

    def _mirror(self, link: LinkData) -> None:
        """Add the link as a graph edge, or park it until its ends exist."""
        missing = [end for end in (link.start_id, link.end_id) if end not in self.digraph]
        if missing:
            self._pending.setdefault(missing[0], []).append(link)
            return
        self.digraph.add_edge(link.start_id, link.end_id, key=link.id, data=link)

    # ─── Queries ─────────────────────────────────────────────────────────────

    def node(self, node_id: str) -> NodeData | None:
        if node_id not in self.digraph:
            return None
        return self.digraph.nodes[node_id]["data"]

    def nodes(self) -> list[NodeData]:
        return [self.digraph.nodes[n]["data"] for n in self.digraph.nodes]

    def links(self) -> list[LinkData]:
        return list(self._links)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def link_count(self) -> int:
        return len(self._links)

    def children(self, container_id: str | None) -> list[NodeData]:
        """Nodes directly inside container_id (None → top level), in order."""
        return [n for n in self.nodes() if n.container_id == container_id]

    def descendants(self, container_id: str) -> set[str]:
        if container_id not in self.containment:
            return set()
        return nx.descendants(self.containment, container_id)

    def has_containment_cycle(self) -> bool:
        return not nx.is_directed_acyclic_graph(self.containment)

    def connected_components(self) -> list[set[str]]:
        """Weakly connected groups of node ids, ignoring link direction."""
        return [set(c) for c in nx.weakly_connected_components(self.digraph)]

    def degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.degree(node_id)
