"""DiagramContext: exposes one containment level of a Diagram to the engine."""

from __future__ import annotations

from forcelayout.context.graph import Diagram, LinkData, NodeData


class DiagramContext:
    """LayoutContext over a Diagram for the duration of one layout call.

    The indexed node list is the snapshot of nodes directly inside
    ``container_id`` (None is the top level). ``node_by_id`` resolves any
    node of the diagram so nested link endpoints can be walked up to their
    container. Top-level contexts see every link; nested contexts see the
    links whose endpoints both sit below the container.
    """

    def __init__(self, diagram: Diagram, container_id: str | None = None) -> None:
        self.diagram = diagram
        self.container_id = container_id
        self._nodes: list[NodeData] = diagram.children(container_id)
        if container_id is None:
            self._links: list[LinkData] = diagram.links()
        else:
            inside = diagram.descendants(container_id)
            self._links = [lk for lk in diagram.links() if lk.start_id in inside and lk.end_id in inside]

    def node_count(self) -> int:
        return len(self._nodes)

    def node_by_index(self, index: int) -> NodeData:
        return self._nodes[index]

    def node_by_id(self, node_id: str) -> NodeData | None:
        return self.diagram.node(node_id)

    def link_count(self) -> int:
        return len(self._links)

    def link_by_index(self, index: int) -> LinkData:
        return self._links[index]

    def layout_attributes(self) -> dict[str, object] | None:
        return self.diagram.layout_attributes or None
