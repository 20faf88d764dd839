"""JSON diagram loading and layout result dumping.

Input follows the node/link description used by the diagram demo data
(``{"nodes": [{"id", "group", "size"}], "links": [{"id", "start", "end"}]}``)
extended with explicit bounds, containers, labels and connector offsets.
"""

from __future__ import annotations

import json
import math

from forcelayout.context.graph import Diagram, LinkData, NodeData
from forcelayout.types import HAlign, Point, Rect


def parse_json(src: str) -> Diagram:
    """Parse a JSON diagram description into a Diagram.

    Raises:
        ValueError: If the text is not valid JSON or describes an invalid diagram.
    """
    try:
        data = json.loads(src)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e}") from e
    return load_diagram(data)


def load_diagram(data: object) -> Diagram:
    """Build a Diagram from already-decoded JSON data."""
    if not isinstance(data, dict):
        raise ValueError("diagram must be a JSON object")

    attrs = data.get("layoutAttributes") or {}
    if not isinstance(attrs, dict):
        raise ValueError("'layoutAttributes' must be an object")
    diagram = Diagram(layout_attributes=attrs)

    for i, raw in enumerate(_as_list(data, "nodes")):
        diagram.add_node(_node_from_dict(raw, i))
    for i, raw in enumerate(_as_list(data, "links")):
        diagram.add_link(_link_from_dict(raw, i))

    for node in diagram.nodes():
        if node.container_id is not None and diagram.node(node.container_id) is None:
            raise ValueError(f"node '{node.id}': unknown container '{node.container_id}'")
    if diagram.has_containment_cycle():
        raise ValueError("node containers form a cycle")
    return diagram


def dump_layout(diagram: Diagram) -> dict[str, object]:
    """Collect positions, link points and label placements into plain data."""
    nodes: list[dict[str, object]] = []
    for node in diagram.nodes():
        entry: dict[str, object] = {"id": node.id, "x": node.position.x, "y": node.position.y}
        if node.label_position is not None:
            entry["label"] = _label_entry(node.label_position, node.label_halign)
        nodes.append(entry)

    links: list[dict[str, object]] = []
    for link in diagram.links():
        entry = {"id": link.id, "points": list(link.points)}
        if link.label_position is not None:
            entry["label"] = _label_entry(link.label_position, link.label_halign)
        links.append(entry)

    return {"nodes": nodes, "links": links}


def _label_entry(position: Point, halign: HAlign | None) -> dict[str, object]:
    return {"x": position.x, "y": position.y, "halign": halign.value if halign else None}


def _as_list(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list")
    return value


def _require_id(raw: object, kind: str, index: int) -> str:
    if not isinstance(raw, dict):
        raise ValueError(f"{kind} #{index} must be an object")
    item_id = raw.get("id")
    if item_id is None or item_id == "":
        raise ValueError(f"{kind} #{index} has no id")
    return str(item_id)


def _number(value: object, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where}: expected a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"{where}: expected a finite number, got {value!r}")
    return result


def _optional_number(raw: dict, key: str, where: str) -> float | None:
    if raw.get(key) is None:
        return None
    return _number(raw[key], f"{where} {key}")


def _rect(value: object, where: str) -> Rect:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected an object with w/h")
    return Rect(
        x=_number(value.get("x", 0), f"{where} x"),
        y=_number(value.get("y", 0), f"{where} y"),
        w=_number(value.get("w", 0), f"{where} w"),
        h=_number(value.get("h", 0), f"{where} h"),
    )


def _node_from_dict(raw: object, index: int) -> NodeData:
    node_id = _require_id(raw, "node", index)
    where = f"node '{node_id}'"

    if "bounds" in raw:
        bounds = _rect(raw["bounds"], f"{where} bounds")
    else:
        size = _optional_number(raw, "size", where) or 0.0
        width = _optional_number(raw, "width", where)
        height = _optional_number(raw, "height", where)
        bounds = Rect(
            x=0.0,
            y=0.0,
            w=width if width is not None else size,
            h=height if height is not None else size,
        )
    if bounds.w < 0 or bounds.h < 0:
        raise ValueError(f"{where}: negative size")

    label = _rect(raw["label"], f"{where} label") if raw.get("label") is not None else None
    container = raw.get("container")
    group = raw.get("group")
    return NodeData(
        id=node_id,
        content_bounds=bounds,
        label_bounds=label,
        container_id=str(container) if container is not None else None,
        group=str(group) if group is not None else None,
    )


def _link_from_dict(raw: object, index: int) -> LinkData:
    link_id = _require_id(raw, "link", index)
    where = f"link '{link_id}'"
    start = raw.get("start")
    end = raw.get("end")
    if start is None or end is None:
        raise ValueError(f"{where}: needs both 'start' and 'end'")
    label = _rect(raw["label"], f"{where} label") if raw.get("label") is not None else None
    return LinkData(
        id=link_id,
        start_id=str(start),
        end_id=str(end),
        start_connector_offset=_optional_number(raw, "startConnectorOffset", where),
        end_connector_offset=_optional_number(raw, "endConnectorOffset", where),
        label_bounds=label,
    )
