"""forcelayout: force-directed 2D layout for node/link diagrams."""

import json
from dataclasses import replace

from forcelayout.config import LayoutConfig
from forcelayout.context import DiagramContext, dump_layout, load_diagram, parse_json
from forcelayout.layout import force_directed_layout


def layout_dict(data: object, link_length: float | None = None, config: LayoutConfig | None = None) -> dict:
    """Lay out an already-decoded JSON diagram and return the placement data.

    Args:
        data: Decoded diagram description with "nodes", "links" and optional "layoutAttributes".
        link_length: Optimal link length; None keeps the diagram's attribute or the derived value.
        config: Layout tuning; defaults to LayoutConfig().

    Returns:
        Dict with "nodes" (id, x, y, label) and "links" (id, points, label).

    Raises:
        ValueError: If the diagram description is invalid.
    """
    diagram = load_diagram(data)
    config = config or LayoutConfig()
    if link_length is not None:
        config = replace(config, optimal_link_length=link_length)
    force_directed_layout(DiagramContext(diagram), config)
    return dump_layout(diagram)


def layout_json(src: str, link_length: float | None = None, indent: int | None = 2) -> str:
    """Parse a JSON diagram description, lay it out and return the result as JSON.

    Raises:
        ValueError: If the input is not valid JSON or not a valid diagram.
    """
    diagram = parse_json(src)
    config = LayoutConfig(optimal_link_length=link_length)
    force_directed_layout(DiagramContext(diagram), config)
    return json.dumps(dump_layout(diagram), indent=indent)
