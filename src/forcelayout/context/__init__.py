"""Layout contexts: the engine-facing contract and the Diagram-backed adapter."""

from forcelayout.context.adapter import DiagramContext
from forcelayout.context.base import ContextLink, ContextNode, LayoutContext
from forcelayout.context.graph import Diagram, LinkData, NodeData
from forcelayout.context.loader import dump_layout, load_diagram, parse_json

__all__ = [
    "ContextLink",
    "ContextNode",
    "Diagram",
    "DiagramContext",
    "LayoutContext",
    "LinkData",
    "NodeData",
    "dump_layout",
    "load_diagram",
    "parse_json",
]
