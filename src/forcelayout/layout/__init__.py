"""Layout engine public API."""

from __future__ import annotations

from forcelayout.layout.engine import ForceDirectedLayout, force_directed_layout
from forcelayout.layout.force import (
    LayoutParams,
    SimulationState,
    compute_layout_params,
    init_positions,
    max_node_bounds,
    resolve_at_level,
    run_iteration,
    simulate,
    temperature,
)
from forcelayout.layout.labels import position_link_labels, position_node_labels
from forcelayout.layout.routing import find_link_node_intersection, link_endpoints, route_links

__all__ = [
    "ForceDirectedLayout",
    "LayoutParams",
    "SimulationState",
    "compute_layout_params",
    "find_link_node_intersection",
    "force_directed_layout",
    "init_positions",
    "link_endpoints",
    "max_node_bounds",
    "position_link_labels",
    "position_node_labels",
    "resolve_at_level",
    "route_links",
    "run_iteration",
    "simulate",
    "temperature",
]
