"""Force-directed node placement.

Algorithm from "Graph Drawing by Force-directed Placement" (Fruchterman,
Reingold 1991), with an extra gravity term toward the origin:
  1. Parameters (layout area, optimal link length, initial temperature)
  2. Circular seeding
  3. Fixed number of cooling iterations: repulsion, attraction, gravity,
     displacement capped by the temperature
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from forcelayout.config import OPTIMAL_LINK_LENGTH_ATTR, LayoutConfig
from forcelayout.context.base import LayoutContext
from forcelayout.types import Point, Rect

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# ─── Parameters ──────────────────────────────────────────────────────────────


@dataclass
class LayoutParams:
    opt_link_length: float
    initial_temp: float


def max_node_bounds(context: LayoutContext) -> Rect:
    """Rectangle with the largest content width and height over all nodes."""
    max_w = 0.0
    max_h = 0.0
    for i in range(context.node_count()):
        bounds = context.node_by_index(i).content_bounds
        max_w = max(bounds.w, max_w)
        max_h = max(bounds.h, max_h)
    return Rect(x=0.0, y=0.0, w=max_w, h=max_h)


def compute_layout_params(context: LayoutContext, config: LayoutConfig) -> LayoutParams:
    """Derive k and t0 assuming the layout area is just big enough for all nodes.

    The context must hold at least one node.
    """
    node_count = context.node_count()
    max_bounds = max_node_bounds(context)
    area = node_count * (config.pad_factor * max_bounds.w) * (config.pad_factor * max_bounds.h)
    initial_temp = config.init_temp_factor * math.sqrt(area)

    opt_link_length = _link_length_override(context, config)
    if opt_link_length is None:
        # size of an ideal grid cell
        opt_link_length = math.sqrt(area / node_count)
    return LayoutParams(opt_link_length=opt_link_length, initial_temp=initial_temp)


def _link_length_override(context: LayoutContext, config: LayoutConfig) -> float | None:
    if config.optimal_link_length is not None:
        raw: object = config.optimal_link_length
    else:
        attrs = context.layout_attributes()
        raw = attrs.get(OPTIMAL_LINK_LENGTH_ATTR) if attrs else None
    if not raw:
        return None
    value = _leading_float(raw)
    if value is None:
        logger.warning("ignoring non-numeric %s %r", OPTIMAL_LINK_LENGTH_ATTR, raw)
        return None
    if not math.isfinite(value) or value <= 0:
        logger.warning("ignoring %s %r: must be a positive number", OPTIMAL_LINK_LENGTH_ATTR, raw)
        return None
    return value


def _leading_float(raw: object) -> float | None:
    """Numbers pass through; strings yield their leading number, so "80px" is 80."""
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        return None
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return None
    return float(match.group(0))


def temperature(initial_temp: float, iteration: int, iterations: int) -> float:
    """Linear cooling: t0 at iteration 0, exactly 0 once all iterations ran."""
    return initial_temp * (1 - iteration / iterations)


# ─── Seeding ─────────────────────────────────────────────────────────────────


def init_positions(context: LayoutContext, radius: float) -> None:
    """Seed nodes on a circle so no two nodes start at the same position."""
    node_count = context.node_count()
    angle_step = 2 * math.pi / node_count
    for i in range(node_count):
        x = radius * math.cos(angle_step * i)
        y = radius * math.sin(angle_step * i)
        context.node_by_index(i).position = Point(x=x, y=y)


# ─── Simulation ──────────────────────────────────────────────────────────────


@dataclass
class SimulationState:
    """Per-slot displacement arena for the nodes of the current level.

    ``slot_by_id`` doubles as the level membership test when link ends are
    resolved through the container chain.
    """

    node_ids: list[str]
    slot_by_id: dict[str, int]
    disp_x: list[float]
    disp_y: list[float]

    @classmethod
    def for_context(cls, context: LayoutContext) -> SimulationState:
        node_ids = [context.node_by_index(i).id for i in range(context.node_count())]
        return cls(
            node_ids=node_ids,
            slot_by_id={node_id: slot for slot, node_id in enumerate(node_ids)},
            disp_x=[0.0] * len(node_ids),
            disp_y=[0.0] * len(node_ids),
        )

    def reset(self) -> None:
        for slot in range(len(self.node_ids)):
            self.disp_x[slot] = 0.0
            self.disp_y[slot] = 0.0


def resolve_at_level(context: LayoutContext, state: SimulationState, node_id: str | None) -> int | None:
    """Slot of the node that stands for node_id at the current level.

    A node nested inside a group resolves to its first ancestor that takes
    part in the simulation. Returns None when the chain ends without one.
    """
    seen: set[str] = set()
    while node_id is not None and node_id not in seen:
        slot = state.slot_by_id.get(node_id)
        if slot is not None:
            return slot
        seen.add(node_id)
        node = context.node_by_id(node_id)
        if node is None:
            return None
        node_id = node.container_id
    return None


def run_iteration(context: LayoutContext, state: SimulationState, k: float, t: float, config: LayoutConfig) -> None:
    """Move every node once; displacement length is capped by temperature t."""
    node_count = len(state.node_ids)
    nodes = [context.node_by_index(i) for i in range(node_count)]
    px = [node.position.x for node in nodes]
    py = [node.position.y for node in nodes]
    disp_x = state.disp_x
    disp_y = state.disp_y
    state.reset()

    # repulsion between every two nodes
    k2 = k * k
    for i in range(node_count):
        for j in range(node_count):
            if i == j:
                continue
            dx = px[i] - px[j]
            dy = py[i] - py[j]
            distance = math.hypot(dx, dy)
            if distance > 0.0:
                ux, uy = dx / distance, dy / distance
            else:
                # coincident: lower slot goes +x, higher slot goes -x
                ux, uy = (1.0, 0.0) if i < j else (-1.0, 0.0)
            repulsion = k2 / max(distance, config.min_distance)
            disp_x[i] += ux * repulsion
            disp_y[i] += uy * repulsion

    # attraction between linked nodes
    for li in range(context.link_count()):
        link = context.link_by_index(li)
        s = resolve_at_level(context, state, link.start_id)
        e = resolve_at_level(context, state, link.end_id)
        if s is None or e is None:
            logger.debug("link %s has no endpoint at this level, skipped", link.id)
            continue
        dx = px[s] - px[e]
        dy = py[s] - py[e]
        # (d² / k) along the unit vector
        scale = math.hypot(dx, dy) / k
        disp_x[s] -= dx * scale
        disp_y[s] -= dy * scale
        disp_x[e] += dx * scale
        disp_y[e] += dy * scale

    for i in range(node_count):
        # gravity toward (0, 0) keeps disconnected parts from drifting away
        scale = math.hypot(px[i], py[i]) / k * config.gravity
        disp_x[i] -= px[i] * scale
        disp_y[i] -= py[i] * scale

        length = math.hypot(disp_x[i], disp_y[i])
        factor = min(length, t) / length if length > 0.0 else 0.0
        nodes[i].position = Point(x=px[i] + disp_x[i] * factor, y=py[i] + disp_y[i] * factor)


def simulate(context: LayoutContext, params: LayoutParams, config: LayoutConfig) -> None:
    """Seed positions and run all cooling iterations."""
    init_positions(context, params.opt_link_length)
    if params.opt_link_length <= 0:
        logger.debug("all nodes have zero size, simulation skipped")
        return
    state = SimulationState.for_context(context)
    for i in range(config.iterations):
        t = temperature(params.initial_temp, i, config.iterations)
        run_iteration(context, state, params.opt_link_length, t, config)
