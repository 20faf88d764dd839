"""Force-directed layout engine entry points."""

from __future__ import annotations

import logging

from forcelayout.config import LayoutConfig
from forcelayout.context.base import LayoutContext
from forcelayout.layout.force import compute_layout_params, simulate
from forcelayout.layout.labels import position_link_labels, position_node_labels
from forcelayout.layout.routing import route_links

logger = logging.getLogger(__name__)


class ForceDirectedLayout:
    """Force-directed layout engine.

    One ``layout`` call seeds, simulates, routes links and places labels,
    writing everything back into the context.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()

    def layout(self, context: LayoutContext) -> None:
        node_count = context.node_count()
        if node_count == 0:
            logger.debug("empty layout context, nothing to do")
            return

        params = compute_layout_params(context, self.config)
        logger.debug(
            "laying out %d nodes, %d links (k=%.3f, t0=%.3f, iterations=%d)",
            node_count,
            context.link_count(),
            params.opt_link_length,
            params.initial_temp,
            self.config.iterations,
        )
        simulate(context, params, self.config)
        route_links(context)
        position_node_labels(context)
        position_link_labels(context)


def force_directed_layout(context: LayoutContext, config: LayoutConfig | None = None) -> None:
    """Run the force-directed layout on context in place."""
    ForceDirectedLayout(config).layout(context)
