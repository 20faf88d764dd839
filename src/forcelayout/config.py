"""Centralized configuration for forcelayout."""

from __future__ import annotations

from dataclasses import dataclass

# ─── Layout constants ────────────────────────────────────────────────────────

ITERATIONS: int = 200
PAD_FACTOR: float = 1.2  # node size padding when estimating the layout area
INIT_TEMP_FACTOR: float = 0.25  # share of the ideal viewport dimension
GRAVITY_FACTOR: float = 0.2
MIN_DISTANCE: float = 1e-6

OPTIMAL_LINK_LENGTH_ATTR: str = "optimalLinkLength"


@dataclass
class LayoutConfig:
    """Configuration for the force-directed layout pipeline.

    ``optimal_link_length`` takes precedence over the context's
    ``optimalLinkLength`` layout attribute when set.
    """

    iterations: int = ITERATIONS
    pad_factor: float = PAD_FACTOR
    init_temp_factor: float = INIT_TEMP_FACTOR
    gravity: float = GRAVITY_FACTOR
    min_distance: float = MIN_DISTANCE
    optimal_link_length: float | None = None
