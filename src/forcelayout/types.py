"""Shared type definitions for forcelayout.

Small geometry value types used across the context adapters, the layout
engine and the JSON loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class Point:
    """A 2D point in layout coordinates (origin-centered)."""

    x: float
    y: float


@dataclass
class Rect:
    """An axis-aligned rectangle; x/y is the top-left corner."""

    x: float
    y: float
    w: float
    h: float

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def right(self) -> float:
        return self.x + self.w

    def center(self) -> Point:
        return Point(x=self.x + 0.5 * self.w, y=self.y + 0.5 * self.h)

    def translated(self, offset: Point) -> Rect:
        """Return this rectangle moved by offset (relative → absolute bounds)."""
        return Rect(x=self.x + offset.x, y=self.y + offset.y, w=self.w, h=self.h)


class HAlign(Enum):
    Left = "left"
    Center = "center"
    Right = "right"
