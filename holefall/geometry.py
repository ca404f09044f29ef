"""Rectangle / circle intersection with edge classification."""
from __future__ import annotations

from dataclasses import dataclass

import pymunk


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def to_bb(self) -> pymunk.BB:
        # Screen coordinates grow downward, so pymunk's "bottom" holds the min y
        return pymunk.BB(self.x, self.y, self.right, self.bottom)

    def shifted(self, dy: float) -> "Rect":
        return Rect(self.x, self.y + dy, self.w, self.h)


@dataclass(frozen=True)
class Contact:
    """Result of a rect/circle test.

    `x_edge` is -1 when the center lies left of the rectangle, +1 when right
    of it and 0 inside its horizontal span; `y_edge` likewise with -1 above
    and +1 below.
    """

    colliding: bool
    x_edge: int
    y_edge: int


def _edge(value: float, low: float, high: float) -> int:
    if value < low:
        return -1
    if value > high:
        return 1
    return 0


def collide_rect_circle(rect: Rect, cx: float, cy: float, radius: float) -> Contact:
    """Test a circle of `radius` centred at (cx, cy) against `rect`."""
    x_edge = _edge(cx, rect.x, rect.right)
    y_edge = _edge(cy, rect.y, rect.bottom)

    center = pymunk.Vec2d(cx, cy)
    nearest = rect.to_bb().clamp_vect(center)
    distance = (center - nearest).length
    return Contact(distance <= radius, x_edge, y_edge)
