"""Platform rows: segments, holes and pass-through detection."""
from __future__ import annotations

import random
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from . import constants
from .ball import Ball
from .geometry import Rect, collide_rect_circle


class PassStatus(Enum):
    UNRESOLVED = "unresolved"
    THROUGH_HOLE = "through_hole"
    MISSED_HOLE = "missed_hole"


def random_holes(k: int, rng: random.Random) -> List[int]:
    """Pick one or two distinct hole slots uniformly from [0, k)."""
    count = rng.randrange(constants.MIN_HOLES, constants.MAX_HOLES + 1)
    if count > k:
        raise ValueError(f"cannot place {count} holes in {k} slots")
    holes: List[int] = []
    while len(holes) < count:
        idx = rng.randrange(k)
        if idx not in holes:
            holes.append(idx)
    return holes


class Segment:
    def __init__(self, index: int, x: float, y: float, w: float, h: float):
        self.index = index
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def update(self) -> None:
        # Segments move rigidly with their level; hook for per-segment motion
        pass

    def resolve(self, ball: Ball) -> bool:
        """Push `ball` out of this segment; return whether they touched."""
        hit = collide_rect_circle(self.rect, ball.x, ball.y, ball.r)
        if not hit.colliding:
            return False

        if hit.y_edge == 0 and hit.x_edge != 0:
            # Side hit: stop horizontal motion at the edge
            if hit.x_edge == -1:
                ball.x = self.x - ball.r
            else:
                ball.x = self.x + self.w + ball.r
            ball.vx = 0.0
        if hit.x_edge == 0:
            # Top hit: rest on the platform, no bounce
            ball.y = self.y - ball.r
            ball.vy = min(ball.vy, 0.0)
        return True

    def __repr__(self) -> str:
        return f"Segment(index={self.index}, x={self.x:.1f}, y={self.y:.1f}, w={self.w:.1f})"


class Level:
    """A row of `k` slots across the world width, with holes left empty."""

    def __init__(self, index: int, k: int, width: float, holes: Sequence[int], y: float, height: float):
        if not holes:
            raise ValueError("a level needs at least one hole")
        if any(not 0 <= h < k for h in holes):
            raise ValueError(f"hole indices {list(holes)} out of range for {k} slots")
        self.index = index
        self.k = k
        self.width = width
        self.holes = frozenset(holes)
        self.y = y
        self.height = height
        self.status = PassStatus.UNRESOLVED
        self.hole_index: Optional[int] = None
        self.ball_touched = False

        seg_w = width / k
        self.segments = [
            Segment(i, i * seg_w, y, seg_w, height)
            for i in range(k)
            if i not in self.holes
        ]

    @property
    def slot_width(self) -> float:
        return self.width / self.k

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def occupancy(self) -> List[int]:
        return [0 if i in self.holes else 1 for i in range(self.k)]

    @property
    def occupancy_mask(self) -> int:
        # Slot 0 is the most significant bit
        value = 0
        for bit in self.occupancy:
            value = (value << 1) | bit
        return value

    @property
    def hole_used(self) -> int:
        return self.hole_index if self.status is PassStatus.THROUGH_HOLE else -1

    @property
    def resolved(self) -> bool:
        return self.status is not PassStatus.UNRESOLVED

    def slot_of(self, x: float) -> int:
        return int(x // self.slot_width)

    def update(self) -> None:
        for seg in self.segments:
            seg.update()

    def collide(self, ball: Ball) -> None:
        for seg in self.segments:
            touched = seg.resolve(ball)
            self.ball_touched = self.ball_touched or touched

    def check_pass_through(self, ball: Ball) -> bool:
        """Resolve the level once the ball's lower edge clears it.

        Returns True iff the ball went through one of the holes. Once the
        level is resolved repeated calls return the same answer and change
        nothing.
        """
        if self.status is PassStatus.UNRESOLVED and ball.y + ball.r > self.bottom:
            slot = self.slot_of(ball.x)
            if slot in self.holes:
                self.status = PassStatus.THROUGH_HOLE
                self.hole_index = slot
            else:
                self.status = PassStatus.MISSED_HOLE
        return self.status is PassStatus.THROUGH_HOLE

    def serialize(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "levelY": self.y,
            "levelInt": self.occupancy_mask,
            "holeUsed": self.hole_used,
            "ballTouched": self.ball_touched,
        }

    def __repr__(self) -> str:
        return f"Level(index={self.index}, y={self.y:.1f}, holes={sorted(self.holes)}, status={self.status.value})"
