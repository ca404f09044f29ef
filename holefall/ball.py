"""Point-mass ball and its fixed-step integrator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from . import constants


@dataclass(frozen=True)
class Thrust:
    """Horizontal input for one frame."""

    left: bool = False
    right: bool = False

    NONE: ClassVar["Thrust"]


Thrust.NONE = Thrust()


class Ball:
    def __init__(self, x: float, y: float, r: float, accel: float, gravity: float, world_width: float):
        self.x = x
        self.y = y
        self.xprev = x
        self.yprev = y
        self.vx = 0.0
        self.vy = 0.0
        self.r = r
        self.accel = accel
        self.gravity = gravity
        self.world_width = world_width

    @property
    def max_vx(self) -> float:
        return constants.MAX_SPEED_FACTOR * self.accel

    def apply_thrust(self, thrust: Thrust) -> None:
        # Each held direction adds one increment, then |vx| is capped
        if thrust.left:
            self.vx -= self.accel
        if thrust.right:
            self.vx += self.accel
        self.vx = max(-self.max_vx, min(self.max_vx, self.vx))

    def integrate(self, thrust: Optional[Thrust] = None) -> None:
        """Advance one frame with explicit Euler; no dt, the step is fixed."""
        self.xprev = self.x
        self.yprev = self.y
        if thrust is not None:
            self.apply_thrust(thrust)

        self.vy += self.gravity
        self.x += self.vx
        self.y += self.vy
        self.vx *= constants.HORIZONTAL_DAMPING

        # Inelastic stop against the side walls
        if self.x < self.r:
            self.x = self.r
            self.vx = 0.0
        if self.x > self.world_width - self.r:
            self.x = self.world_width - self.r
            self.vx = 0.0

    def reset(self, x: float, y: float) -> None:
        self.x = self.xprev = x
        self.y = self.yprev = y
        self.vx = 0.0
        self.vy = 0.0

    def __repr__(self) -> str:
        return f"Ball(x={self.x:.1f}, y={self.y:.1f}, vx={self.vx:.2f}, vy={self.vy:.2f}, r={self.r:.1f})"
