"""Validated simulation settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import constants


class ConfigError(ValueError):
    """Raised when a configuration would produce undefined geometry."""


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of a session.

    Quantities are per frame at `fps`; the simulation never scales them by
    elapsed time.
    """

    width: float
    height: float
    ball_radius: float
    ball_accel: float
    gravity: float
    level_height: float = constants.LEVEL_HEIGHT
    level_spacing: float = constants.BASE_WINDOW / constants.LEVELS_VISIBLE
    segments_per_level: int = constants.SEGMENTS_PER_LEVEL
    scroll_speed: float = constants.SCROLL_SPEED
    fps: int = constants.FPS
    initial_levels: int = constants.INITIAL_LEVELS
    removal_margin: float = constants.REMOVAL_MARGIN
    ball_start_x: Optional[float] = None
    ball_start_y: float = constants.BALL_START_Y
    seed: Optional[int] = None

    @classmethod
    def for_window(cls, size: float = constants.BASE_WINDOW, **overrides: Any) -> "GameConfig":
        # Square world; physics scaled relative to the 600px reference window
        k = overrides.get("segments_per_level", constants.SEGMENTS_PER_LEVEL)
        scale = size / constants.BASE_WINDOW
        values: Dict[str, Any] = {
            "width": float(size),
            "height": float(size),
            "ball_radius": constants.BALL_RADIUS_FRACTION * size / k if k > 0 else 0.0,
            "ball_accel": constants.BASE_BALL_ACCEL * scale,
            "gravity": constants.BASE_GRAVITY * scale,
            "level_spacing": size / constants.LEVELS_VISIBLE,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def slot_width(self) -> float:
        return self.width / self.segments_per_level

    @property
    def start_x(self) -> float:
        return self.width / 2 if self.ball_start_x is None else self.ball_start_x

    def validate(self) -> "GameConfig":
        """Reject settings that cannot produce a playable level layout."""
        positive = {
            "width": self.width,
            "height": self.height,
            "ball_radius": self.ball_radius,
            "level_height": self.level_height,
            "level_spacing": self.level_spacing,
            "fps": self.fps,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")

        non_negative = {
            "gravity": self.gravity,
            "ball_accel": self.ball_accel,
            "scroll_speed": self.scroll_speed,
            "removal_margin": self.removal_margin,
        }
        for name, value in non_negative.items():
            if value < 0:
                raise ConfigError(f"{name} must not be negative, got {value!r}")

        if self.segments_per_level <= constants.MAX_HOLES:
            raise ConfigError(
                f"segments_per_level must exceed the maximum hole count "
                f"({constants.MAX_HOLES}), got {self.segments_per_level}"
            )
        if 2 * self.ball_radius >= self.slot_width:
            raise ConfigError(
                f"ball diameter {2 * self.ball_radius:.2f} does not fit through "
                f"a hole of width {self.slot_width:.2f}"
            )
        if self.initial_levels < 1:
            raise ConfigError(f"initial_levels must be at least 1, got {self.initial_levels}")
        if not 0 <= self.start_x <= self.width:
            raise ConfigError(f"ball_start_x {self.start_x!r} lies outside the world")
        return self

    def game_info(self) -> Dict[str, Any]:
        # Header of the exported trial document
        return {
            "width": self.width,
            "height": self.height,
            "ballRadius": self.ball_radius,
            "ballAccel": self.ball_accel,
            "gravity": self.gravity,
            "levelHeight": self.level_height,
            "levelSpacing": self.level_spacing,
            "segmentsPerLevel": self.segments_per_level,
            "scrollSpeed": self.scroll_speed,
            "FPS": self.fps,
        }
