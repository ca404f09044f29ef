"""Falling-ball platform simulation core."""

from .ball import Ball, Thrust
from .config import ConfigError, GameConfig
from .geometry import Contact, Rect, collide_rect_circle
from .level import Level, PassStatus, Segment, random_holes
from .world import CameraMode, Command, Overlay, RenderSnapshot, TrialEvent, World

__all__ = [
    "Ball",
    "CameraMode",
    "Command",
    "ConfigError",
    "Contact",
    "GameConfig",
    "Level",
    "Overlay",
    "PassStatus",
    "Rect",
    "RenderSnapshot",
    "Segment",
    "Thrust",
    "TrialEvent",
    "World",
    "collide_rect_circle",
    "random_holes",
]
