"""Session state: level window, camera, trial log and the per-frame pass."""
from __future__ import annotations

import itertools
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Deque, Dict, List, Optional, Tuple

from .ball import Ball, Thrust
from .config import GameConfig
from .geometry import Rect
from .level import Level, random_holes

logger = logging.getLogger(__name__)


class CameraMode(IntEnum):
    FOLLOW = 0
    DRIFT = 1


class Overlay(Enum):
    NONE = "none"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(Enum):
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    TOGGLE_CAMERA_MODE = "toggle_camera_mode"
    EXPORT_TRIALS = "export_trials"


@dataclass(frozen=True)
class TrialEvent:
    """One recorded pass through a level's hole."""

    index: int
    level_y: float
    level_int: int
    hole_used: int
    ball_touched: bool
    time: float
    game_index: int
    camera_mode: CameraMode
    ball_x: float
    ball_y: float
    camera_y: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "levelY": self.level_y,
            "levelInt": self.level_int,
            "holeUsed": self.hole_used,
            "ballTouched": self.ball_touched,
            "time": self.time,
            "gameIndex": self.game_index,
            "cameraMode": int(self.camera_mode),
            "ballX": self.ball_x,
            "ballY": self.ball_y,
            "cameraY": self.camera_y,
        }


@dataclass(frozen=True)
class RenderSnapshot:
    """Screen-space view of one frame."""

    ball: Tuple[float, float, float]
    segments: List[Rect] = field(default_factory=list)
    overlay: Overlay = Overlay.NONE
    camera_y: float = 0.0
    session: int = 0


class World:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = (config or GameConfig.for_window()).validate()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.camera_mode = CameraMode.FOLLOW
        self.paused = False
        self.game_over = False
        self.trials: List[TrialEvent] = []
        self.levels: Deque[Level] = deque()
        self.camera_y = 0.0
        self.frame = 0
        self.session = 0

        self._level_ids = itertools.count(1)
        self._session_ids = itertools.count(1)

        cfg = self.config
        self.ball = Ball(cfg.start_x, cfg.ball_start_y, cfg.ball_radius, cfg.ball_accel, cfg.gravity, cfg.width)
        self.restart()

    @property
    def running(self) -> bool:
        return not self.paused and not self.game_over

    @property
    def overlay(self) -> Overlay:
        if self.game_over:
            return Overlay.GAME_OVER
        if self.paused:
            return Overlay.PAUSED
        return Overlay.NONE

    @property
    def elapsed_ms(self) -> float:
        # Simulated time under the fixed-rate contract
        return self.frame * 1000.0 / self.config.fps

    def _spawn_level(self, y: float) -> Level:
        cfg = self.config
        holes = random_holes(cfg.segments_per_level, self.rng)
        return Level(next(self._level_ids), cfg.segments_per_level, cfg.width, holes, y, cfg.level_height)

    def restart(self) -> None:
        """Start a new session with a fresh level window."""
        cfg = self.config
        self.ball.reset(cfg.start_x, cfg.ball_start_y)
        self.camera_y = 0.0
        self.levels.clear()
        for i in range(cfg.initial_levels):
            self.levels.append(self._spawn_level(cfg.height + i * cfg.level_spacing))
        self.game_over = False
        self.frame = 0
        self.session = next(self._session_ids)
        logger.info("Session %d started (%s camera)", self.session, self.camera_mode.name.lower())

    def _update_camera(self, active: bool) -> None:
        if self.camera_mode is CameraMode.FOLLOW:
            # Keep the ball halfway up the screen
            self.camera_y = self.ball.y - self.config.height / 2
        elif active:
            self.camera_y += self.config.scroll_speed

    def _record_trial(self, level: Level) -> TrialEvent:
        trial = TrialEvent(
            index=level.index,
            level_y=level.y,
            level_int=level.occupancy_mask,
            hole_used=level.hole_used,
            ball_touched=level.ball_touched,
            time=self.elapsed_ms,
            game_index=self.session,
            camera_mode=self.camera_mode,
            ball_x=self.ball.x,
            ball_y=self.ball.y,
            camera_y=self.camera_y,
        )
        self.trials.append(trial)
        return trial

    def _recycle_levels(self) -> None:
        front, back = self.levels[0], self.levels[-1]
        if front.y - self.camera_y < -self.config.removal_margin:
            self.levels.popleft()
            new_level = self._spawn_level(back.y + self.config.level_spacing)
            self.levels.append(new_level)
            logger.debug("Recycled level %d, spawned level %d at y=%.1f", front.index, new_level.index, new_level.y)

    def step(self, thrust: Thrust = Thrust.NONE) -> RenderSnapshot:
        """Run one fixed-rate frame and return what to draw."""
        self.frame += 1
        self.ball.apply_thrust(thrust)

        active = self.running
        if active:
            self.ball.integrate()

        self._update_camera(active)

        for level in self.levels:
            if active:
                level.update()
            level.collide(self.ball)
            already = level.resolved
            if level.check_pass_through(self.ball) and not already:
                trial = self._record_trial(level)
                logger.debug("Ball passed level %d through hole %d", trial.index, trial.hole_used)

        self._recycle_levels()

        if self.camera_mode is CameraMode.DRIFT and not self.game_over and self.ball.y - self.camera_y <= 0:
            self.game_over = True
            logger.info("Game over in session %d after %d trials", self.session, self.session_trial_count)

        return self.snapshot()

    @property
    def session_trial_count(self) -> int:
        return sum(1 for t in self.trials if t.game_index == self.session)

    def snapshot(self) -> RenderSnapshot:
        cam = self.camera_y
        height = self.config.height
        segments = [
            seg.rect.shifted(-cam)
            for level in self.levels
            for seg in level.segments
            if seg.y + seg.h - cam >= 0 and seg.y - cam <= height
        ]
        return RenderSnapshot(
            ball=(self.ball.x, self.ball.y - cam, self.ball.r),
            segments=segments,
            overlay=self.overlay,
            camera_y=cam,
            session=self.session,
        )

    def handle(self, command: Command) -> Optional[Dict[str, Any]]:
        """Apply a host command.

        Everything except TOGGLE_PAUSE is ignored while the session runs.
        EXPORT_TRIALS returns the export document.
        """
        if command is Command.TOGGLE_PAUSE:
            self.paused = not self.paused
            return None
        if self.running:
            logger.debug("Ignoring %s while running", command.value)
            return None
        if command is Command.RESTART:
            self.restart()
        elif command is Command.TOGGLE_CAMERA_MODE:
            self.camera_mode = CameraMode(1 - self.camera_mode)
            logger.info("Camera mode set to %s", self.camera_mode.name.lower())
        elif command is Command.EXPORT_TRIALS:
            return self.export()
        return None

    def export(self) -> Dict[str, Any]:
        return {
            "gameInfo": self.config.game_info(),
            "trials": [t.to_dict() for t in self.trials],
        }
