"""Single session runner (headless or interactive).

The headless path drives the world with a steering policy and is what the
batch runner uses; the interactive path maps the keyboard onto thrust and
host commands and draws each snapshot with pygame.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

import pygame

from .ball import Thrust
from .config import GameConfig
from .export import DEFAULT_EXPORT_FILE, save_trials
from .visualize import draw_snapshot
from .world import CameraMode, Command, TrialEvent, World

logger = logging.getLogger(__name__)

Policy = Callable[[World], Thrust]

KEY_COMMANDS = {
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_n: Command.RESTART,
    pygame.K_m: Command.TOGGLE_CAMERA_MODE,
    pygame.K_s: Command.EXPORT_TRIALS,
}


@dataclass
class SessionResult:
    """Outcome of one run."""

    trials: List[TrialEvent]
    frames: int
    game_over: bool
    session: int


def hole_seeking_policy(world: World) -> Thrust:
    # Steer toward the nearest hole of the first unresolved level below the ball
    ball = world.ball
    target = next((lvl for lvl in world.levels if not lvl.resolved and lvl.y >= ball.y), None)
    if target is None:
        return Thrust.NONE
    centers = [(h + 0.5) * target.slot_width for h in target.holes]
    goal = min(centers, key=lambda c: abs(c - ball.x))
    # Leave room to coast under damping
    tolerance = target.slot_width / 2 - ball.r
    if ball.x < goal - tolerance:
        return Thrust(right=True)
    if ball.x > goal + tolerance:
        return Thrust(left=True)
    return Thrust.NONE


def read_thrust() -> Thrust:
    keys = pygame.key.get_pressed()
    return Thrust(left=bool(keys[pygame.K_LEFT]), right=bool(keys[pygame.K_RIGHT]))


def run_game(
    config: Optional[GameConfig] = None,
    display: bool = True,
    policy: Optional[Policy] = None,
    max_frames: Optional[int] = None,
    camera_mode: CameraMode = CameraMode.FOLLOW,
    export_path: str = DEFAULT_EXPORT_FILE,
    rng: Optional[random.Random] = None,
) -> SessionResult:
    """Run one session.

    Headless runs need a `policy` (defaults to `hole_seeking_policy`) and
    stop at game over or after `max_frames`. Interactive runs go until the
    window is closed.
    """

    world = World(config, rng=rng)
    world.camera_mode = camera_mode
    frames = 0

    if not display:
        # Headless fast path
        steer = policy or hole_seeking_policy
        while max_frames is None or frames < max_frames:
            world.step(steer(world))
            frames += 1
            if world.game_over:
                break
        return SessionResult(list(world.trials), frames, world.game_over, world.session)

    pygame.init()
    cfg = world.config
    screen = pygame.display.set_mode((int(cfg.width), int(cfg.height)))
    pygame.display.set_caption("Holefall")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 48)

    running = True
    while running and (max_frames is None or frames < max_frames):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in KEY_COMMANDS:
                document = world.handle(KEY_COMMANDS[event.key])
                if document is not None:
                    save_trials(document, export_path)

        thrust = policy(world) if policy is not None else read_thrust()
        snapshot = world.step(thrust)
        frames += 1

        draw_snapshot(screen, snapshot, font)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()
    return SessionResult(list(world.trials), frames, world.game_over, world.session)
