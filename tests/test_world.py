import random

import pytest

from holefall.ball import Thrust
from holefall.config import ConfigError, GameConfig
from holefall.level import Level
from holefall.world import CameraMode, Command, Overlay, World

TRIAL_KEYS = {
    "index", "levelY", "levelInt", "holeUsed", "ballTouched",
    "time", "gameIndex", "cameraMode", "ballX", "ballY", "cameraY",
}


def single_level_world(config, holes=(3,), ball_x=262.5):
    world = World(config)
    world.levels.clear()
    world.levels.append(Level(99, 8, config.width, holes, 300.0, config.level_height))
    world.ball.reset(ball_x, 200.0)
    return world


@pytest.mark.parametrize("overrides", [
    {"segments_per_level": 2},
    {"segments_per_level": 0},
    {"ball_radius": 0.0},
    {"ball_radius": 40.0},
    {"width": -1.0},
    {"fps": 0},
    {"initial_levels": 0},
    {"gravity": -0.5},
])
def test_invalid_config_rejected(overrides):
    with pytest.raises(ConfigError):
        World(GameConfig.for_window(600, **overrides))


def test_initial_window(world, config):
    assert len(world.levels) == config.initial_levels
    for i, level in enumerate(world.levels):
        assert level.y == pytest.approx(config.height + i * config.level_spacing)
        assert level.index == i + 1
    assert (world.ball.x, world.ball.y) == (300.0, 100.0)
    assert world.session == 1
    assert world.overlay is Overlay.NONE


def test_pass_through_emits_one_trial(config):
    world = single_level_world(config)
    for _ in range(40):
        world.step()
    assert len(world.trials) == 1

    trial = world.trials[0]
    assert trial.index == 99
    assert trial.hole_used == 3
    assert trial.level_int == 0b11101111
    assert not trial.ball_touched
    assert trial.game_index == 1
    assert trial.camera_mode is CameraMode.FOLLOW
    assert set(trial.to_dict()) == TRIAL_KEYS


def test_trial_time_is_simulated(config):
    world = single_level_world(config)
    frames = 0
    while not world.trials:
        world.step()
        frames += 1
    assert world.trials[0].time == pytest.approx(frames * 1000.0 / config.fps)


def test_solid_slot_records_nothing(config):
    world = single_level_world(config, ball_x=37.5)
    for _ in range(200):
        world.step()
    assert world.trials == []
    assert world.ball.y == pytest.approx(300.0 - world.ball.r)
    assert world.levels[0].ball_touched


def test_window_recycles_one_level(world, config):
    world.paused = True
    front = world.levels[0]
    back = world.levels[-1]
    n = len(world.levels)

    # Follow camera puts the front level 49px above the viewport: kept
    world.ball.y = front.y + config.height / 2 + 49
    world.step()
    assert world.levels[0] is front

    world.ball.y = front.y + config.height / 2 + 51
    world.step()
    assert len(world.levels) == n
    assert front not in world.levels
    assert world.levels[-1].y == pytest.approx(back.y + config.level_spacing)
    assert world.levels[-1].index == back.index + 1


def test_drift_camera_scrolls_only_while_running(world, config):
    world.camera_mode = CameraMode.DRIFT
    world.step()
    assert world.camera_y == pytest.approx(config.scroll_speed)
    world.handle(Command.TOGGLE_PAUSE)
    world.step()
    assert world.camera_y == pytest.approx(config.scroll_speed)


def test_drift_game_over_freezes_physics(world):
    world.camera_mode = CameraMode.DRIFT
    world.ball.y = 1.0
    world.ball.vy = -10.0
    world.step()
    assert world.game_over
    assert world.overlay is Overlay.GAME_OVER

    frozen = (world.ball.x, world.ball.y, world.camera_y)
    for _ in range(10):
        world.step(Thrust(right=True))
    assert (world.ball.x, world.ball.y, world.camera_y) == frozen


def test_follow_mode_never_ends(world):
    world.ball.y = -1000.0
    world.ball.vy = -10.0
    world.step()
    assert not world.game_over


def test_pause_freezes_ball(world):
    world.handle(Command.TOGGLE_PAUSE)
    y = world.ball.y
    for _ in range(10):
        world.step()
    assert world.ball.y == y
    assert world.overlay is Overlay.PAUSED


def test_commands_ignored_while_running(world):
    assert world.handle(Command.RESTART) is None
    assert world.handle(Command.TOGGLE_CAMERA_MODE) is None
    assert world.handle(Command.EXPORT_TRIALS) is None
    assert world.session == 1
    assert world.camera_mode is CameraMode.FOLLOW


def test_commands_honoured_when_paused(world, config):
    world.handle(Command.TOGGLE_PAUSE)
    world.handle(Command.TOGGLE_CAMERA_MODE)
    assert world.camera_mode is CameraMode.DRIFT

    document = world.handle(Command.EXPORT_TRIALS)
    assert document["gameInfo"] == config.game_info()
    assert document["trials"] == []

    world.handle(Command.RESTART)
    assert world.session == 2
    world.handle(Command.TOGGLE_PAUSE)
    assert world.running


def test_restart_resets_session(world, config):
    for _ in range(30):
        world.step(Thrust(left=True))
    world.game_over = True
    old_levels = list(world.levels)

    world.handle(Command.RESTART)
    assert (world.ball.x, world.ball.y, world.ball.vx, world.ball.vy) == (300.0, 100.0, 0.0, 0.0)
    assert world.camera_y == 0.0
    assert not world.game_over
    assert world.session == 2
    assert len(world.levels) == config.initial_levels
    assert min(l.index for l in world.levels) > max(l.index for l in old_levels)
    assert [l.holes for l in world.levels] != [l.holes for l in old_levels]


def test_snapshot_is_screen_space(world, config):
    # Bring the first levels into view
    world.ball.y = 450.0
    snapshot = world.step()
    bx, by, r = snapshot.ball
    assert (bx, r) == (world.ball.x, world.ball.r)
    assert by == pytest.approx(world.ball.y - world.camera_y)
    assert snapshot.segments
    for rect in snapshot.segments:
        assert rect.y + rect.h >= 0 and rect.y <= config.height


def test_invariants_hold_under_random_input(config):
    world = World(config)
    rng = random.Random(3)
    n = len(world.levels)
    for _ in range(3000):
        world.step(Thrust(left=rng.random() < 0.4, right=rng.random() < 0.4))
        assert world.ball.r <= world.ball.x <= config.width - world.ball.r
        assert len(world.levels) == n
    indices = [t.index for t in world.trials]
    assert indices == sorted(set(indices))
