import random

import pytest

from holefall.ball import Ball
from holefall.config import GameConfig
from holefall.world import World


@pytest.fixture
def config():
    return GameConfig.for_window(600, seed=1234)


@pytest.fixture
def world(config):
    return World(config)


@pytest.fixture
def rng():
    return random.Random(42)


def make_ball(x=300.0, y=200.0, r=15.0, accel=0.4, gravity=0.5, width=600.0):
    return Ball(x, y, r, accel, gravity, width)
