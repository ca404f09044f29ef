import pygame

from holefall.geometry import Rect
from holefall.visualize import BALL_COLOR, BG_COLOR, SEGMENT_COLOR, draw_snapshot
from holefall.world import Overlay, RenderSnapshot


def make_snapshot(overlay=Overlay.NONE):
    return RenderSnapshot(ball=(300.0, 300.0, 15.0), segments=[Rect(0.0, 400.0, 75.0, 10.0)], overlay=overlay)


def test_draws_ball_and_segments():
    surface = pygame.Surface((600, 600))
    draw_snapshot(surface, make_snapshot())
    assert tuple(surface.get_at((300, 300)))[:3] == BALL_COLOR
    assert tuple(surface.get_at((10, 405)))[:3] == SEGMENT_COLOR
    assert tuple(surface.get_at((500, 100)))[:3] == BG_COLOR


def test_overlay_dims_frame():
    surface = pygame.Surface((600, 600))
    draw_snapshot(surface, make_snapshot(Overlay.PAUSED))
    assert tuple(surface.get_at((500, 100)))[:3] != BG_COLOR
