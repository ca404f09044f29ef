"""Draw render snapshots with pygame."""
from __future__ import annotations

from typing import Optional

import pygame

from .world import Overlay, RenderSnapshot

BG_COLOR = (40, 40, 40)
SEGMENT_COLOR = (180, 180, 180)
BALL_COLOR = (255, 200, 0)
OVERLAY_COLOR = (50, 50, 50, 200)
TEXT_COLOR = (255, 255, 255)

OVERLAY_TEXT = {
    Overlay.PAUSED: "PAUSED",
    Overlay.GAME_OVER: "GAME OVER",
}


def draw_snapshot(surface: pygame.Surface, snapshot: RenderSnapshot, font: Optional[pygame.font.Font] = None) -> None:
    """Render one frame onto `surface`."""
    surface.fill(BG_COLOR)

    for rect in snapshot.segments:
        pygame.draw.rect(surface, SEGMENT_COLOR, pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h)))

    bx, by, r = snapshot.ball
    pygame.draw.circle(surface, BALL_COLOR, (round(bx), round(by)), round(r))

    if snapshot.overlay is not Overlay.NONE:
        # Dim the frozen frame behind the message
        W, H = surface.get_size()
        shade = pygame.Surface((W, H), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        surface.blit(shade, (0, 0))
        if font is not None:
            text = font.render(OVERLAY_TEXT[snapshot.overlay], True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=(W // 2, H // 2)))
