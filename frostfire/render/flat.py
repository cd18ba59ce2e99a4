"""Pygame renderer that draws the level as flat coloured tiles."""
from __future__ import annotations

from typing import Dict, Tuple

import pygame

from frostfire.render import camera
from frostfire.session import Session
from frostfire.systems import autotile, platforms

Color = Tuple[int, int, int]

# stand-ins for the world sheet frames
TILE_COLORS: Dict[int, Color] = {
    autotile.TILE_OPEN: (18, 22, 36),
    autotile.TILE_ISOLATED: (110, 100, 140),
    autotile.TILE_LEFT_EDGE: (90, 84, 120),
    autotile.TILE_INTERIOR: (70, 66, 96),
    autotile.TILE_RIGHT_EDGE: (90, 84, 120),
}

ICE_COLORS: Dict[int, Color] = {
    platforms.SOLO: (170, 220, 255),
    platforms.LEFT_CAP: (140, 200, 245),
    platforms.FILL: (190, 230, 255),
    platforms.RIGHT_CAP: (140, 200, 245),
}


class FlatRenderer:
    def __init__(self, width: int, height: int, zoom: float = 2.0, title: str = "Frostfire") -> None:
        pygame.init()
        self.width = width
        self.height = height
        self.zoom = zoom
        self.bg: Color = (10, 10, 20)
        self.fire_color: Color = (255, 120, 40)
        self.player_color: Color = (255, 210, 80)
        self.text_color: Color = (220, 230, 240)
        self.display = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.font = pygame.font.SysFont("consolas", 16)

    # ------------------------------------------------------------------ #
    # Coordinate helpers

    def to_screen(self, world: camera.Vec2, center: camera.Vec2) -> Tuple[float, float]:
        """World (y-up) to screen (y-down) pixels, camera centred in the view."""
        return (
            (world[0] - center[0]) * self.zoom + self.width / 2,
            self.height / 2 - (world[1] - center[1]) * self.zoom,
        )

    def _rect(self, world: camera.Vec2, size: camera.Vec2, center: camera.Vec2) -> pygame.Rect:
        sx, sy = self.to_screen(world, center)
        w, h = size[0] * self.zoom, size[1] * self.zoom
        return pygame.Rect(round(sx - w / 2), round(sy - h / 2), round(w), round(h))

    # ------------------------------------------------------------------ #

    def draw_frame(self, session: Session, player_world: camera.Vec2) -> None:
        level = session.level
        center = camera.camera_center(level)
        self.display.fill(self.bg)

        for desc in level.tile_descriptors():
            rect = self._rect(camera.world_position(level, desc.pos), level.tile_size, center)
            pygame.draw.rect(self.display, TILE_COLORS.get(desc.variant, self.bg), rect)

        for plat, _ in level.platform_layouts():
            for world, frame in camera.segment_world_positions(level, plat):
                rect = self._rect(world, level.tile_size, center)
                pygame.draw.rect(self.display, ICE_COLORS[frame], rect)

        for pos in level.hazard_positions():
            rect = self._rect(camera.world_position(level, pos), level.tile_size, center)
            pygame.draw.rect(self.display, self.fire_color, rect.inflate(-rect.w // 4, -rect.h // 4))

        rect = self._rect(player_world, camera.player_size(level), center)
        pygame.draw.rect(self.display, self.player_color, rect)

        for i, line in enumerate(session.log.tail(3)):
            surf = self.font.render(line, True, self.text_color)
            self.display.blit(surf, (8, 8 + i * 18))

        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
