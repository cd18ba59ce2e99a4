# manager.py
from __future__ import annotations

from typing import List, Optional

import pygame

from frostfire import config

from .base import Scene


class SceneManager:
    def __init__(self, cfg: config.GameConfig, renderer) -> None:
        self.cfg = cfg
        self.renderer = renderer
        self.scene_stack: List[Scene] = []

    # ------------------------------------------------------------------ #
    # Stack operations

    def set_scene(self, scene: Optional[Scene]) -> None:
        if scene is None:
            self.scene_stack.clear()
        else:
            self.scene_stack = [scene]

    # ------------------------------------------------------------------ #

    def run(self) -> None:
        while self.scene_stack:
            self._run_live_scene(self.scene_stack[-1])

    def _run_live_scene(self, scene: Scene) -> None:
        clock = pygame.time.Clock()

        # Drive events/update/render until the scene stack changes.
        while self.scene_stack and self.scene_stack[-1] is scene:
            dt = clock.tick(self.cfg.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.set_scene(None)
                    return
                scene.handle_event(event, self)

            scene.update(dt, self)
            if self.scene_stack and self.scene_stack[-1] is scene:
                scene.render(self.renderer, self)
