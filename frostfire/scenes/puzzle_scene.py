from __future__ import annotations

import pygame

from frostfire.render import camera
from frostfire.session import Session
from frostfire.state.grid import Pos
from frostfire.systems.movement import MoveRequest, TransitionComplete

from .base import Scene
from .game_input import GameInput


class PuzzleScene(Scene):
    """
    Plays one level. Key presses become MoveRequest events; the scene
    owns the slide timer and tells the session when a slide has finished.
    """

    def __init__(self, session: Session, transition_ms: int = 200) -> None:
        self.session = session
        self.transition_ms = transition_ms
        self.input = GameInput()
        self.elapsed_ms = 0
        self.slide_from: Pos = session.player.pos

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        if event.type == pygame.QUIT:
            manager.set_scene(None)
            return

        if event.type != pygame.KEYDOWN:
            return

        for cmd in self.input.handle_keydown(event):
            if cmd.kind == "escape":
                manager.set_scene(None)
                return
            if cmd.kind == "move" and cmd.direction is not None:
                self.session.submit(MoveRequest(cmd.direction))

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        if self.session.is_transitioning:
            self.elapsed_ms += dt_ms
            if self.elapsed_ms >= self.transition_ms:
                self.session.submit(TransitionComplete())

        for res in self.session.pump():
            if res.accepted:
                self.slide_from = (res.pos[0] - res.direction.dx, res.pos[1])
                self.elapsed_ms = 0

    def player_world_position(self) -> camera.Vec2:
        """Where to draw the player this frame; slides linearly while moving."""
        level = self.session.level
        end = camera.player_world_position(level, self.session.player.pos)
        if not self.session.is_transitioning or self.transition_ms <= 0:
            return end
        start = camera.player_world_position(level, self.slide_from)
        t = min(1.0, self.elapsed_ms / self.transition_ms)
        return (start[0] + (end[0] - start[0]) * t, start[1] + (end[1] - start[1]) * t)

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        renderer.draw_frame(self.session, self.player_world_position())
