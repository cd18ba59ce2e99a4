from __future__ import annotations


class Scene:
    """
    Base for all scenes. The SceneManager drives the three hooks once per
    frame: handle_event for each pygame event, then update, then render.
    """

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Advance scene state by dt_ms."""
        return None

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Draw the scene."""
        return None
