"""Engine entry point: loads the level and hands the loop to SceneManager."""
from __future__ import annotations

from frostfire import config
from frostfire.content.levels import load_level
from frostfire.log import DebugLog
from frostfire.render.flat import FlatRenderer
from frostfire.scenes import PuzzleScene, SceneManager
from frostfire.session import Session


class Engine:
    def __init__(self, cfg: config.GameConfig) -> None:
        self.cfg = cfg
        self.debug = DebugLog(cfg.debug_log_path, truncate=True)
        # A bad level definition raises ConfigurationError here, before any window opens.
        self.level = load_level(cfg.level_path, logger=self.debug)
        self.session = Session(self.level, debug=self.debug)
        self.renderer = FlatRenderer(cfg.view_width, cfg.view_height, cfg.zoom, cfg.title)
        self.manager = SceneManager(cfg, self.renderer)
        self.manager.set_scene(PuzzleScene(self.session, cfg.transition_ms))

    def run(self) -> None:
        try:
            self.manager.run()
        finally:
            self.renderer.teardown()
