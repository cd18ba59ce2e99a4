from .base import Scene
from .manager import SceneManager
from .puzzle_scene import PuzzleScene

__all__ = ["Scene", "SceneManager", "PuzzleScene"]
