from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class GameConfig:
    view_width: int = 1280
    view_height: int = 720
    zoom: float = 2.0  # camera scale 1/2
    fps: int = 60
    transition_ms: int = 200  # player slide between tiles
    level_path: Optional[Path] = None  # None = bundled level
    debug_log_path: Path = Path("debug.log")  # relative to the working directory
    title: str = "Frostfire"
