from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from frostfire.errors import ConfigurationError
from frostfire.state.level import Level, build_level

LEVELS_DIR = Path(__file__).resolve().parent / "puzzles"
DEFAULT_LEVEL = LEVELS_DIR / "frozen_cavern.yaml"

_REQUIRED_KEYS = ("tiles", "player_start")


def _platform_entry(entry: Any):
    if not isinstance(entry, dict) or "pos" not in entry or "width" not in entry:
        raise ConfigurationError(f"Platform entry must have 'pos' and 'width': {entry!r}")
    return entry["pos"], entry["width"]


def level_from_dict(
    data: Dict[str, Any],
    logger: Optional[Callable[[str], None]] = None,
) -> Level:
    """Build a Level from an already-parsed level document."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Level document must be a mapping, got {type(data).__name__}")
    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise ConfigurationError(f"Level document missing keys: {', '.join(missing)}")

    tiles = data["tiles"]
    if not isinstance(tiles, list) or not all(isinstance(row, list) for row in tiles):
        raise ConfigurationError("'tiles' must be a list of rows")

    hazards = data.get("hazards") or []
    platforms = data.get("platforms") or []
    for key, section in (("hazards", hazards), ("platforms", platforms)):
        if not isinstance(section, list):
            raise ConfigurationError(f"'{key}' must be a list, got {section!r}")

    return build_level(
        tiles=tiles,
        hazards=hazards,
        platforms=[_platform_entry(e) for e in platforms],
        player_start=data["player_start"],
        tile_size=data.get("tile_size", 16),
        name=str(data.get("name", "untitled")),
        logger=logger,
    )


def load_level(
    path: Path | str | None = None,
    logger: Optional[Callable[[str], None]] = None,
) -> Level:
    """Load a level definition from YAML. Defaults to the bundled cavern."""
    if path is None:
        path = DEFAULT_LEVEL
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Level file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Level file malformed: {path}: {exc}") from exc
    level = level_from_dict(data, logger=logger)
    if logger:
        logger(
            f"[levels] loaded '{level.name}' ({level.width}x{level.height}, "
            f"{len(level.hazards)} fires, {len(level.platforms)} platforms) from {path}"
        )
    return level
