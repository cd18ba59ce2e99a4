from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from frostfire.errors import ConfigurationError
from frostfire.state.entities import HazardPoint, Platform
from frostfire.state.grid import GridModel, Pos
from frostfire.systems.autotile import TileDescriptor, resolve_all
from frostfire.systems.hazards import HazardRegistry
from frostfire.systems.platforms import Segment, layout

TileSize = Tuple[float, float]


@dataclass(frozen=True)
class Level:
    """Everything a puzzle needs at load time.

    Build levels with build_level(), which validates anchors and the player
    start; render descriptors are derived once here.
    """
    grid: GridModel
    hazards: HazardRegistry
    platforms: Tuple[Platform, ...]
    player_start: Pos
    tile_size: TileSize = (16.0, 16.0)
    name: str = "untitled"
    _tiles: List[TileDescriptor] = field(init=False, repr=False, compare=False)
    _layouts: List[Tuple[Platform, List[Segment]]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_tiles", resolve_all(self.grid))
        object.__setattr__(self, "_layouts", [(p, layout(p.pos, p.width)) for p in self.platforms])

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def tile_descriptors(self) -> List[TileDescriptor]:
        return list(self._tiles)

    def hazard_positions(self) -> List[Pos]:
        return self.hazards.positions()

    def platform_layouts(self) -> List[Tuple[Platform, List[Segment]]]:
        return [(p, list(segs)) for p, segs in self._layouts]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_pos(value: Sequence[int], what: str) -> Pos:
    try:
        x, y = value
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{what} must be an (x, y) pair, got {value!r}") from exc
    if not (_is_int(x) and _is_int(y)):
        raise ConfigurationError(f"{what} must have integer coordinates, got {value!r}")
    return x, y


def _check_in_grid(grid: GridModel, pos: Pos, what: str) -> None:
    if not grid.in_bounds(*pos):
        raise ConfigurationError(
            f"{what} {pos} is outside the {grid.width}x{grid.height} grid"
        )


def _as_tile_size(value) -> TileSize:
    if isinstance(value, (int, float)):
        value = (value, value)
    try:
        w, h = value
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"tile_size must be a number or (w, h), got {value!r}") from exc
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (w, h)):
        raise ConfigurationError(f"tile_size must be numeric, got {value!r}")
    w, h = float(w), float(h)
    if w <= 0 or h <= 0:
        raise ConfigurationError(f"tile_size must be positive, got {(w, h)}")
    return w, h


def _entries(values, what: str) -> list:
    try:
        return list(values)
    except TypeError as exc:
        raise ConfigurationError(f"'{what}' must be a list, got {values!r}") from exc


def build_level(
    tiles: Iterable[Sequence[int]],
    hazards: Iterable[Sequence[int]],
    platforms: Iterable[Tuple[Sequence[int], int]],
    player_start: Sequence[int],
    tile_size=(16.0, 16.0),
    *,
    name: str = "untitled",
    logger: Optional[Callable[[str], None]] = None,
) -> Level:
    """Validate a level definition and assemble it.

    Raises ConfigurationError on the first problem found; no Level is
    returned in that case.
    """
    grid = GridModel.from_rows(tiles)

    start = _as_pos(player_start, "player_start")
    _check_in_grid(grid, start, "Player start")

    fires: List[HazardPoint] = []
    for raw in _entries(hazards, "hazards"):
        pos = _as_pos(raw, "hazard")
        _check_in_grid(grid, pos, "Hazard")
        fires.append(HazardPoint(pos))
        if logger:
            logger(f"Creating fire: {pos}")

    ice: List[Platform] = []
    for entry in _entries(platforms, "platforms"):
        try:
            raw_pos, raw_width = entry
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Platform must be a (pos, width) pair, got {entry!r}") from exc
        pos = _as_pos(raw_pos, "platform")
        _check_in_grid(grid, pos, "Platform anchor")
        if not _is_int(raw_width):
            raise ConfigurationError(f"Platform at {pos} has non-integer width {raw_width!r}")
        if raw_width < 1:
            raise ConfigurationError(f"Platform at {pos} has width {raw_width}; must be >= 1")
        ice.append(Platform(pos, raw_width))
        if logger:
            logger(f"Creating ice: {pos} width={raw_width}")

    return Level(
        grid=grid,
        hazards=HazardRegistry(fires),
        platforms=tuple(ice),
        player_start=start,
        tile_size=_as_tile_size(tile_size),
        name=name,
    )
