"""Pick a world-sheet sprite for each tile from its horizontal neighbours."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from frostfire.state.grid import BLOCKED, OPEN, GridModel, Pos

TILE_OPEN = 0
TILE_ISOLATED = 1
TILE_LEFT_EDGE = 2
TILE_INTERIOR = 3
TILE_RIGHT_EDGE = 4

_VARIANTS = {
    (BLOCKED, OPEN, OPEN): TILE_ISOLATED,
    (BLOCKED, OPEN, BLOCKED): TILE_LEFT_EDGE,
    (BLOCKED, BLOCKED, OPEN): TILE_RIGHT_EDGE,
    (BLOCKED, BLOCKED, BLOCKED): TILE_INTERIOR,
}


@dataclass(frozen=True)
class TileDescriptor:
    pos: Pos
    variant: int


def resolve(grid: GridModel, x: int, y: int) -> int:
    tile = grid.lookup(x, y)
    left = grid.lookup(x - 1, y)
    right = grid.lookup(x + 1, y)
    return _VARIANTS.get((tile, left, right), TILE_OPEN)


def resolve_all(grid: GridModel) -> List[TileDescriptor]:
    """One descriptor per cell, row-major."""
    return [TileDescriptor((x, y), resolve(grid, x, y)) for x, y, _ in grid.cells()]
