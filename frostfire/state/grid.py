from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from frostfire.errors import ConfigurationError

Pos = Tuple[int, int]
TileCode = int

OPEN: TileCode = 0
BLOCKED: TileCode = 1
TILE_CODES = (OPEN, BLOCKED)


@dataclass(frozen=True)
class GridModel:
    """Immutable row-major tile matrix; row 0 is the top of the map.

    Anything outside the matrix reads as open floor.
    """

    tiles: Tuple[Tuple[TileCode, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "GridModel":
        try:
            matrix = tuple(tuple(row) for row in rows)
        except TypeError as exc:
            raise ConfigurationError(f"Tile matrix must be a list of rows: {exc}") from exc
        if not matrix or not matrix[0]:
            raise ConfigurationError("Tile matrix must have at least one row and one column")
        width = len(matrix[0])
        for y, row in enumerate(matrix):
            if len(row) != width:
                raise ConfigurationError(
                    f"Tile row {y} has length {len(row)}, expected {width}"
                )
            for x, code in enumerate(row):
                # bools are ints; 1.0 is not a tile code
                if isinstance(code, bool) or not isinstance(code, int) or code not in TILE_CODES:
                    raise ConfigurationError(f"Unknown tile code {code!r} at ({x}, {y})")
        return cls(matrix)

    @property
    def width(self) -> int:
        return len(self.tiles[0])

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def rows(self) -> Tuple[Tuple[TileCode, ...], ...]:
        return self.tiles

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def lookup(self, x: int, y: int) -> TileCode:
        if not self.in_bounds(x, y):
            return OPEN
        return self.tiles[y][x]

    def cells(self) -> Iterator[Tuple[int, int, TileCode]]:
        for y, row in enumerate(self.tiles):
            for x, code in enumerate(row):
                yield x, y, code
