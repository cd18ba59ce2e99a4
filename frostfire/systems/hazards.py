from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from frostfire.state.entities import HazardPoint
from frostfire.state.grid import Pos


class HazardRegistry:
    """Read-only collection of the fires placed by the level definition.

    Hazards are not checked against the grid: a fire on a wall tile is the
    level author's call.
    """

    def __init__(self, hazards: Iterable[HazardPoint] = ()) -> None:
        self._hazards: Tuple[HazardPoint, ...] = tuple(hazards)

    def __iter__(self) -> Iterator[HazardPoint]:
        return iter(self._hazards)

    def __len__(self) -> int:
        return len(self._hazards)

    def __contains__(self, pos: object) -> bool:
        return any(h.pos == pos for h in self._hazards)

    def positions(self) -> List[Pos]:
        return [h.pos for h in self._hazards]
