# frostfire/state/entities.py
from __future__ import annotations

from dataclasses import dataclass

from frostfire.state.grid import Pos


@dataclass(frozen=True)
class HazardPoint:
    """A fire anchored to one tile. Fixed for the whole session."""
    pos: Pos

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]


@dataclass(frozen=True)
class Platform:
    """A horizontal run of ice starting at ``pos`` and ``width`` tiles long."""
    pos: Pos
    width: int

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]
