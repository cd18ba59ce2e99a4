from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from frostfire.state.grid import Pos


class MovementState(Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"


class MoveDirection(Enum):
    LEFT = -1
    RIGHT = 1

    @property
    def dx(self) -> int:
        return self.value


@dataclass
class Player:
    """The single actor of a level: a tile position plus its movement gate."""
    pos: Pos
    state: MovementState = MovementState.IDLE

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]

    def target(self, direction: MoveDirection) -> Pos:
        return (self.pos[0] + direction.dx, self.pos[1])
