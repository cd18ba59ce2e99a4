"""Player movement: a two-state gate fed by discrete input events.

A move is only considered while the player is idle. An accepted move
updates the tile position at once and closes the gate until the
presentation layer reports that the slide has finished. Requests that
arrive while the gate is closed are dropped, not deferred.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Union

from frostfire.state.actors import MovementState, MoveDirection, Player
from frostfire.state.grid import OPEN, GridModel, Pos


@dataclass(frozen=True)
class MoveRequest:
    direction: MoveDirection


@dataclass(frozen=True)
class TransitionComplete:
    pass


MovementEvent = Union[MoveRequest, TransitionComplete]


@dataclass(frozen=True)
class MoveResult:
    direction: MoveDirection
    accepted: bool
    pos: Pos  # player position after the request
    reason: str = "moved"  # "moved" | "blocked" | "busy"


class EventQueue:
    def __init__(self) -> None:
        self._events: Deque[MovementEvent] = deque()

    def push(self, event: MovementEvent) -> None:
        self._events.append(event)

    def pop(self) -> Optional[MovementEvent]:
        if not self._events:
            return None
        return self._events.popleft()

    def __len__(self) -> int:
        return len(self._events)


def can_move(player: Player, direction: MoveDirection, grid: GridModel) -> bool:
    # Off-grid tiles read as open, so this also allows stepping past the edge.
    x, y = player.target(direction)
    return grid.lookup(x, y) == OPEN


def request_move(player: Player, grid: GridModel, direction: MoveDirection) -> bool:
    if player.state is not MovementState.IDLE:
        return False
    if not can_move(player, direction, grid):
        return False
    player.pos = player.target(direction)
    player.state = MovementState.TRANSITIONING
    return True


def complete_transition(player: Player) -> None:
    player.state = MovementState.IDLE


def process_events(player: Player, grid: GridModel, queue: EventQueue) -> List[MoveResult]:
    """Drain ``queue`` in order; one result per move request."""
    results: List[MoveResult] = []
    while True:
        event = queue.pop()
        if event is None:
            break
        if isinstance(event, TransitionComplete):
            complete_transition(player)
        elif isinstance(event, MoveRequest):
            busy = player.state is not MovementState.IDLE
            accepted = request_move(player, grid, event.direction)
            reason = "moved" if accepted else ("busy" if busy else "blocked")
            results.append(MoveResult(event.direction, accepted, player.pos, reason))
    return results
