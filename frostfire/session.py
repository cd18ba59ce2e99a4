from __future__ import annotations

from typing import List, Optional, Tuple

from frostfire.log import DebugLog, MessageLog
from frostfire.state.actors import MovementState, Player
from frostfire.state.grid import Pos
from frostfire.state.level import Level
from frostfire.systems.movement import (
    EventQueue,
    MovementEvent,
    MoveResult,
    process_events,
)


class Session:
    """Runtime state for one play-through of a level.

    The level is fixed; only the player's position and movement state
    change, and only through events pushed with submit().
    """

    def __init__(self, level: Level, debug: Optional[DebugLog] = None) -> None:
        self.level = level
        self.player = Player(pos=level.player_start)
        self.queue = EventQueue()
        self.log = MessageLog()
        self.debug = debug
        self.log.add(f"Entering {level.name}.")

    @property
    def is_transitioning(self) -> bool:
        return self.player.state is MovementState.TRANSITIONING

    def submit(self, event: MovementEvent) -> None:
        self.queue.push(event)

    def pump(self) -> List[MoveResult]:
        results = process_events(self.player, self.level.grid, self.queue)
        for res in results:
            if res.accepted:
                self._debug(f"move {res.direction.name.lower()} -> {res.pos}")
            elif res.reason == "busy":
                self._debug(f"move {res.direction.name.lower()} dropped (in transition)")
            else:
                self.log.add("The way is blocked.")
                self._debug(f"move {res.direction.name.lower()} blocked at {res.pos}")
        return results

    def snapshot(self) -> Tuple[Pos, MovementState]:
        return self.player.pos, self.player.state

    def _debug(self, msg: str) -> None:
        if self.debug is not None:
            self.debug.write(f"[session] {msg}")
