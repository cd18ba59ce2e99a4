from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import pygame

from frostfire.state.actors import MoveDirection

MOD_MASK = pygame.KMOD_SHIFT | pygame.KMOD_CTRL | pygame.KMOD_ALT


def encode_keybinding(keycode: int, mods: int = 0) -> int:
    """
    Encode a key + modifiers into a single int so bindings can distinguish combos.
    """
    return int(keycode) | ((int(mods) & MOD_MASK) << 32)


def decode_keybinding(code: int) -> tuple[int, int]:
    mods = (code >> 32) & MOD_MASK
    key = code & 0xFFFFFFFF
    return key, mods


# Single-key commands (non-movement).
DEFAULT_BINDINGS: Dict[str, List[int]] = {
    "escape": [encode_keybinding(pygame.K_ESCAPE)],
}

# Movement is horizontal only.
DEFAULT_MOVE_BINDINGS: Dict[int, MoveDirection] = {
    encode_keybinding(pygame.K_LEFT): MoveDirection.LEFT,
    encode_keybinding(pygame.K_RIGHT): MoveDirection.RIGHT,
    encode_keybinding(pygame.K_a): MoveDirection.LEFT,
    encode_keybinding(pygame.K_d): MoveDirection.RIGHT,
    encode_keybinding(pygame.K_KP4): MoveDirection.LEFT,
    encode_keybinding(pygame.K_KP6): MoveDirection.RIGHT,
}


@dataclass
class GameCommand:
    """Logical game command produced from a raw key press."""
    kind: str
    direction: Optional[MoveDirection] = None
    raw_key: Optional[int] = None


class GameInput:
    """
    Maps pygame KEYDOWN events to abstract game commands.

    Only key-down edges produce commands; a held key does not repeat a move.
    Bindings are plain dicts and can be replaced at runtime.
    """

    def __init__(
        self,
        *,
        bindings: Optional[Dict[str, Iterable[int]]] = None,
        move_bindings: Optional[Dict[int, MoveDirection]] = None,
    ) -> None:
        self.bindings: Dict[str, List[int]] = deepcopy(DEFAULT_BINDINGS)
        self.move_bindings: Dict[int, MoveDirection] = dict(DEFAULT_MOVE_BINDINGS)
        if bindings:
            self.set_bindings(bindings)
        if move_bindings:
            self.set_move_bindings(move_bindings)

    def set_bindings(self, bindings: Dict[str, Iterable[int]]) -> None:
        merged = deepcopy(DEFAULT_BINDINGS)
        for k, vals in bindings.items():
            merged[k] = [int(v) for v in vals]
        self.bindings = merged

    def set_move_bindings(self, move_bindings: Dict[int, MoveDirection]) -> None:
        self.move_bindings = {int(k): MoveDirection(v) for k, v in move_bindings.items()}

    def handle_keydown(self, event: pygame.event.Event) -> List[GameCommand]:
        key = event.key
        combined = encode_keybinding(key, getattr(event, "mod", 0))

        if combined in self.bindings.get("escape", []):
            return [GameCommand("escape", raw_key=key)]

        if combined in self.move_bindings:
            return [GameCommand("move", direction=self.move_bindings[combined], raw_key=key)]

        return []
