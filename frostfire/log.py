from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass
class MessageLog:
    capacity: int = 1000
    messages: deque[str] | None = None

    def __post_init__(self) -> None:
        # bounded history
        self.messages = deque(self.messages or (), maxlen=self.capacity)

    def add(self, text: str) -> None:
        self.messages.append(text)

    def tail(self, n: int) -> List[str]:
        if n <= 0:
            return []
        return list(self.messages)[-n:]


class DebugLog:
    """Append-only debug file. Doubles as a ``logger`` callable for loaders."""

    def __init__(self, path: Path | str, *, truncate: bool = False) -> None:
        self.path = Path(path)
        if truncate:
            try:
                self.path.write_text("", encoding="utf-8")
            except OSError:
                pass

    def __call__(self, msg: str) -> None:
        self.write(msg)

    def write(self, msg: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(msg + "\n")
        except OSError:
            pass
