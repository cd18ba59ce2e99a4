"""Segment layout for variable-width ice platforms.

A platform is drawn as a row of sprites from the ice sheet: a single "solo"
frame when it is one tile wide, otherwise a left cap, zero or more fill
frames and a right cap. Offsets are in tiles from the anchor, left to right.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from frostfire.errors import ConfigurationError
from frostfire.state.entities import Platform
from frostfire.state.grid import Pos

SOLO = 0
LEFT_CAP = 1
FILL = 2
RIGHT_CAP = 3


@dataclass(frozen=True)
class Segment:
    offset: int
    variant: int


def layout(anchor: Pos, width: int) -> List[Segment]:
    if width < 1:
        raise ConfigurationError(f"Platform at {anchor} has width {width}; must be >= 1")

    if width == 1:
        return [Segment(0, SOLO)]

    if width == 2:
        return [Segment(0, LEFT_CAP), Segment(1, RIGHT_CAP)]

    segments = [Segment(0, LEFT_CAP)]
    for offset in range(1, width - 1):
        segments.append(Segment(offset, FILL))
    segments.append(Segment(width - 1, RIGHT_CAP))
    return segments


def segment_tiles(platform: Platform) -> List[Pos]:
    """Tile position of every segment; platforms never leave their row."""
    x, y = platform.pos
    return [(x + seg.offset, y) for seg in layout(platform.pos, platform.width)]
