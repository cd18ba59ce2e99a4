"""World-space placement of level objects.

World space is y-up: tile (x, y) sits at (x * tw, (height - y) * th), so
row 0 (the top row of the level) has the largest y. Positions are sprite
centres.
"""
from __future__ import annotations

from typing import List, Tuple

from frostfire.state.entities import Platform
from frostfire.state.grid import Pos
from frostfire.state.level import Level
from frostfire.systems.platforms import layout

Vec2 = Tuple[float, float]

# The player sprite is 1.5 tiles tall, so its centre sits a quarter tile
# above the centre of the tile it stands on.
PLAYER_HEIGHT_TILES = 1.5
PLAYER_Y_OFFSET_TILES = 0.25


def camera_center(level: Level) -> Vec2:
    tw, th = level.tile_size
    return (
        (level.width * 0.5 - 0.5) * tw,
        (level.height * 0.5 + 0.5) * th,
    )


def world_position(level: Level, pos: Pos) -> Vec2:
    tw, th = level.tile_size
    return (pos[0] * tw, (level.height - pos[1]) * th)


def segment_world_positions(level: Level, platform: Platform) -> List[Tuple[Vec2, int]]:
    """(world position, ice frame) for each segment of ``platform``."""
    ox, oy = world_position(level, platform.pos)
    tw, _ = level.tile_size
    return [((ox + seg.offset * tw, oy), seg.variant) for seg in layout(platform.pos, platform.width)]


def player_world_position(level: Level, pos: Pos) -> Vec2:
    x, y = world_position(level, pos)
    return (x, y + PLAYER_Y_OFFSET_TILES * level.tile_size[1])


def player_size(level: Level) -> Vec2:
    tw, th = level.tile_size
    return (tw, th * PLAYER_HEIGHT_TILES)
