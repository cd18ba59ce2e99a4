"""Tests for neighbour-aware wall variants."""

from frostfire.state.grid import GridModel
from frostfire.systems.autotile import (
    TILE_INTERIOR,
    TILE_ISOLATED,
    TILE_LEFT_EDGE,
    TILE_OPEN,
    TILE_RIGHT_EDGE,
    resolve,
    resolve_all,
)


def test_wall_run_flanked_by_open():
    grid = GridModel.from_rows([[0, 1, 1, 1, 1, 0]])
    variants = [resolve(grid, x, 0) for x in range(grid.width)]
    assert variants == [
        TILE_OPEN,
        TILE_LEFT_EDGE,
        TILE_INTERIOR,
        TILE_INTERIOR,
        TILE_RIGHT_EDGE,
        TILE_OPEN,
    ]
    assert variants[1:5] == [2, 3, 3, 4]


def test_isolated_wall():
    grid = GridModel.from_rows([[0, 1, 0]])
    assert resolve(grid, 1, 0) == TILE_ISOLATED == 1


def test_grid_edges_see_open_beyond_the_map():
    # a full-width wall row: the outermost cells border the open outside
    grid = GridModel.from_rows([[1, 1, 1]])
    assert [resolve(grid, x, 0) for x in range(3)] == [2, 3, 4]
    assert resolve(GridModel.from_rows([[1]]), 0, 0) == TILE_ISOLATED


def test_only_horizontal_neighbours_matter():
    grid = GridModel.from_rows([
        [1, 1, 1],
        [0, 1, 0],
        [1, 1, 1],
    ])
    assert resolve(grid, 1, 1) == TILE_ISOLATED


def test_open_tiles_are_never_decorated():
    grid = GridModel.from_rows([[1, 0, 1]])
    assert resolve(grid, 1, 0) == TILE_OPEN


def test_resolve_all_covers_every_cell():
    grid = GridModel.from_rows([[1, 1], [0, 1]])
    descs = resolve_all(grid)
    assert [d.pos for d in descs] == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert [d.variant for d in descs] == [2, 4, 0, 1]
