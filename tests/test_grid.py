"""Tests for the tile matrix."""

import pytest

from frostfire.errors import ConfigurationError
from frostfire.state.grid import BLOCKED, OPEN, GridModel

ROWS = [
    [1, 0, 1],
    [0, 1, 0],
]


def test_lookup_matches_configured_codes_in_range():
    grid = GridModel.from_rows(ROWS)
    assert (grid.width, grid.height) == (3, 2)
    for y, row in enumerate(ROWS):
        for x, code in enumerate(row):
            assert grid.lookup(x, y) == code


@pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, -1), (0, 2), (100, 100), (-5, -5)])
def test_lookup_out_of_range_is_open(x, y):
    grid = GridModel.from_rows([[1, 1, 1], [1, 1, 1]])
    assert grid.lookup(x, y) == OPEN


def test_cells_are_row_major():
    grid = GridModel.from_rows(ROWS)
    cells = list(grid.cells())
    assert cells[0] == (0, 0, BLOCKED)
    assert cells[3] == (0, 1, OPEN)
    assert len(cells) == 6


def test_grid_is_immutable():
    grid = GridModel.from_rows(ROWS)
    with pytest.raises(AttributeError):
        grid.tiles = ((0,),)  # type: ignore[misc]
    with pytest.raises(TypeError):
        grid.rows[0][0] = 0  # type: ignore[index]


@pytest.mark.parametrize(
    "rows",
    [
        [[0, 0], [0]],  # ragged
        [],  # no rows
        [[]],  # no columns
        [[0, 2]],  # unknown code
        [[0, 1.0]],  # float code
        [[0, 0.5]],
        [[True, 0]],
        [["1", 0]],
        [[None, 0]],
        [0, 1],  # rows are not lists
    ],
)
def test_invalid_matrix_raises(rows):
    with pytest.raises(ConfigurationError):
        GridModel.from_rows(rows)
