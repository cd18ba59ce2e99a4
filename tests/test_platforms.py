"""Tests for ice platform segment layout."""

import pytest

from frostfire.errors import ConfigurationError
from frostfire.state.entities import Platform
from frostfire.systems.platforms import FILL, LEFT_CAP, RIGHT_CAP, SOLO, Segment, layout, segment_tiles


def _pairs(segments):
    return [(s.offset, s.variant) for s in segments]


def test_width_one_is_solo():
    assert _pairs(layout((2, 3), 1)) == [(0, SOLO)]


def test_width_two_is_caps_only():
    assert _pairs(layout((2, 3), 2)) == [(0, LEFT_CAP), (1, RIGHT_CAP)]


def test_width_four_has_two_fills():
    assert layout((0, 0), 4) == [
        Segment(0, LEFT_CAP),
        Segment(1, FILL),
        Segment(2, FILL),
        Segment(3, RIGHT_CAP),
    ]


def test_width_three_has_single_fill():
    assert _pairs(layout((0, 0), 3)) == [(0, 1), (1, 2), (2, 3)]


def test_wide_platform_offsets_are_contiguous():
    segs = layout((0, 0), 9)
    assert [s.offset for s in segs] == list(range(9))
    assert [s.variant for s in segs[1:-1]] == [FILL] * 7


@pytest.mark.parametrize("width", [0, -1])
def test_non_positive_width_raises(width):
    with pytest.raises(ConfigurationError):
        layout((0, 0), width)


def test_segment_tiles_stay_on_anchor_row():
    assert segment_tiles(Platform((5, 8), 4)) == [(5, 8), (6, 8), (7, 8), (8, 8)]
