"""Tests for gridflow.layout.types — coordinates, headings, heading_between."""

import pytest

from gridflow.layout.types import CanvasCoord, GridCoord, Heading, heading_between

CARDINALS = [Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT]
DIAGONALS = [Heading.UPPER_LEFT, Heading.UPPER_RIGHT, Heading.LOWER_LEFT, Heading.LOWER_RIGHT]


class TestHeading:
    @pytest.mark.parametrize("h", CARDINALS + DIAGONALS, ids=lambda h: h.name)
    def test_opposite_is_an_involution(self, h):
        assert h.opposite().opposite() == h

    def test_opposite_of_middle_is_middle(self):
        assert Heading.MIDDLE.opposite() == Heading.MIDDLE

    def test_cardinal_opposites(self):
        assert Heading.UP.opposite() == Heading.DOWN
        assert Heading.LEFT.opposite() == Heading.RIGHT

    def test_diagonal_opposites(self):
        assert Heading.UPPER_RIGHT.opposite() == Heading.LOWER_LEFT
        assert Heading.LOWER_RIGHT.opposite() == Heading.UPPER_LEFT

    def test_is_diagonal(self):
        assert all(h.is_diagonal for h in DIAGONALS)
        assert not any(h.is_diagonal for h in CARDINALS)
        assert not Heading.MIDDLE.is_diagonal

    def test_values_are_block_offsets(self):
        assert (Heading.UP.x, Heading.UP.y) == (1, 0)
        assert (Heading.DOWN.x, Heading.DOWN.y) == (1, 2)
        assert (Heading.LEFT.x, Heading.LEFT.y) == (0, 1)
        assert (Heading.RIGHT.x, Heading.RIGHT.y) == (2, 1)
        assert (Heading.MIDDLE.x, Heading.MIDDLE.y) == (1, 1)


class TestCoords:
    def test_grid_coord_plus_heading_lands_on_block_border(self):
        assert GridCoord(4, 8) + Heading.RIGHT == GridCoord(6, 9)
        assert GridCoord(4, 8) + Heading.UP == GridCoord(5, 8)

    def test_canvas_coord_plus_heading(self):
        assert CanvasCoord(0, 0) + Heading.LOWER_RIGHT == CanvasCoord(2, 2)

    def test_coords_are_hashable_values(self):
        assert {GridCoord(1, 2), GridCoord(1, 2)} == {GridCoord(1, 2)}
        assert GridCoord(1, 2) != GridCoord(2, 1)

    def test_key_is_unique_per_coord(self):
        keys = {GridCoord(x, y).key() for x in range(20) for y in range(20)}
        assert len(keys) == 400


class TestHeadingBetween:
    def test_same_column(self):
        assert heading_between(GridCoord(3, 3), GridCoord(3, 7)) == Heading.DOWN
        assert heading_between(GridCoord(3, 7), GridCoord(3, 3)) == Heading.UP

    def test_same_row(self):
        assert heading_between(GridCoord(0, 1), GridCoord(5, 1)) == Heading.RIGHT
        assert heading_between(GridCoord(5, 1), GridCoord(0, 1)) == Heading.LEFT

    def test_diagonals(self):
        origin = GridCoord(4, 4)
        assert heading_between(origin, GridCoord(8, 8)) == Heading.LOWER_RIGHT
        assert heading_between(origin, GridCoord(8, 0)) == Heading.UPPER_RIGHT
        assert heading_between(origin, GridCoord(0, 8)) == Heading.LOWER_LEFT
        assert heading_between(origin, GridCoord(0, 0)) == Heading.UPPER_LEFT

    def test_diagonal_does_not_need_equal_deltas(self):
        assert heading_between(GridCoord(0, 0), GridCoord(9, 1)) == Heading.LOWER_RIGHT

    def test_identical_points_are_up(self):
        assert heading_between(GridCoord(2, 2), GridCoord(2, 2)) == Heading.UP

    def test_works_on_canvas_coords(self):
        assert heading_between(CanvasCoord(0, 0), CanvasCoord(0, 3)) == Heading.DOWN
