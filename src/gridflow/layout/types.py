"""Geometry primitives shared across the layout engine and renderers.

Two coordinate spaces are kept apart on purpose-built types:

  GridCoord    coarse layout grid; every node reserves a 3x3 block on it
  CanvasCoord  one character cell of the output buffer

A Heading doubles as an offset into a node's 3x3 block, so
``coord + Heading.RIGHT`` is the middle cell of the block's right border:

  (0,0) UPPER_LEFT  (1,0) UP      (2,0) UPPER_RIGHT
  (0,1) LEFT        (1,1) MIDDLE  (2,1) RIGHT
  (0,2) LOWER_LEFT  (1,2) DOWN    (2,2) LOWER_RIGHT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class GridCoord:
    """A position on the layout grid (column, row)."""

    x: int
    y: int

    def __add__(self, heading: Heading) -> GridCoord:
        return GridCoord(self.x + heading.x, self.y + heading.y)

    def key(self) -> int:
        """Pack the coordinate into one integer for occupancy lookups."""
        return (self.x << 32) | (self.y & 0xFFFFFFFF)


@dataclass(frozen=True)
class CanvasCoord:
    """A character cell on the output canvas (column, row)."""

    x: int
    y: int

    def __add__(self, heading: Heading) -> CanvasCoord:
        return CanvasCoord(self.x + heading.x, self.y + heading.y)


class Heading(Enum):
    UP = (1, 0)
    DOWN = (1, 2)
    LEFT = (0, 1)
    RIGHT = (2, 1)
    UPPER_RIGHT = (2, 0)
    UPPER_LEFT = (0, 0)
    LOWER_RIGHT = (2, 2)
    LOWER_LEFT = (0, 2)
    MIDDLE = (1, 1)

    @property
    def x(self) -> int:
        return self.value[0]

    @property
    def y(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self in _DIAGONALS

    def opposite(self) -> Heading:
        return _OPPOSITES[self]


_OPPOSITES: dict[Heading, Heading] = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
    Heading.UPPER_RIGHT: Heading.LOWER_LEFT,
    Heading.UPPER_LEFT: Heading.LOWER_RIGHT,
    Heading.LOWER_RIGHT: Heading.UPPER_LEFT,
    Heading.LOWER_LEFT: Heading.UPPER_RIGHT,
    Heading.MIDDLE: Heading.MIDDLE,
}

_DIAGONALS = frozenset({Heading.UPPER_RIGHT, Heading.UPPER_LEFT, Heading.LOWER_RIGHT, Heading.LOWER_LEFT})


def heading_between(a: GridCoord | CanvasCoord, b: GridCoord | CanvasCoord) -> Heading:
    """Classify the step from a to b by the signs of its deltas.

    Identical points count as UP.
    """
    if a.x == b.x:
        return Heading.DOWN if a.y < b.y else Heading.UP
    if a.y == b.y:
        return Heading.RIGHT if a.x < b.x else Heading.LEFT
    if a.x < b.x:
        return Heading.LOWER_RIGHT if a.y < b.y else Heading.UPPER_RIGHT
    return Heading.LOWER_LEFT if a.y < b.y else Heading.UPPER_LEFT
