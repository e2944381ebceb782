"""
Coordinates and compass directions on an orthogonal maze grid.

Convention: ``x`` is the column (growing eastwards) and ``y`` is the row
(growing southwards), so row 0 is the northern edge of the maze.
"""

from __future__ import annotations

import operator
from enum import IntFlag
from typing import NamedTuple


class Direction(IntFlag):
    """
    Passage flags with a fixed bit assignment.

    The values are part of the interchange format exposed by
    :meth:`knossos.core.cell.Cell.to_bits` and must never change.
    """

    NORTH = 0b0001
    SOUTH = 0b0010
    WEST = 0b0100
    EAST = 0b1000

    @property
    def opposite(self) -> Direction:
        """Direction pointing back across the same wall."""
        return _OPPOSITE[self]

    @property
    def delta(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` step for this direction."""
        return _DELTA[self]


# N, S, W, E is the canonical iteration order for every neighbour query
DIRECTIONS: tuple[Direction, ...] = (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST)

_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

_DELTA = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
}


class Coordinate(NamedTuple):
    """Cell position ``(x, y)``; equality and ordering are structural."""

    x: int
    y: int

    def step(self, direction: Direction) -> Coordinate:
        """
        Coordinate one cell away in ``direction``.

        The result is not bounds-checked and may hold negative values; the
        grid decides whether it exists.
        """
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)

    def is_adjacent(self, other: tuple[int, int]) -> bool:
        """True iff the coordinates differ by exactly 1 in exactly one axis."""
        return abs(self.x - other[0]) + abs(self.y - other[1]) == 1

    def manhattan(self, other: tuple[int, int]) -> int:
        """Manhattan (taxicab) distance to ``other``."""
        return abs(self.x - other[0]) + abs(self.y - other[1])

    def row_major_key(self) -> tuple[int, int]:
        """Sort key ordering by row first, then column."""
        return (self.y, self.x)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def as_coordinate(value: tuple[int, int] | Coordinate) -> Coordinate:
    """Coerce an ``(x, y)`` pair into a :class:`Coordinate`."""
    if isinstance(value, Coordinate):
        return value
    x, y = value
    return Coordinate(operator.index(x), operator.index(y))
