"""
Binary Tree algorithm.

Each cell opens exactly one of two fixed directions, one vertical and one
horizontal. Cells on the edge where one option is missing take the other, and
the corner with neither carves nothing. The result is always a perfect maze
with two long unbroken corridors along the biased edges.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from knossos.core.coords import Coordinate, Direction

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.grid import Grid


class Bias(str, Enum):
    """Pair of directions a Binary Tree cell chooses between."""

    NORTH_EAST = "north_east"
    NORTH_WEST = "north_west"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"

    @property
    def directions(self) -> tuple[Direction, Direction]:
        """``(vertical, horizontal)`` pair."""
        vertical = Direction.NORTH if self.value.startswith("north") else Direction.SOUTH
        horizontal = Direction.EAST if self.value.endswith("east") else Direction.WEST
        return vertical, horizontal


class BinaryTree(BaseMazeAlgorithm):
    """
    Binary Tree carving.

    Cells are processed in row-major order; a supplied start cell is processed
    first. Where both directions exist the vertical one is chosen with
    probability 1/2.
    """

    name = "binary_tree"

    def __init__(self, bias: Bias | str = Bias.NORTH_EAST):
        self.bias = Bias(bias)

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        vertical, horizontal = self.bias.directions

        order = list(grid.coordinates())
        if start is not None:
            order.remove(start)
            order.insert(0, start)

        for coord in order:
            candidates = [d for d in (vertical, horizontal) if coord.step(d) in grid]
            if not candidates:
                continue
            if len(candidates) == 2:
                direction = vertical if rng.random() < 0.5 else horizontal
            else:
                direction = candidates[0]
            grid.carve(coord, direction)

    def __repr__(self) -> str:
        return f"BinaryTree(bias={self.bias.value!r})"
