"""
Eller's algorithm for row-by-row maze generation.

Algorithm:
1. Process rows from top to bottom
2. Randomly join adjacent cells of the row that belong to different sets
3. Carve at least one passage down from every set so no region is sealed off
4. On the last row, join every pair of adjacent cells still in different sets

Set membership is tracked with a union-find over row-major cell indices.

Reference: Eller (1982), "An Efficient Method for Generating Mazes"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from knossos.core.coords import Coordinate, Direction
from knossos.core.disjoint_set import DisjointSet

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.grid import Grid


class Ellers(BaseMazeAlgorithm):
    """Row-by-row union-find carving; there is no starting cell."""

    name = "ellers"
    accepts_start = False

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        sets = DisjointSet(grid.size)
        width = grid.width

        for y in range(grid.height):
            last_row = y == grid.height - 1

            # Horizontal merges
            for x in range(width - 1):
                here = y * width + x
                if not sets.connected(here, here + 1) and (last_row or rng.random() < 0.5):
                    grid.carve(Coordinate(x, y), Direction.EAST)
                    sets.union(here, here + 1)

            if last_row:
                break

            # Group columns by set, in order of first appearance
            members: dict[int, list[int]] = {}
            for x in range(width):
                members.setdefault(sets.find(y * width + x), []).append(x)

            # At least one vertical passage per set
            for cols in members.values():
                for x in rng.sample(cols, rng.randint(1, len(cols))):
                    grid.carve(Coordinate(x, y), Direction.SOUTH)
                    sets.union(y * width + x, (y + 1) * width + x)
