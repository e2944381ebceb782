"""
Randomized Kruskal's algorithm.

Every potential passage is listed once, shuffled, and carved whenever it joins
two cells that are not yet connected. The union-find guarantees no loops, and
processing every edge guarantees full connectivity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from knossos.core.coords import Coordinate, Direction
from knossos.core.disjoint_set import DisjointSet

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.grid import Grid


class Kruskals(BaseMazeAlgorithm):
    """Shuffled edge list plus union-find; there is no starting cell."""

    name = "kruskals"
    accepts_start = False

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        edges: list[tuple[Coordinate, Coordinate]] = []
        for coord in grid.coordinates():
            for direction in (Direction.EAST, Direction.SOUTH):
                neighbor = coord.step(direction)
                if neighbor in grid:
                    edges.append((coord, neighbor))
        rng.shuffle(edges)

        sets = DisjointSet(grid.size)
        for first, second in edges:
            if sets.union(grid.index_of(first), grid.index_of(second)):
                grid.carve_passage(first, second)
                if sets.components == 1:
                    break
