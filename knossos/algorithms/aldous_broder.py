"""
Aldous-Broder algorithm.

An unbiased random walk over the whole grid that carves a passage whenever it
enters a cell for the first time. It produces uniform spanning trees but may
need many steps to visit the last few cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.coords import Coordinate
    from knossos.core.grid import Grid


class AldousBroder(BaseMazeAlgorithm):
    """Random walk carving on first entry."""

    name = "aldous_broder"

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        current = start if start is not None else grid.random_coordinate(rng)
        visited = {current}

        while len(visited) < grid.size:
            neighbor = rng.choice(grid.neighbors(current))
            if neighbor not in visited:
                grid.carve_passage(current, neighbor)
                visited.add(neighbor)
            current = neighbor
