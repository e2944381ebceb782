"""
Randomized Prim's algorithm.

Grows the maze outwards from one cell by keeping a frontier of walls between
the visited region and the rest of the grid, and repeatedly carving a random
frontier wall whose far side is still unvisited.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.coords import Coordinate
    from knossos.core.grid import Grid


class Prims(BaseMazeAlgorithm):
    """Random edge frontier around the visited set."""

    name = "prims"

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        origin = start if start is not None else grid.random_coordinate(rng)
        visited = {origin}
        frontier = [(origin, n) for n in grid.neighbors(origin)]

        while frontier:
            # Swap-remove keeps each pick O(1)
            index = rng.randrange(len(frontier))
            frontier[index], frontier[-1] = frontier[-1], frontier[index]
            source, target = frontier.pop()

            if target in visited:
                continue

            grid.carve_passage(source, target)
            visited.add(target)
            frontier.extend((target, n) for n in grid.unvisited_neighbors(target, visited))
