"""
Hunt-and-Kill algorithm.

Random walk into unvisited cells until stuck, then scan the grid row by row
for the first unvisited cell touching the visited region, join it to a random
visited neighbour and resume walking from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.coords import Coordinate
    from knossos.core.grid import Grid


class HuntAndKill(BaseMazeAlgorithm):
    """Walk phase plus row-major hunt phase."""

    name = "hunt_and_kill"

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        current: Coordinate | None = start if start is not None else grid.random_coordinate(rng)
        visited = {current}

        while current is not None:
            unvisited = grid.unvisited_neighbors(current, visited)
            if unvisited:
                neighbor = rng.choice(unvisited)
                grid.carve_passage(current, neighbor)
                visited.add(neighbor)
                current = neighbor
            else:
                current = self._hunt(grid, rng, visited)

    @staticmethod
    def _hunt(grid: Grid, rng: random.Random, visited: set[Coordinate]) -> Coordinate | None:
        """Join the first row-major unvisited cell next to ``visited``; None when done."""
        for coord in grid.coordinates():
            if coord in visited:
                continue
            joined = [n for n in grid.neighbors(coord) if n in visited]
            if joined:
                grid.carve_passage(coord, rng.choice(joined))
                visited.add(coord)
                return coord
        return None
