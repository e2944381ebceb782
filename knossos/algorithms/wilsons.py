"""
Wilson's algorithm using loop-erased random walks.

Produces truly unbiased mazes where every spanning tree of the grid is equally
likely.

Algorithm:
1. Mark one cell as part of the maze
2. From a random cell outside the maze, walk randomly until the maze is hit,
   erasing any loop the walk makes along the way
3. Carve the remaining path into the maze
4. Repeat until every cell belongs to the maze
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.coords import Coordinate
    from knossos.core.grid import Grid


class Wilsons(BaseMazeAlgorithm):
    """Loop-erased random walks; a supplied start is the initial tree cell."""

    name = "wilsons"

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        origin = start if start is not None else grid.random_coordinate(rng)
        in_maze = {origin}
        remaining = [c for c in grid.coordinates() if c != origin]

        while remaining:
            cell = rng.choice(remaining)
            path = [cell]
            position = {cell: 0}

            while cell not in in_maze:
                cell = rng.choice(grid.neighbors(cell))
                if cell in position:
                    # Loop: erase back to the first visit
                    cut = position[cell] + 1
                    for erased in path[cut:]:
                        del position[erased]
                    path = path[:cut]
                else:
                    position[cell] = len(path)
                    path.append(cell)

            for current, following in zip(path, path[1:]):
                grid.carve_passage(current, following)
            in_maze.update(path)
            remaining = [c for c in remaining if c not in in_maze]
