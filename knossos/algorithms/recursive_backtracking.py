"""
Recursive Backtracking (depth-first search).

Creates mazes with long, winding passages and relatively few dead ends. The
recursion is unrolled into an explicit stack so large grids cannot exhaust the
interpreter's call depth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.coords import Coordinate
    from knossos.core.grid import Grid


class RecursiveBacktracking(BaseMazeAlgorithm):
    """
    Depth-first carving.

    Algorithm:
    1. Start at the given (or a random) cell, mark it visited
    2. While the stack is not empty:
       - Choose a random unvisited neighbour of the top cell
       - Carve into it and push it
    3. Pop when the top cell has no unvisited neighbours
    """

    name = "recursive_backtracking"

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        origin = start if start is not None else grid.random_coordinate(rng)
        visited = {origin}
        stack = [origin]

        while stack:
            current = stack[-1]
            unvisited = grid.unvisited_neighbors(current, visited)

            if unvisited:
                neighbor = rng.choice(unvisited)
                grid.carve_passage(current, neighbor)
                visited.add(neighbor)
                stack.append(neighbor)
            else:
                stack.pop()
