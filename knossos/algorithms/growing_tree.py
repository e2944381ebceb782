"""
Growing Tree algorithm - generalized framework for maze generation.

A cell is selected from an active list, carved into a random unvisited
neighbour (which joins the list) or removed from the list when it has none.
The selection method decides the character of the maze:

- newest: Always choose the most recent cell (like Recursive Backtracking)
- oldest: Always choose the oldest cell (long straight corridors)
- middle: Choose the middle of the list
- random: Choose a random cell (like simplified Prim's)
- mixed: 50% newest, 50% random (balanced characteristics)

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.coords import Coordinate
    from knossos.core.grid import Grid


class GrowingMethod(str, Enum):
    """Selection strategy for the Growing Tree active list."""

    RANDOM = "random"
    NEWEST = "newest"
    OLDEST = "oldest"
    MIDDLE = "middle"
    MIXED = "mixed"


class GrowingTree(BaseMazeAlgorithm):
    """Active-list carving with a configurable selection method."""

    name = "growing_tree"

    def __init__(self, method: GrowingMethod | str = GrowingMethod.RANDOM):
        self.method = GrowingMethod(method)

    def _select(self, active: list[Coordinate], rng: random.Random) -> int:
        """Index into ``active`` of the cell to expand next."""
        if self.method is GrowingMethod.NEWEST:
            return len(active) - 1
        if self.method is GrowingMethod.OLDEST:
            return 0
        if self.method is GrowingMethod.MIDDLE:
            return len(active) // 2
        if self.method is GrowingMethod.MIXED and rng.random() < 0.5:
            return len(active) - 1
        return rng.randrange(len(active))

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        origin = start if start is not None else grid.random_coordinate(rng)
        visited = {origin}
        active = [origin]

        while active:
            index = self._select(active, rng)
            current = active[index]
            unvisited = grid.unvisited_neighbors(current, visited)

            if unvisited:
                neighbor = rng.choice(unvisited)
                grid.carve_passage(current, neighbor)
                visited.add(neighbor)
                active.append(neighbor)
            else:
                del active[index]

    def __repr__(self) -> str:
        return f"GrowingTree(method={self.method.value!r})"
