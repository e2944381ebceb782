"""
Sidewinder algorithm.

Works one row at a time from the southern edge northwards. Within a row,
cells are collected into a run moving east; each run is closed at random (or
at the eastern edge) by carving north from one of its members. The northern
row has nothing above it and becomes a single east-west corridor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from knossos.core.coords import Coordinate, Direction

from .base import BaseMazeAlgorithm

if TYPE_CHECKING:
    import random

    from knossos.core.grid import Grid


class Sidewinder(BaseMazeAlgorithm):
    """Run-based row carving; a supplied start moves its row to the front."""

    name = "sidewinder"

    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        rows = list(range(grid.height - 1, -1, -1))
        if start is not None:
            rows.remove(start.y)
            rows.insert(0, start.y)

        for y in rows:
            run: list[Coordinate] = []
            for x in range(grid.width):
                coord = Coordinate(x, y)
                run.append(coord)

                at_east_edge = x == grid.width - 1
                at_north_edge = y == 0
                close_run = at_east_edge or (not at_north_edge and rng.random() < 0.5)

                if close_run:
                    if not at_north_edge:
                        member = rng.choice(run)
                        grid.carve(member, Direction.NORTH)
                    run = []
                else:
                    grid.carve(coord, Direction.EAST)
