"""
Base class for maze carving algorithms.

Every algorithm is a strategy with a single entry point,
:meth:`BaseMazeAlgorithm.generate`, that turns a fully walled grid into a
perfect maze: connected, with exactly ``width * height - 1`` passages. The
explicit ``random.Random`` instance is the only source of randomness, so equal
seeds always give equal mazes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from knossos.core.coords import Coordinate, as_coordinate
from knossos.utils.exceptions import InvalidStartError
from knossos.utils.maze_logging import get_logger

if TYPE_CHECKING:
    import random

    from knossos.core.grid import Grid

logger = get_logger(__name__)


class BaseMazeAlgorithm(ABC):
    """Abstract base for all carving strategies."""

    #: Tag used by :class:`knossos.algorithms.MazeAlgorithm`
    name: str = "base"

    #: False for algorithms with no starting cell; a supplied start is rejected
    accepts_start: bool = True

    def generate(self, grid: Grid, rng: random.Random, start: tuple[int, int] | None = None) -> Grid:
        """
        Carve a spanning tree into ``grid``.

        Args:
            grid: Fully walled grid, mutated in place
            rng: Random source owned by this call
            start: Optional starting cell; its meaning depends on the algorithm

        Returns:
            The same grid, now a perfect maze

        Raises:
            InvalidStartError: If ``start`` is outside the grid, or the algorithm
                has no starting cell (before carving)
        """
        origin = self._validate_start(grid, start)
        logger.debug(f"{self.name}: carving {grid.width}x{grid.height} grid from start={origin}")
        self._carve(grid, rng, origin)
        logger.debug(f"{self.name}: carved {grid.passage_count()} passages")
        return grid

    def _validate_start(self, grid: Grid, start: tuple[int, int] | None) -> Coordinate | None:
        if start is None:
            return None
        try:
            coord = as_coordinate(start)
        except (TypeError, ValueError) as exc:
            raise InvalidStartError(start, grid.width, grid.height, component=self.name) from exc
        if coord not in grid:
            raise InvalidStartError(coord, grid.width, grid.height, component=self.name)
        if not self.accepts_start:
            raise InvalidStartError(
                coord, grid.width, grid.height, component=self.name, reason=f"{self.name} has no starting cell"
            )
        return coord

    @abstractmethod
    def _carve(self, grid: Grid, rng: random.Random, start: Coordinate | None) -> None:
        """Algorithm-specific carving; ``start`` is already validated."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
