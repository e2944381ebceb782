"""
Fluent maze builder.

Collects the generation request, checks it before any grid is allocated, runs
the selected algorithm against a fresh grid and freezes the result into a
:class:`~knossos.maze.Maze`.

Example:
    >>> maze = MazeBuilder().width(20).height(15).algorithm("wilsons").seed(42).build()
    >>> maze.is_valid()
    True
"""

from __future__ import annotations

import logging
import random
from typing import Any

from knossos.algorithms import BaseMazeAlgorithm, MazeAlgorithm, create_algorithm
from knossos.core.grid import Grid
from knossos.maze import Maze
from knossos.utils.exceptions import (
    InvalidStartError,
    MazeError,
    validate_coordinate,
    validate_dimensions,
    validate_seed,
)
from knossos.utils.maze_logging import (
    LoggedOperation,
    get_logger,
    log_generation_completion,
    log_generation_start,
    log_validation_error,
)

logger = get_logger(__name__)

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
DEFAULT_ALGORITHM = MazeAlgorithm.RECURSIVE_BACKTRACKING


class MazeBuilder:
    """Step-by-step configuration of a maze generation request."""

    def __init__(self):
        self._width: Any = DEFAULT_WIDTH
        self._height: Any = DEFAULT_HEIGHT
        self._algorithm: MazeAlgorithm | str | BaseMazeAlgorithm = DEFAULT_ALGORITHM
        self._seed: int | None = None
        self._start: tuple[int, int] | None = None
        self._goal: tuple[int, int] | None = None

    def width(self, width: int) -> MazeBuilder:
        self._width = width
        return self

    def height(self, height: int) -> MazeBuilder:
        self._height = height
        return self

    def size(self, width: int, height: int) -> MazeBuilder:
        """Set both dimensions at once."""
        self._width = width
        self._height = height
        return self

    def algorithm(self, algorithm: MazeAlgorithm | str | BaseMazeAlgorithm) -> MazeBuilder:
        """
        Select the carving algorithm.

        Args:
            algorithm: Tag, tag string, or a configured strategy instance
        """
        self._algorithm = algorithm
        return self

    def seed(self, seed: int | None) -> MazeBuilder:
        self._seed = seed
        return self

    def start(self, start: tuple[int, int] | None) -> MazeBuilder:
        self._start = start
        return self

    def goal(self, goal: tuple[int, int] | None) -> MazeBuilder:
        self._goal = goal
        return self

    def _resolve_algorithm(self) -> BaseMazeAlgorithm:
        if isinstance(self._algorithm, BaseMazeAlgorithm):
            return self._algorithm
        return create_algorithm(self._algorithm)

    def _validate(self) -> BaseMazeAlgorithm:
        """
        Check the request in a fixed order: dimensions, seed, algorithm, start, goal.

        Returns:
            The resolved carving strategy
        """
        try:
            validate_dimensions(self._width, self._height, component="MazeBuilder")
            validate_seed(self._seed, component="MazeBuilder")
            strategy = self._resolve_algorithm()
            if self._start is not None:
                try:
                    validate_coordinate(self._start, self._width, self._height)
                except MazeError as exc:
                    raise InvalidStartError(
                        self._start, self._width, self._height, component="MazeBuilder"
                    ) from exc
                if not strategy.accepts_start:
                    raise InvalidStartError(
                        self._start,
                        self._width,
                        self._height,
                        component="MazeBuilder",
                        reason=f"{strategy.name} has no starting cell",
                    )
            if self._goal is not None:
                validate_coordinate(self._goal, self._width, self._height, component="MazeBuilder")
        except MazeError as exc:
            log_validation_error(logger, "MazeBuilder", exc.message, exc.suggested_action)
            raise
        return strategy

    def build(self) -> Maze:
        """
        Generate the maze.

        Returns:
            Immutable, verified-perfect maze

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
            InvalidSeedError: If the seed is not a non-negative integer
            InvalidStartError: If the start lies outside the grid, or the algorithm
                has no starting cell
            OutOfBoundsError: If the goal lies outside the grid
            ValueError: If the algorithm tag is unknown
        """
        strategy = self._validate()

        config = {
            "width": self._width,
            "height": self._height,
            "seed": self._seed,
            "start": self._start,
            "goal": self._goal,
            "strategy": repr(strategy),
        }
        log_generation_start(logger, strategy.name, config)

        rng = random.Random(self._seed)
        grid = Grid(self._width, self._height)
        with LoggedOperation(logger, f"{strategy.name} generation", log_level=logging.DEBUG) as operation:
            strategy.generate(grid, rng, self._start)

        maze = Maze(grid.freeze(), start=self._start, goal=self._goal, algorithm=strategy.name, seed=self._seed)
        log_generation_completion(
            logger, strategy.name, maze.width, maze.height, len(maze.ends), operation.duration or 0.0
        )
        return maze
