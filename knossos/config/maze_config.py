"""
Maze generation configuration.

A :class:`MazeConfig` describes one generation request: dimensions, algorithm
and its options, seed, and optional start and goal. It is the configuration
surface consumed by front ends; programmatic callers can use
:class:`knossos.builder.MazeBuilder` directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from knossos.algorithms import Bias, GrowingMethod, MazeAlgorithm, create_algorithm
from knossos.builder import MazeBuilder
from knossos.pathfinding import find_paths

if TYPE_CHECKING:
    from pathlib import Path

    from knossos.core.coords import Coordinate
    from knossos.maze import Maze
    from knossos.pathfinding import PathResult


class MazeConfig(BaseModel):
    """
    Configuration for a single maze generation run.

    Attributes
    ----------
    width : int
        Number of columns (> 0)
    height : int
        Number of rows (> 0)
    algorithm : MazeAlgorithm
        Carving algorithm (default: recursive_backtracking)
    seed : int | None
        Random seed; None draws fresh entropy (default: None)
    start : tuple[int, int] | None
        Generation start cell, also the pathfinding start (default: None)
    goal : tuple[int, int] | None
        Pathfinding goal (default: None)
    all_ends : bool
        Search paths to every maze end when no goal is set (default: False)
    growing_method : GrowingMethod
        Growing Tree selection method (default: random)
    bias : Bias
        Binary Tree direction pair (default: north_east)
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=10, gt=0)
    height: int = Field(default=10, gt=0)
    algorithm: MazeAlgorithm = MazeAlgorithm.RECURSIVE_BACKTRACKING
    seed: int | None = Field(default=None, ge=0)
    start: tuple[int, int] | None = None
    goal: tuple[int, int] | None = None
    all_ends: bool = False
    growing_method: GrowingMethod = GrowingMethod.RANDOM
    bias: Bias = Bias.NORTH_EAST

    @model_validator(mode="after")
    def validate_coordinates(self) -> MazeConfig:
        """Validate that start and goal lie inside the grid, and that the algorithm takes a start."""
        for name in ("start", "goal"):
            coord = getattr(self, name)
            if coord is not None:
                x, y = coord
                if not (0 <= x < self.width and 0 <= y < self.height):
                    raise ValueError(f"{name} {coord} is outside a {self.width}x{self.height} grid")
        if self.start is not None and not create_algorithm(self.algorithm).accepts_start:
            raise ValueError(f"{self.algorithm.value} has no starting cell; omit start")
        return self

    def algorithm_options(self) -> dict:
        """Keyword options for the selected algorithm."""
        if self.algorithm is MazeAlgorithm.BINARY_TREE:
            return {"bias": self.bias}
        if self.algorithm is MazeAlgorithm.GROWING_TREE:
            return {"method": self.growing_method}
        return {}

    def to_builder(self) -> MazeBuilder:
        strategy = create_algorithm(self.algorithm, **self.algorithm_options())
        return (
            MazeBuilder()
            .size(self.width, self.height)
            .algorithm(strategy)
            .seed(self.seed)
            .start(self.start)
            .goal(self.goal)
        )

    def build(self) -> Maze:
        """Generate the configured maze."""
        return self.to_builder().build()

    def solve(self, maze: Maze) -> dict[Coordinate, PathResult]:
        """
        Paths requested by this configuration.

        Searches to the configured goal, or to every maze end when
        ``all_ends`` is set; returns an empty mapping when neither applies.
        """
        if self.goal is None and not self.all_ends:
            return {}
        return find_paths(maze, start=self.start, goal=self.goal)

    def to_yaml(self, path: str | Path) -> None:
        from .io import save_maze_config

        save_maze_config(self, path)
