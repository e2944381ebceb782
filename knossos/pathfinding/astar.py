"""
A* search over the open passages of a maze.

Every step between adjacent cells costs 1 and moves along a single axis, so
Manhattan distance never overestimates the remaining cost and A* returns
shortest paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import networkx as nx

from knossos.core.coords import Coordinate, as_coordinate
from knossos.utils.exceptions import InvalidStartError, UnreachableGoalError, validate_coordinate
from knossos.utils.maze_logging import get_logger, log_pathfinding_result

if TYPE_CHECKING:
    from knossos.maze import Maze

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathResult:
    """
    Shortest path from a start cell to one goal.

    Attributes:
        goal: Target coordinate
        path: Coordinates from start to goal, both inclusive
        cost: Number of steps (``len(path) - 1``)
    """

    goal: Coordinate
    path: tuple[Coordinate, ...]
    cost: int

    @property
    def start(self) -> Coordinate:
        return self.path[0]

    def contains(self, coord: tuple[int, int]) -> bool:
        """True if the path passes through ``coord``."""
        return as_coordinate(coord) in self.path

    def __len__(self) -> int:
        return len(self.path)


def manhattan_heuristic(first: Coordinate, second: Coordinate) -> int:
    return abs(first[0] - second[0]) + abs(first[1] - second[1])


def find_path(maze: Maze, start: tuple[int, int], goal: tuple[int, int], graph: nx.Graph | None = None) -> PathResult:
    """
    Lowest-cost path between two cells.

    Args:
        maze: Maze to search
        start: First cell of the path
        goal: Last cell of the path
        graph: Passage graph from :meth:`Maze.to_graph`, reused across calls

    Returns:
        Path result for ``goal``

    Raises:
        OutOfBoundsError: If either coordinate lies outside the maze
        UnreachableGoalError: If no open path joins the two cells
    """
    validate_coordinate(start, maze.width, maze.height, component="find_path")
    validate_coordinate(goal, maze.width, maze.height, component="find_path")
    source = as_coordinate(start)
    target = as_coordinate(goal)

    if graph is None:
        graph = maze.to_graph()

    try:
        nodes = nx.astar_path(graph, source, target, heuristic=manhattan_heuristic)
    except nx.NetworkXNoPath as exc:
        log_pathfinding_result(logger, source, target, None)
        raise UnreachableGoalError(source, target, component="find_path") from exc

    result = PathResult(goal=target, path=tuple(Coordinate(*n) for n in nodes), cost=len(nodes) - 1)
    log_pathfinding_result(logger, source, target, result.cost)
    return result


def find_paths(
    maze: Maze,
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
) -> dict[Coordinate, PathResult]:
    """
    Rank shortest paths from one start to several goals.

    Goals are, in order of preference: ``goal``, ``maze.goal``, or every maze
    end when neither is set.

    Args:
        maze: Maze to search
        start: Start cell (defaults to ``maze.start``)
        goal: Single explicit goal

    Returns:
        Mapping from goal to result, ordered by ascending cost and then
        row-major goal position

    Raises:
        InvalidStartError: If no start is given and the maze has none
        OutOfBoundsError: If a coordinate lies outside the maze
        UnreachableGoalError: If any goal cannot be reached
    """
    if start is None:
        start = maze.start
    if start is None:
        raise InvalidStartError(
            None, maze.width, maze.height, component="find_paths", reason="No start given and the maze has none"
        )
    validate_coordinate(start, maze.width, maze.height, component="find_paths")

    if goal is not None:
        validate_coordinate(goal, maze.width, maze.height, component="find_paths")
        goals = [as_coordinate(goal)]
    elif maze.goal is not None:
        goals = [maze.goal]
    else:
        goals = maze.ends

    graph = maze.to_graph()
    results = [find_path(maze, start, g, graph=graph) for g in goals]
    results.sort(key=lambda r: (r.cost, r.goal.y, r.goal.x))
    return {r.goal: r for r in results}
