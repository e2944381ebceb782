"""
Immutable maze value and perfect-maze verification.

A :class:`Maze` wraps a frozen :class:`~knossos.core.grid.Grid` together with
the facts gathered when it was assembled: its ends (cells with exactly one
opening), the optional start and goal, and the algorithm and seed used.

Mathematical Foundation:
Perfect mazes are spanning trees on grid graphs, ensuring:
- Connectivity: |V| vertices connected by |V|-1 edges
- Acyclicity: No loops in the graph structure
- Uniqueness: Exactly one path between any two vertices
"""

from __future__ import annotations

from collections import deque
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

import networkx as nx
import numpy as np

from knossos.core.coords import Coordinate, Direction, as_coordinate
from knossos.utils.exceptions import validate_coordinate

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray

    from knossos.core.cell import Cell
    from knossos.core.grid import Grid


@dataclass(frozen=True)
class MazeVerification:
    """
    Result of :func:`verify_perfect_maze`.

    Attributes:
        is_perfect: Connected and free of loops
        is_connected: Every cell reachable from (0, 0)
        is_no_loops: Exactly ``total_cells - 1`` passages
        visited_cells: Number of cells reachable from (0, 0)
        total_cells: Number of cells in the grid
        passage_count: Number of open connections
        expected_passages: ``total_cells - 1``
    """

    is_perfect: bool
    is_connected: bool
    is_no_loops: bool
    visited_cells: int
    total_cells: int
    passage_count: int
    expected_passages: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def verify_perfect_maze(grid: Grid) -> MazeVerification:
    """
    Verify that a grid holds a perfect maze (fully connected, no loops).

    Args:
        grid: Grid to verify, frozen or not

    Returns:
        Verification results
    """
    origin = Coordinate(0, 0)
    visited = {origin}
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        for neighbor in grid.reachable_neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    total_cells = grid.size
    is_connected = len(visited) == total_cells

    passage_count = grid.passage_count()
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages

    return MazeVerification(
        is_perfect=is_connected and is_no_loops,
        is_connected=is_connected,
        is_no_loops=is_no_loops,
        visited_cells=len(visited),
        total_cells=total_cells,
        passage_count=passage_count,
        expected_passages=expected_passages,
    )


class Maze:
    """
    Assembled, read-only maze.

    Instances are produced by :class:`knossos.builder.MazeBuilder`; the grid
    they hold is frozen, so nothing can carve into a maze after assembly.
    A start or goal outside the grid raises :class:`OutOfBoundsError`.
    """

    def __init__(
        self,
        grid: Grid,
        start: tuple[int, int] | None = None,
        goal: tuple[int, int] | None = None,
        algorithm: str | None = None,
        seed: int | None = None,
    ):
        for coord in (start, goal):
            if coord is not None:
                validate_coordinate(coord, grid.width, grid.height, component="Maze")

        self._grid = grid if grid.frozen else grid.copy().freeze()
        self._start = as_coordinate(start) if start is not None else None
        self._goal = as_coordinate(goal) if goal is not None else None
        self._algorithm = algorithm
        self._seed = seed
        self._ends = tuple(coord for coord, cell in self if cell.is_end())

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def grid(self) -> Grid:
        """Frozen underlying grid."""
        return self._grid

    @property
    def start(self) -> Coordinate | None:
        return self._start

    @property
    def goal(self) -> Coordinate | None:
        return self._goal

    @property
    def algorithm(self) -> str | None:
        """Tag of the algorithm that carved this maze."""
        return self._algorithm

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def ends(self) -> list[Coordinate]:
        """Cells with exactly three walls, in row-major order."""
        return list(self._ends)

    def cell_at(self, coord: tuple[int, int]) -> Cell:
        """
        Cell at ``coord``.

        Raises:
            OutOfBoundsError: If ``coord`` is outside the maze
        """
        return self._grid.cell_at(coord)

    def __getitem__(self, coord: tuple[int, int]) -> Cell:
        return self._grid.cell_at(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self._grid

    def __iter__(self) -> Iterator[tuple[Coordinate, Cell]]:
        for coord in self._grid.coordinates():
            yield coord, self._grid.cell_at(coord)

    def __len__(self) -> int:
        return self._grid.size

    def is_carved(self, coord: tuple[int, int], direction: Direction) -> bool:
        return self._grid.is_carved(coord, direction)

    def reachable_neighbors(self, coord: tuple[int, int]) -> list[Coordinate]:
        """Neighbours joined to ``coord`` by an open passage, in N, S, W, E order."""
        return self._grid.reachable_neighbors(coord)

    def to_bits_array(self) -> NDArray[np.uint8]:
        """Read-only ``(height, width)`` table of raw cell masks."""
        return self._grid.to_array()

    def to_occupancy_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Convert maze to an occupancy grid.

        Args:
            wall_thickness: Thickness of walls in array cells

        Each cell body is a ``t x t`` block of zeros. An open passage clears
        the whole gap between two bodies, ``t + 1`` slots long, so a perfect
        maze has ``n * t * t + (n - 1) * (t + 1) * t`` zeros for ``n`` cells.

        Returns:
            Array where 1 = wall, 0 = passage, of shape
            ``(height * (2t + 1) + t, width * (2t + 1) + t)``
        """
        if wall_thickness < 1:
            raise ValueError(f"wall_thickness must be at least 1, got {wall_thickness}")

        t = wall_thickness
        cell_size = 2 * t + 1
        occupancy = np.ones((self.height * cell_size + t, self.width * cell_size + t), dtype=np.int32)

        for (x, y), cell in self:
            r = y * cell_size + t
            c = x * cell_size + t

            occupancy[r : r + t, c : c + t] = 0

            if cell.is_carved(Direction.NORTH):
                occupancy[r - t : r, c : c + t] = 0
            if cell.is_carved(Direction.SOUTH):
                occupancy[r + t : r + 2 * t, c : c + t] = 0
            if cell.is_carved(Direction.WEST):
                occupancy[r : r + t, c - t : c] = 0
            if cell.is_carved(Direction.EAST):
                occupancy[r : r + t, c + t : c + 2 * t] = 0

        return occupancy

    def to_graph(self) -> nx.Graph:
        """
        Graph of open passages.

        Nodes are :class:`Coordinate` values (every cell, even isolated ones);
        edges join cells with an open shared wall.
        """
        graph = nx.Graph()
        graph.add_nodes_from(self._grid.coordinates())
        for coord in self._grid.coordinates():
            for direction in (Direction.SOUTH, Direction.EAST):
                if self._grid.is_carved(coord, direction):
                    graph.add_edge(coord, coord.step(direction))
        return graph

    def verify(self) -> MazeVerification:
        return verify_perfect_maze(self._grid)

    def is_valid(self) -> bool:
        """True if the maze is connected and free of loops."""
        return self.verify().is_perfect

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (self._grid, self._start, self._goal) == (other._grid, other._start, other._goal)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Maze(width={self.width}, height={self.height}, algorithm={self._algorithm!r}, "
            f"seed={self._seed}, ends={len(self._ends)})"
        )
