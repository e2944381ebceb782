"""
Dense rectangular grid of cell masks.

The grid is the only owner of wall state. Every mutation goes through
:meth:`Grid.carve_passage`, which opens the shared wall on both cells at once,
so wall symmetry holds after every call. Algorithms receive this narrow
contract and never touch raw masks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from knossos.utils.exceptions import (
    FrozenGridError,
    NotAdjacentError,
    OutOfBoundsError,
    WallSymmetryError,
    validate_dimensions,
)

from .cell import PASSAGE_MASK, Cell
from .coords import DIRECTIONS, Coordinate, Direction, as_coordinate

if TYPE_CHECKING:
    import random
    from collections.abc import Collection, Iterator

    from numpy.typing import ArrayLike, NDArray


class Grid:
    """Grid of cells for maze generation."""

    def __init__(self, width: int, height: int):
        """
        Initialize a fully walled grid.

        Args:
            width: Number of columns (must be > 0)
            height: Number of rows (must be > 0)

        Raises:
            InvalidDimensionError: If either dimension is not a positive integer
        """
        validate_dimensions(width, height, component="Grid")
        self._width = width
        self._height = height
        self._cells: NDArray[np.uint8] = np.zeros((height, width), dtype=np.uint8)
        self._frozen = False

    @classmethod
    def from_bits(cls, masks: ArrayLike) -> Grid:
        """
        Rebuild a grid from externally stored masks.

        Args:
            masks: 2D array-like of shape (height, width) with values in [0, 15]

        Raises:
            InvalidDimensionError: If the array is not a non-empty 2D table
            ValueError: If a mask is outside [0, 15]
            WallSymmetryError: If two neighbours disagree about their shared wall
        """
        array = np.asarray(masks)
        if array.ndim != 2:
            raise ValueError(f"Cell masks must form a 2D table, got {array.ndim} dimensions")
        height, width = array.shape
        grid = cls(width, height)

        if array.size and (array.min() < 0 or array.max() > PASSAGE_MASK):
            raise ValueError(f"Cell masks must lie in [0, {PASSAGE_MASK}]")
        grid._cells[:, :] = array.astype(np.uint8)

        for coord in grid.coordinates():
            for direction in (Direction.SOUTH, Direction.EAST):
                neighbor = coord.step(direction)
                if neighbor in grid:
                    if grid.is_carved(coord, direction) != grid.is_carved(neighbor, direction.opposite):
                        raise WallSymmetryError(coord, neighbor, component="Grid")
                elif grid.is_carved(coord, direction):
                    raise WallSymmetryError(coord, neighbor, component="Grid")
            for direction in (Direction.NORTH, Direction.WEST):
                if coord.step(direction) not in grid and grid.is_carved(coord, direction):
                    raise WallSymmetryError(coord, coord.step(direction), component="Grid")

        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._width * self._height

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, coord: object) -> bool:
        try:
            x, y = coord  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        return coord in self

    def _check(self, coord: tuple[int, int]) -> Coordinate:
        if coord not in self:
            raise OutOfBoundsError(coord, self._width, self._height, component="Grid")
        return as_coordinate(coord)

    def index_of(self, coord: tuple[int, int]) -> int:
        """Row-major flat index of ``coord``."""
        x, y = self._check(coord)
        return y * self._width + x

    def cell_at(self, coord: tuple[int, int]) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfBoundsError: If ``coord`` is outside the grid
        """
        x, y = self._check(coord)
        return Cell(int(self._cells[y, x]))

    def __getitem__(self, coord: tuple[int, int]) -> Cell:
        return self.cell_at(coord)

    def coordinates(self) -> Iterator[Coordinate]:
        """All coordinates in row-major order."""
        for y in range(self._height):
            for x in range(self._width):
                yield Coordinate(x, y)

    def is_carved(self, coord: tuple[int, int], direction: Direction) -> bool:
        """True if the passage from ``coord`` towards ``direction`` is open."""
        x, y = self._check(coord)
        return bool(int(self._cells[y, x]) & direction)

    def direction_between(self, first: tuple[int, int], second: tuple[int, int]) -> Direction:
        """
        Direction leading from ``first`` to the adjacent ``second``.

        Raises:
            NotAdjacentError: If the cells do not share a wall
        """
        a = as_coordinate(first)
        b = as_coordinate(second)
        for direction in DIRECTIONS:
            if a.step(direction) == b:
                return direction
        raise NotAdjacentError(a, b, component="Grid")

    def carve_passage(self, first: tuple[int, int], second: tuple[int, int]) -> Coordinate:
        """
        Open the wall shared by two adjacent cells, on both sides.

        Args:
            first: Cell to carve from
            second: Adjacent cell to carve into

        Returns:
            ``second`` as a :class:`Coordinate`

        Raises:
            OutOfBoundsError: If either cell is outside the grid
            NotAdjacentError: If the cells are not adjacent
            FrozenGridError: If the grid belongs to an assembled maze
        """
        if self._frozen:
            raise FrozenGridError("carve_passage", component="Grid")
        a = self._check(first)
        b = self._check(second)
        direction = self.direction_between(a, b)

        # Both masks are computed before either is written
        new_a = int(self._cells[a.y, a.x]) | int(direction)
        new_b = int(self._cells[b.y, b.x]) | int(direction.opposite)
        self._cells[a.y, a.x] = new_a
        self._cells[b.y, b.x] = new_b
        return b

    def carve(self, coord: tuple[int, int], direction: Direction) -> Coordinate:
        """Carve from ``coord`` towards ``direction`` and return the neighbour."""
        start = self._check(coord)
        return self.carve_passage(start, start.step(direction))

    def neighbors(self, coord: tuple[int, int]) -> list[Coordinate]:
        """
        In-bounds neighbours of ``coord`` regardless of walls.

        Returns:
            Up to four coordinates in N, S, W, E order
        """
        center = self._check(coord)
        return [n for n in (center.step(d) for d in DIRECTIONS) if n in self]

    def unvisited_neighbors(self, coord: tuple[int, int], visited: Collection[Coordinate]) -> list[Coordinate]:
        """Neighbours of ``coord`` not yet present in ``visited``."""
        return [n for n in self.neighbors(coord) if n not in visited]

    def reachable_neighbors(self, coord: tuple[int, int]) -> list[Coordinate]:
        """Neighbours joined to ``coord`` by an open passage."""
        center = self._check(coord)
        mask = int(self._cells[center.y, center.x])
        return [n for n in (center.step(d) for d in DIRECTIONS if mask & d) if n in self]

    def passage_count(self) -> int:
        """Number of open inter-cell connections (each counted once)."""
        south = np.count_nonzero(self._cells & int(Direction.SOUTH))
        east = np.count_nonzero(self._cells & int(Direction.EAST))
        return int(south + east)

    def random_coordinate(self, rng: random.Random) -> Coordinate:
        """Uniformly drawn coordinate."""
        return Coordinate(rng.randrange(self._width), rng.randrange(self._height))

    def to_array(self) -> NDArray[np.uint8]:
        """Read-only copy of the ``(height, width)`` mask table."""
        array = self._cells.copy()
        array.flags.writeable = False
        return array

    def copy(self) -> Grid:
        """Unfrozen deep copy."""
        clone = Grid(self._width, self._height)
        clone._cells[:, :] = self._cells
        return clone

    def freeze(self) -> Grid:
        """Reject all further carving; returns ``self``."""
        self._frozen = True
        self._cells.flags.writeable = False
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, passages={self.passage_count()})"
