"""Grid and cell data model: coordinates, wall bitmasks, union-find."""

from .cell import PASSAGE_MASK, Cell
from .coords import DIRECTIONS, Coordinate, Direction, as_coordinate
from .disjoint_set import DisjointSet
from .grid import Grid

__all__ = [
    "DIRECTIONS",
    "PASSAGE_MASK",
    "Cell",
    "Coordinate",
    "Direction",
    "DisjointSet",
    "Grid",
    "as_coordinate",
]
