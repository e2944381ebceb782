"""
Unit tests for the grid store and its symmetric carving contract.
"""

import random

import pytest

import numpy as np

from knossos.core import Cell, Coordinate, Direction, Grid
from knossos.utils.exceptions import (
    FrozenGridError,
    InvalidDimensionError,
    NotAdjacentError,
    OutOfBoundsError,
    WallSymmetryError,
)


class TestGridConstruction:
    """Test grid allocation and dimension checks."""

    def test_fresh_grid_is_fully_walled(self):
        grid = Grid(3, 2)

        assert grid.width == 3
        assert grid.height == 2
        assert grid.size == 6
        assert grid.passage_count() == 0
        assert all(grid.cell_at(c).walls_count() == 4 for c in grid.coordinates())

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 3), (3, -2), (0, 0)])
    def test_rejects_non_positive_dimensions(self, width, height):
        with pytest.raises(InvalidDimensionError):
            Grid(width, height)

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_rejects_non_integer_dimensions(self, value):
        with pytest.raises(InvalidDimensionError):
            Grid(value, 3)

    def test_coordinates_are_row_major(self):
        grid = Grid(2, 2)
        assert list(grid.coordinates()) == [(0, 0), (1, 0), (0, 1), (1, 1)]


class TestGridAccess:
    """Test bounds-checked access and neighbour queries."""

    def test_cell_at_out_of_bounds(self):
        grid = Grid(3, 3)
        for coord in [(3, 0), (0, 3), (-1, 0), (0, -1)]:
            with pytest.raises(OutOfBoundsError):
                grid.cell_at(coord)

    def test_out_of_bounds_is_index_error(self):
        with pytest.raises(IndexError):
            Grid(2, 2)[(5, 5)]

    def test_contains(self):
        grid = Grid(3, 2)
        assert (2, 1) in grid
        assert grid.in_bounds((0, 0))
        assert not grid.in_bounds((3, 0))
        assert (3, 1) not in grid
        assert (0, -1) not in grid
        assert "nope" not in grid

    def test_neighbors_fixed_order(self):
        grid = Grid(3, 3)
        assert grid.neighbors((1, 1)) == [(1, 0), (1, 2), (0, 1), (2, 1)]

    def test_neighbors_at_corner(self):
        grid = Grid(3, 3)
        assert grid.neighbors((0, 0)) == [(0, 1), (1, 0)]
        assert grid.neighbors((2, 2)) == [(2, 1), (1, 2)]

    def test_single_cell_has_no_neighbors(self):
        assert Grid(1, 1).neighbors((0, 0)) == []

    def test_unvisited_neighbors(self):
        grid = Grid(3, 3)
        visited = {Coordinate(1, 0), Coordinate(2, 1)}
        assert grid.unvisited_neighbors((1, 1), visited) == [(1, 2), (0, 1)]

    def test_index_of(self):
        grid = Grid(4, 3)
        assert grid.index_of((0, 0)) == 0
        assert grid.index_of((3, 0)) == 3
        assert grid.index_of((1, 2)) == 9

    def test_random_coordinate_in_bounds(self):
        grid = Grid(4, 3)
        rng = random.Random(7)
        for _ in range(50):
            assert grid.random_coordinate(rng) in grid


class TestCarvePassage:
    """Test the single mutation entry point."""

    @pytest.mark.parametrize(
        ("first", "second", "direction"),
        [
            ((1, 1), (1, 0), Direction.NORTH),
            ((1, 1), (1, 2), Direction.SOUTH),
            ((1, 1), (0, 1), Direction.WEST),
            ((1, 1), (2, 1), Direction.EAST),
        ],
    )
    def test_opens_both_sides(self, first, second, direction):
        grid = Grid(3, 3)
        returned = grid.carve_passage(first, second)

        assert returned == second
        assert grid.is_carved(first, direction)
        assert grid.is_carved(second, direction.opposite)
        assert grid.passage_count() == 1

    def test_carve_by_direction(self):
        grid = Grid(2, 2)
        assert grid.carve((0, 0), Direction.EAST) == (1, 0)
        assert grid.cell_at((0, 0)) == Cell(int(Direction.EAST))
        assert grid.cell_at((1, 0)) == Cell(int(Direction.WEST))

    def test_carving_is_idempotent(self):
        grid = Grid(2, 1)
        grid.carve_passage((0, 0), (1, 0))
        grid.carve_passage((1, 0), (0, 0))
        assert grid.passage_count() == 1

    @pytest.mark.parametrize("second", [(2, 2), (1, 1), (3, 1), (1, 3)])
    def test_not_adjacent(self, second):
        grid = Grid(4, 4)
        with pytest.raises(NotAdjacentError):
            grid.carve_passage((1, 1), second)
        assert grid.passage_count() == 0

    def test_out_of_bounds(self):
        grid = Grid(2, 2)
        with pytest.raises(OutOfBoundsError):
            grid.carve_passage((1, 1), (2, 1))
        with pytest.raises(OutOfBoundsError):
            grid.carve((0, 0), Direction.NORTH)
        assert grid.passage_count() == 0

    def test_frozen_grid_rejects_carving(self):
        grid = Grid(2, 2).freeze()
        assert grid.frozen
        with pytest.raises(FrozenGridError):
            grid.carve_passage((0, 0), (1, 0))

    def test_reachable_neighbors(self, valid_grid):
        assert valid_grid.reachable_neighbors((1, 1)) == [(1, 2), (0, 1), (2, 1)]
        assert valid_grid.reachable_neighbors((0, 0)) == [(0, 1)]

    def test_wall_symmetry_everywhere(self, valid_grid):
        for coord in valid_grid.coordinates():
            for direction in (Direction.SOUTH, Direction.EAST):
                neighbor = coord.step(direction)
                if neighbor in valid_grid:
                    assert valid_grid.is_carved(coord, direction) == valid_grid.is_carved(
                        neighbor, direction.opposite
                    )


class TestGridInterchange:
    """Test array export and import."""

    def test_to_array(self, valid_grid, valid_masks):
        array = valid_grid.to_array()

        assert array.shape == (4, 4)
        assert array.dtype == np.uint8
        np.testing.assert_array_equal(array, np.array(valid_masks))
        assert not array.flags.writeable

    def test_from_bits_roundtrip(self, valid_grid, valid_masks):
        assert Grid.from_bits(valid_masks) == valid_grid

    def test_from_bits_rejects_asymmetric_walls(self):
        with pytest.raises(WallSymmetryError):
            Grid.from_bits([[8, 0]])

    def test_from_bits_rejects_boundary_opening(self):
        with pytest.raises(WallSymmetryError):
            Grid.from_bits([[1]])

    def test_from_bits_rejects_bad_masks(self):
        with pytest.raises(ValueError):
            Grid.from_bits([[16]])
        with pytest.raises(ValueError):
            Grid.from_bits([1, 2, 3])

    def test_copy_is_independent(self, valid_grid):
        frozen = valid_grid.freeze()
        clone = frozen.copy()

        assert clone == frozen
        assert not clone.frozen
        clone.carve_passage((0, 0), (1, 0))
        assert clone != frozen
