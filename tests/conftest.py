"""
Pytest configuration and shared fixtures for the knossos test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import logging
import random

import pytest

from knossos.core import Coordinate, Direction, Grid

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Grid Fixtures
# =============================================================================

# Hand-carved 4x4 perfect maze. Row-major masks (N=1, S=2, W=4, E=8):
#   2  8 12  6
#   9 14  4  3
#  10 13 12  5
#   9 12 12  4
VALID_4X4_MASKS = [
    [2, 8, 12, 6],
    [9, 14, 4, 3],
    [10, 13, 12, 5],
    [9, 12, 12, 4],
]

VALID_4X4_ENDS = [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 1), Coordinate(3, 3)]

_VALID_4X4_CARVES = [
    ((0, 0), Direction.SOUTH),
    ((0, 1), Direction.EAST),
    ((0, 2), Direction.EAST),
    ((0, 2), Direction.SOUTH),
    ((0, 3), Direction.EAST),
    ((1, 0), Direction.EAST),
    ((1, 1), Direction.EAST),
    ((1, 1), Direction.SOUTH),
    ((1, 2), Direction.EAST),
    ((1, 3), Direction.EAST),
    ((2, 0), Direction.EAST),
    ((2, 2), Direction.EAST),
    ((2, 3), Direction.EAST),
    ((3, 1), Direction.NORTH),
    ((3, 1), Direction.SOUTH),
]


@pytest.fixture
def valid_grid():
    """Hand-carved 4x4 perfect maze."""
    grid = Grid(4, 4)
    for coord, direction in _VALID_4X4_CARVES:
        grid.carve(coord, direction)
    return grid


@pytest.fixture
def invalid_grid():
    """4x4 grid with a loop and a sealed-off region."""
    grid = Grid(4, 4)
    grid.carve((0, 0), Direction.EAST)
    grid.carve((1, 0), Direction.SOUTH)
    grid.carve((1, 1), Direction.WEST)
    grid.carve((0, 1), Direction.NORTH)
    grid.carve((2, 2), Direction.EAST)
    return grid


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def valid_masks():
    """Row-major masks of ``valid_grid``."""
    return [row[:] for row in VALID_4X4_MASKS]


@pytest.fixture
def valid_ends():
    """Row-major ends of ``valid_grid``."""
    return list(VALID_4X4_ENDS)


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def capture_logger(caplog):
    """
    Route a knossos logger's records into ``caplog``.

    Registered knossos loggers do not propagate, so the capture handler is
    attached to the named logger itself and removed afterwards.
    """
    attached = []

    def attach(name):
        logger = logging.getLogger(name)
        logger.addHandler(caplog.handler)
        attached.append(logger)
        return caplog

    yield attach

    for logger in attached:
        logger.removeHandler(caplog.handler)
