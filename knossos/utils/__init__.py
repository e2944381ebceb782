"""Shared utilities: structured exceptions and logging."""

from .exceptions import (
    FrozenGridError,
    InvalidDimensionError,
    InvalidSeedError,
    InvalidStartError,
    MazeError,
    NotAdjacentError,
    OutOfBoundsError,
    UnreachableGoalError,
    WallSymmetryError,
    validate_coordinate,
    validate_dimensions,
    validate_seed,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "FrozenGridError",
    "InvalidDimensionError",
    "InvalidSeedError",
    "InvalidStartError",
    "MazeError",
    "NotAdjacentError",
    "OutOfBoundsError",
    "UnreachableGoalError",
    "WallSymmetryError",
    "validate_coordinate",
    "validate_dimensions",
    "validate_seed",
    "LoggedOperation",
    "configure_logging",
    "get_logger",
]
