"""
knossos: perfect maze generation and pathfinding on rectangular grids.

Quick start:
    >>> from knossos import MazeBuilder, find_paths
    >>> maze = MazeBuilder().size(12, 8).algorithm("prims").seed(7).start((0, 0)).build()
    >>> ranked = find_paths(maze)
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("knossos")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from .algorithms import (  # noqa: E402
    BaseMazeAlgorithm,
    Bias,
    GrowingMethod,
    MazeAlgorithm,
    create_algorithm,
)
from .builder import MazeBuilder  # noqa: E402
from .config import MazeConfig, load_maze_config, save_maze_config  # noqa: E402
from .core import Cell, Coordinate, Direction, Grid  # noqa: E402
from .maze import Maze, MazeVerification, verify_perfect_maze  # noqa: E402
from .pathfinding import PathResult, find_path, find_paths  # noqa: E402
from .utils import (  # noqa: E402
    FrozenGridError,
    InvalidDimensionError,
    InvalidSeedError,
    InvalidStartError,
    MazeError,
    NotAdjacentError,
    OutOfBoundsError,
    UnreachableGoalError,
    WallSymmetryError,
    configure_logging,
    get_logger,
)

__all__ = [
    "BaseMazeAlgorithm",
    "Bias",
    "Cell",
    "Coordinate",
    "Direction",
    "FrozenGridError",
    "Grid",
    "GrowingMethod",
    "InvalidDimensionError",
    "InvalidSeedError",
    "InvalidStartError",
    "Maze",
    "MazeAlgorithm",
    "MazeBuilder",
    "MazeConfig",
    "MazeError",
    "MazeVerification",
    "NotAdjacentError",
    "OutOfBoundsError",
    "PathResult",
    "UnreachableGoalError",
    "WallSymmetryError",
    "__version__",
    "configure_logging",
    "create_algorithm",
    "find_path",
    "find_paths",
    "get_logger",
    "load_maze_config",
    "save_maze_config",
    "verify_perfect_maze",
]
