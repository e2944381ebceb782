"""
Perfect maze carving algorithms.

All algorithms produce perfect mazes with two critical properties:
1. Fully Connected: Path exists between any two cells
2. No Loops: Exactly one unique path between any pair of cells

Available algorithms are listed by :class:`MazeAlgorithm`; use
:func:`create_algorithm` to build one from its tag.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .aldous_broder import AldousBroder
from .base import BaseMazeAlgorithm
from .binary_tree import Bias, BinaryTree
from .ellers import Ellers
from .growing_tree import GrowingMethod, GrowingTree
from .hunt_and_kill import HuntAndKill
from .kruskals import Kruskals
from .prims import Prims
from .recursive_backtracking import RecursiveBacktracking
from .sidewinder import Sidewinder
from .wilsons import Wilsons


class MazeAlgorithm(str, Enum):
    """Available perfect maze generation algorithms."""

    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    ALDOUS_BRODER = "aldous_broder"
    HUNT_AND_KILL = "hunt_and_kill"
    RECURSIVE_BACKTRACKING = "recursive_backtracking"
    ELLERS = "ellers"
    GROWING_TREE = "growing_tree"
    KRUSKALS = "kruskals"
    PRIMS = "prims"
    WILSONS = "wilsons"


_ALGORITHM_CLASSES: dict[MazeAlgorithm, type[BaseMazeAlgorithm]] = {
    MazeAlgorithm.BINARY_TREE: BinaryTree,
    MazeAlgorithm.SIDEWINDER: Sidewinder,
    MazeAlgorithm.ALDOUS_BRODER: AldousBroder,
    MazeAlgorithm.HUNT_AND_KILL: HuntAndKill,
    MazeAlgorithm.RECURSIVE_BACKTRACKING: RecursiveBacktracking,
    MazeAlgorithm.ELLERS: Ellers,
    MazeAlgorithm.GROWING_TREE: GrowingTree,
    MazeAlgorithm.KRUSKALS: Kruskals,
    MazeAlgorithm.PRIMS: Prims,
    MazeAlgorithm.WILSONS: Wilsons,
}


def create_algorithm(algorithm: MazeAlgorithm | str, **options: Any) -> BaseMazeAlgorithm:
    """
    Build a carving strategy from its tag.

    Args:
        algorithm: :class:`MazeAlgorithm` member or its string value
        **options: Algorithm options (``bias`` for Binary Tree, ``method`` for
            Growing Tree)

    Returns:
        Strategy instance

    Raises:
        ValueError: If the tag is unknown or the options do not apply

    Example:
        >>> create_algorithm("growing_tree", method="newest")
        GrowingTree(method='newest')
    """
    try:
        tag = MazeAlgorithm(algorithm)
    except ValueError:
        valid = ", ".join(m.value for m in MazeAlgorithm)
        raise ValueError(f"Unknown maze algorithm: {algorithm!r}. Valid options: {valid}") from None

    cls = _ALGORITHM_CLASSES[tag]
    try:
        return cls(**options)
    except TypeError as exc:
        raise ValueError(f"Invalid options for {tag.value}: {sorted(options)}") from exc


__all__ = [
    "AldousBroder",
    "BaseMazeAlgorithm",
    "Bias",
    "BinaryTree",
    "Ellers",
    "GrowingMethod",
    "GrowingTree",
    "HuntAndKill",
    "Kruskals",
    "MazeAlgorithm",
    "Prims",
    "RecursiveBacktracking",
    "Sidewinder",
    "Wilsons",
    "create_algorithm",
]
