"""Shortest paths between cells of an assembled maze."""

from .astar import PathResult, find_path, find_paths, manhattan_heuristic

__all__ = ["PathResult", "find_path", "find_paths", "manhattan_heuristic"]
