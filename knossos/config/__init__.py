"""Maze configuration models and YAML I/O."""

from .io import load_maze_config, save_maze_config
from .maze_config import MazeConfig

__all__ = ["MazeConfig", "load_maze_config", "save_maze_config"]
