"""
YAML I/O for maze configurations.

YAML Format
-----------
width: 20
height: 15
algorithm: wilsons
seed: 42
start: [0, 0]
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .maze_config import MazeConfig


def load_maze_config(path: str | Path) -> MazeConfig:
    """
    Load a maze configuration from a YAML file.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    yaml.YAMLError
        If the YAML syntax is invalid
    ValueError
        If the configuration is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}

    try:
        return MazeConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_maze_config(config: MazeConfig, path: str | Path) -> None:
    """Save a maze configuration to a YAML file, omitting unset optional fields."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2)
