"""
Unit tests for MazeConfig and its YAML I/O.
"""

import pytest
import yaml
from pydantic import ValidationError

from knossos import MazeBuilder
from knossos.algorithms import Bias, GrowingMethod, MazeAlgorithm
from knossos.config import MazeConfig, load_maze_config, save_maze_config
from knossos.core import Coordinate
from knossos.utils.exceptions import InvalidSeedError


class TestMazeConfig:
    def test_defaults(self):
        config = MazeConfig()

        assert config.width == 10
        assert config.height == 10
        assert config.algorithm is MazeAlgorithm.RECURSIVE_BACKTRACKING
        assert config.seed is None
        assert config.growing_method is GrowingMethod.RANDOM
        assert config.bias is Bias.NORTH_EAST
        assert not config.all_ends

    def test_string_values_coerced(self):
        config = MazeConfig(algorithm="growing_tree", growing_method="oldest", start=[1, 2], width=5, height=5)

        assert config.algorithm is MazeAlgorithm.GROWING_TREE
        assert config.growing_method is GrowingMethod.OLDEST
        assert config.start == (1, 2)

    @pytest.mark.parametrize("field", ["width", "height"])
    @pytest.mark.parametrize("value", [0, -4])
    def test_rejects_non_positive_dimensions(self, field, value):
        with pytest.raises(ValidationError):
            MazeConfig(**{field: value})

    def test_rejects_negative_seed(self):
        with pytest.raises(ValidationError):
            MazeConfig(seed=-1)

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(ValidationError):
            MazeConfig(algorithm="labyrinthine")

    @pytest.mark.parametrize("field", ["start", "goal"])
    def test_rejects_coordinates_outside_grid(self, field):
        with pytest.raises(ValidationError, match="outside a 4x4 grid"):
            MazeConfig(width=4, height=4, **{field: (4, 0)})

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            MazeConfig(colour="blue")

    def test_build_matches_builder(self):
        config = MazeConfig(width=8, height=6, algorithm="prims", seed=42, start=(0, 0))
        expected = MazeBuilder().size(8, 6).algorithm("prims").seed(42).start((0, 0)).build()

        assert config.build() == expected

    @pytest.mark.parametrize("algorithm", ["ellers", "kruskals"])
    def test_rejects_start_without_starting_cell(self, algorithm):
        with pytest.raises(ValidationError, match="has no starting cell"):
            MazeConfig(width=6, height=6, algorithm=algorithm, start=(3, 3))

    def test_seed_rule_matches_builder(self):
        with pytest.raises(ValidationError):
            MazeConfig(seed=-1)
        with pytest.raises(InvalidSeedError):
            MazeBuilder().seed(-1).build()

    def test_algorithm_options_forwarded(self):
        config = MazeConfig(width=6, height=6, algorithm="binary_tree", bias="south_west", seed=1)
        maze = config.build()

        assert maze.algorithm == "binary_tree"
        assert maze.is_valid()
        assert config.algorithm_options() == {"bias": Bias.SOUTH_WEST}
        assert MazeConfig(algorithm="prims").algorithm_options() == {}

    def test_solve_goal(self):
        config = MazeConfig(width=6, height=6, seed=3, start=(0, 0), goal=(5, 5))
        results = config.solve(config.build())

        assert list(results) == [(5, 5)]
        assert results[Coordinate(5, 5)].start == (0, 0)

    def test_solve_all_ends(self):
        config = MazeConfig(width=6, height=6, seed=3, start=(0, 0), all_ends=True)
        maze = config.build()

        assert set(config.solve(maze)) == set(maze.ends)

    def test_solve_nothing_requested(self):
        config = MazeConfig(width=6, height=6, seed=3, start=(0, 0))
        assert config.solve(config.build()) == {}


class TestMazeConfigIO:
    def test_yaml_roundtrip(self, tmp_path):
        config = MazeConfig(
            width=12,
            height=7,
            algorithm="growing_tree",
            seed=42,
            start=(1, 1),
            goal=(11, 6),
            growing_method="mixed",
        )
        path = tmp_path / "configs" / "maze.yaml"

        save_maze_config(config, path)
        loaded = load_maze_config(path)

        assert loaded == config
        assert loaded.build() == config.build()

    def test_saved_yaml_is_plain(self, tmp_path):
        path = tmp_path / "maze.yaml"
        MazeConfig(width=3, height=4, algorithm="wilsons").to_yaml(path)

        data = yaml.safe_load(path.read_text())
        assert data["algorithm"] == "wilsons"
        assert data["width"] == 3
        # Unset optionals are omitted
        assert "seed" not in data
        assert "start" not in data

    def test_load_handwritten_yaml(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("width: 20\nheight: 15\nalgorithm: sidewinder\nseed: 7\nstart: [0, 14]\n")

        config = load_maze_config(path)

        assert config.algorithm is MazeAlgorithm.SIDEWINDER
        assert config.start == (0, 14)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_maze_config(path) == MazeConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_maze_config(tmp_path / "absent.yaml")

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("width: 0\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_maze_config(path)

    def test_invalid_syntax(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("width: [1, 2\n")
        with pytest.raises(yaml.YAMLError):
            load_maze_config(path)
