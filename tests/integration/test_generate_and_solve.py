"""
Integration tests: configuration -> generation -> verification -> pathfinding.
"""

import pytest

import networkx as nx
import numpy as np

from knossos import Coordinate, MazeAlgorithm, MazeBuilder, MazeConfig, create_algorithm, find_paths, load_maze_config


class TestGenerateAndSolve:
    @pytest.mark.parametrize("algorithm", list(MazeAlgorithm))
    def test_full_pipeline(self, algorithm, tmp_path):
        # Eller's and Kruskal's have no starting cell; they are solved from the same cell
        start = (7, 5) if create_algorithm(algorithm).accepts_start else None
        config = MazeConfig(width=15, height=11, algorithm=algorithm, seed=2024, start=start, all_ends=True)
        path = tmp_path / f"{algorithm.value}.yaml"
        config.to_yaml(path)

        loaded = load_maze_config(path)
        maze = loaded.build()
        results = loaded.solve(maze) if start else find_paths(maze, start=(7, 5))

        assert maze.is_valid()
        assert set(results) == set(maze.ends)
        costs = [r.cost for r in results.values()]
        assert costs == sorted(costs)

        # A* costs agree with breadth-first distances on the passage tree
        distances = nx.single_source_shortest_path_length(maze.to_graph(), Coordinate(7, 5))
        for goal, result in results.items():
            assert result.cost == distances[goal]

    @pytest.mark.parametrize("algorithm", list(MazeAlgorithm))
    def test_large_maze(self, algorithm):
        maze = MazeBuilder().size(60, 40).algorithm(algorithm).seed(99).build()

        assert maze.is_valid()
        occupancy = maze.to_occupancy_array()
        assert occupancy.shape == (40 * 3 + 1, 60 * 3 + 1)
        # Open cells = every cell body plus two cleared slots per passage
        assert int(np.count_nonzero(occupancy == 0)) == 60 * 40 + 2 * (60 * 40 - 1)

    def test_path_between_ends_is_unique(self):
        maze = MazeBuilder().size(10, 10).algorithm("aldous_broder").seed(8).start((0, 0)).build()
        graph = maze.to_graph()
        goal = maze.ends[-1]

        simple_paths = list(nx.all_simple_paths(graph, maze.start, goal))
        assert len(simple_paths) == 1
        assert tuple(simple_paths[0]) == find_paths(maze, goal=goal)[goal].path
