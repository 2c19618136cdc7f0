"""Maze builder: obstacle sampling, depth-first carving and the retry cap."""

from __future__ import annotations

import logging
import math
import random

import pytest

from zenloops.engine.gamegenerator.maze import Maze, MazeBuilder
from zenloops.models.grid import CellKey
from zenloops.models.tile import opposite


# -- helpers ------------------------------------------------------------------


def _assert_edges_symmetric(maze: Maze) -> None:
    for cell, directions in maze.openings.items():
        for direction in directions:
            nxt = cell.step(direction)
            assert 0 <= nxt.row < maze.rows and 0 <= nxt.col < maze.cols
            assert opposite(direction) in maze.openings[nxt], (cell, direction)


def _edge_count(maze: Maze) -> int:
    return sum(len(d) for d in maze.openings.values()) // 2


# -- obstacle sampling --------------------------------------------------------


@pytest.mark.parametrize("seed", range(10))
def test_obstacles_never_cover_endpoints(seed: int) -> None:
    obstacles = MazeBuilder.sample_obstacles(4, 4, 6, random.Random(seed))

    assert len(obstacles) == 6
    assert CellKey(0, 0) not in obstacles
    assert CellKey(3, 3) not in obstacles


def test_obstacle_count_is_capped_by_free_cells() -> None:
    obstacles = MazeBuilder.sample_obstacles(3, 3, 20, random.Random(0))
    assert len(obstacles) == 7


# -- carving ------------------------------------------------------------------


@pytest.mark.parametrize("shape", [(1, 2), (3, 3), (5, 5), (4, 7)])
def test_carve_without_obstacles_spans_every_cell(shape: tuple[int, int]) -> None:
    rows, cols = shape
    maze = MazeBuilder.carve(rows, cols, frozenset(), random.Random(11))

    assert len(maze.visited) == rows * cols
    assert _edge_count(maze) == rows * cols - 1
    _assert_edges_symmetric(maze)


@pytest.mark.parametrize("seed", range(20))
def test_built_maze_is_a_tree_reaching_the_end(seed: int) -> None:
    maze = MazeBuilder.build(6, 6, 0.2, random.Random(seed))

    assert maze.end in maze.visited
    assert not maze.visited & maze.obstacles
    assert set(maze.openings) == maze.visited
    assert _edge_count(maze) == len(maze.visited) - 1
    _assert_edges_symmetric(maze)


def test_carve_never_enters_obstacles() -> None:
    wall = frozenset(CellKey(r, 1) for r in range(3))
    maze = MazeBuilder.carve(3, 3, wall, random.Random(5))

    assert maze.visited == {CellKey(r, 0) for r in range(3)}
    assert maze.end not in maze.visited


def test_same_seed_carves_same_maze() -> None:
    a = MazeBuilder.build(5, 5, 0.08, random.Random(99))
    b = MazeBuilder.build(5, 5, 0.08, random.Random(99))

    assert a.obstacles == b.obstacles
    assert a.openings == b.openings


# -- retry cap ----------------------------------------------------------------


def test_impossible_fraction_falls_back_to_no_obstacles(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="zenloops"):
        maze = MazeBuilder.build(3, 3, 0.9, random.Random(1))

    assert maze.obstacles == frozenset()
    assert len(maze.visited) == 9
    assert "without obstacles" in caplog.text


@pytest.mark.parametrize("fraction", [1.0, 2.5])
def test_fraction_of_one_or_more_still_connects(fraction: float) -> None:
    maze = MazeBuilder.build(4, 4, fraction, random.Random(0))
    assert maze.end in maze.visited


def test_negative_fraction_means_no_obstacles() -> None:
    maze = MazeBuilder.build(3, 3, -0.5, random.Random(0))
    assert maze.obstacles == frozenset()


@pytest.mark.parametrize("fraction", [math.inf, math.nan, -math.inf], ids=["inf", "nan", "-inf"])
def test_non_finite_fraction_still_connects(fraction: float) -> None:
    maze = MazeBuilder.build(3, 3, fraction, random.Random(0))

    assert maze.obstacles == frozenset()
    assert len(maze.visited) == 9


def test_single_cell_maze() -> None:
    maze = MazeBuilder.build(1, 1, 0.5, random.Random(0))
    assert maze.start == maze.end
    assert maze.visited == {CellKey(0, 0)}
    assert maze.openings == {}


@pytest.mark.parametrize("shape", [(0, 3), (3, 0), (-1, 2)])
def test_empty_dimensions_are_rejected(shape: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        MazeBuilder.build(*shape, 0.1, random.Random(0))
