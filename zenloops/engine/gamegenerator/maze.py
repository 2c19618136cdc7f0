"""Randomized depth-first maze carving with obstacle cells."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from zenloops.models.grid import CellKey
from zenloops.models.tile import CLOCKWISE, Direction, opposite
from zenloops.utils.logger import get_logger

LOGGER = get_logger(__name__)

MAX_ATTEMPTS = 50


@dataclass
class Maze:
    """Carved spanning tree plus the obstacle cells it was carved around.

    ``openings`` only holds cells the carve reached; every edge is recorded
    on both endpoints, so neighbouring openings always agree.
    """

    rows: int
    cols: int
    openings: dict[CellKey, set[Direction]] = field(default_factory=dict)
    obstacles: frozenset[CellKey] = frozenset()
    visited: set[CellKey] = field(default_factory=set)

    @property
    def start(self) -> CellKey:
        return CellKey(0, 0)

    @property
    def end(self) -> CellKey:
        return CellKey(self.rows - 1, self.cols - 1)

    def openings_at(self, cell: CellKey) -> frozenset[Direction]:
        return frozenset(self.openings.get(cell, ()))


class MazeBuilder:
    """Builds mazes whose start and end cells are always connected."""

    @staticmethod
    def build(
        rows: int,
        cols: int,
        block_fraction: float,
        rng: random.Random,
    ) -> Maze:
        """Carve a maze, resampling obstacles until the end is reachable.

        After :data:`MAX_ATTEMPTS` failed layouts the maze is carved with no
        obstacles at all, which always visits every cell.
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid must be at least 1×1, got {rows}×{cols}.")

        if not math.isfinite(block_fraction):
            # nan and +inf ask for every free cell; -inf for none
            block_fraction = 0.0 if block_fraction < 0 else 1.0
        target = max(0, math.floor(block_fraction * rows * cols))
        for attempt in range(1, MAX_ATTEMPTS + 1):
            obstacles = MazeBuilder.sample_obstacles(rows, cols, target, rng)
            maze = MazeBuilder.carve(rows, cols, obstacles, rng)
            if maze.end in maze.visited:
                return maze
            LOGGER.debug(
                "Attempt %s/%s: %s obstacles cut off the end cell, resampling",
                attempt,
                MAX_ATTEMPTS,
                len(obstacles),
            )

        LOGGER.info(
            "No connected layout for %sx%s at block fraction %.2f; carving without obstacles",
            rows,
            cols,
            block_fraction,
        )
        return MazeBuilder.carve(rows, cols, frozenset(), rng)

    @staticmethod
    def sample_obstacles(
        rows: int, cols: int, count: int, rng: random.Random
    ) -> frozenset[CellKey]:
        """Pick *count* distinct cells, never the start or end."""
        start, end = CellKey(0, 0), CellKey(rows - 1, cols - 1)
        candidates = [
            CellKey(r, c)
            for r in range(rows)
            for c in range(cols)
            if (r, c) != start and (r, c) != end
        ]
        return frozenset(rng.sample(candidates, min(count, len(candidates))))

    @staticmethod
    def carve(
        rows: int,
        cols: int,
        obstacles: frozenset[CellKey],
        rng: random.Random,
    ) -> Maze:
        """Iterative depth-first carve from the start cell."""
        maze = Maze(rows=rows, cols=cols, obstacles=obstacles)
        stack = [maze.start]
        maze.visited.add(maze.start)

        while stack:
            cell = stack[-1]
            neighbors = MazeBuilder._open_neighbors(maze, cell)
            if not neighbors:
                stack.pop()
                continue
            rng.shuffle(neighbors)
            direction, nxt = neighbors[0]
            maze.visited.add(nxt)
            maze.openings.setdefault(cell, set()).add(direction)
            maze.openings.setdefault(nxt, set()).add(opposite(direction))
            stack.append(nxt)

        return maze

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _open_neighbors(maze: Maze, cell: CellKey) -> list[tuple[Direction, CellKey]]:
        neighbors: list[tuple[Direction, CellKey]] = []
        for direction in CLOCKWISE:
            nxt = cell.step(direction)
            if not (0 <= nxt.row < maze.rows and 0 <= nxt.col < maze.cols):
                continue
            if nxt in maze.visited or nxt in maze.obstacles:
                continue
            neighbors.append((direction, nxt))
        return neighbors
