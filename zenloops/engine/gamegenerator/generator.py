"""Generates scrambled pipe-rotation boards."""

from __future__ import annotations

import random

from zenloops.engine.gamegenerator.maze import Maze, MazeBuilder
from zenloops.models.grid import CellKey, Grid
from zenloops.models.tile import Tile, TileKind, match_openings

START_TILE = Tile(TileKind.END, 2)  # opens south
END_TILE = Tile(TileKind.END, 0)  # opens north
BLOCK_TILE = Tile(TileKind.BLOCK, 0)


class GameGenerator:
    """Turns carved mazes into puzzles by spinning every tile at random."""

    @staticmethod
    def solved(maze: Maze) -> Grid:
        """Return the grid whose tiles sit at the rotations the maze was carved with."""
        tiles: list[list[Tile]] = []
        for r in range(maze.rows):
            row: list[Tile] = []
            for c in range(maze.cols):
                row.append(GameGenerator._tile_for(maze, r, c))
            tiles.append(row)
        return Grid(rows=maze.rows, cols=maze.cols, tiles=tiles)

    @staticmethod
    def scramble(grid: Grid, rng: random.Random) -> None:
        """Scramble *grid* in-place and pin the start and end stubs.

        Every non-block tile gets an independent rotation drawn uniformly from
        ``0..3``; the start then opens south and the end opens north.
        """
        for r in range(grid.rows):
            for c in range(grid.cols):
                tile = grid.tiles[r][c]
                if tile.is_block:
                    continue
                grid.tiles[r][c] = Tile(tile.kind, rng.randrange(4))

        start, end = grid.start, grid.end
        grid.tiles[start.row][start.col] = START_TILE
        grid.tiles[end.row][end.col] = END_TILE

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        block_fraction: float = 0.12,
        seed: int | None = None,
    ) -> Grid:
        """Return a scrambled board; the same *seed* always yields the same board."""
        rng = random.Random(seed)
        maze = MazeBuilder.build(rows, cols, block_fraction, rng)
        grid = GameGenerator.solved(maze)
        GameGenerator.scramble(grid, rng)
        return grid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _tile_for(maze: Maze, row: int, col: int) -> Tile:
        cell = CellKey(row, col)
        if cell in maze.obstacles:
            return BLOCK_TILE
        # Cells the carve never reached have no openings.
        return match_openings(maze.openings_at(cell)) or BLOCK_TILE


def generate_grid(
    rows: int,
    cols: int,
    block_fraction: float = 0.12,
    seed: int | None = None,
) -> Grid:
    return GameGenerator.generate(rows, cols, block_fraction, seed)
