"""Zen Loops: rotate pipe tiles until the start connects to the end.

The public surface:

- :func:`generate_grid` builds a scrambled board from a seeded maze.
- :func:`open_directions` reports which sides of a tile are open.
- :func:`reachable_from_start` and :func:`solved_path` analyse a board
  under its current rotations.
"""

from zenloops.engine.gamegenerator import generate_grid
from zenloops.engine.gamesolver import reachable_from_start, solved_path
from zenloops.models import CellKey, Difficulty, Direction, Grid, Tile, TileKind, open_directions

__all__ = [
    "CellKey",
    "Difficulty",
    "Direction",
    "Grid",
    "Tile",
    "TileKind",
    "generate_grid",
    "open_directions",
    "reachable_from_start",
    "solved_path",
]

__version__ = "0.1.0"
