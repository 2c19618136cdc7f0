from zenloops.models.difficulty import Difficulty, DifficultyConfig
from zenloops.models.grid import CellKey, Grid
from zenloops.models.savestore import SavedGame, SaveStore
from zenloops.models.tile import Direction, Tile, TileKind, delta, open_directions, opposite

__all__ = [
    "CellKey",
    "Difficulty",
    "DifficultyConfig",
    "Direction",
    "Grid",
    "SavedGame",
    "SaveStore",
    "Tile",
    "TileKind",
    "delta",
    "open_directions",
    "opposite",
]
