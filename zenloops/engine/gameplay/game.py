"""Core gameplay logic — processes rotations and checks the win condition."""

from __future__ import annotations

from zenloops.engine.gamegenerator import GameGenerator
from zenloops.engine.gamestate import GameState
from zenloops.models.difficulty import Difficulty
from zenloops.models.grid import Grid


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, difficulty: Difficulty = Difficulty.EASY, seed: int | None = None) -> None:
        self.difficulty = difficulty
        self.state = GameState(self._generate(difficulty, seed))

    @classmethod
    def from_grid(
        cls, grid: Grid, difficulty: Difficulty = Difficulty.EASY, moves: int = 0
    ) -> "GamePlay":
        """Resume a session from an existing grid (e.g. loaded from the save store)."""
        obj = object.__new__(cls)
        obj.difficulty = difficulty
        obj.state = GameState(grid, moves=moves)
        return obj

    # -- moves ----------------------------------------------------------------

    def rotate(self, row: int, col: int) -> bool:
        """Turn the tile at (row, col) one quarter clockwise.

        Returns True if the rotation was applied.  Blocks and cells outside
        the board are ignored and do not count as a move.
        """
        if not self.state.grid.rotate(row, col):
            return False
        self.state.increment_moves()
        self.state.invalidate()
        return True

    def new_board(self, difficulty: Difficulty | None = None, seed: int | None = None) -> None:
        """Replace the grid with a freshly generated one and reset the counters."""
        if difficulty is not None:
            self.difficulty = difficulty
        self.state = GameState(self._generate(self.difficulty, seed))

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _generate(difficulty: Difficulty, seed: int | None) -> Grid:
        cfg = difficulty.config
        return GameGenerator.generate(cfg.rows, cfg.cols, cfg.block_fraction, seed)
