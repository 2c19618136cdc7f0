"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from zenloops.engine.gamesolver import Solver
from zenloops.models.grid import CellKey, Grid


class GameState:
    """Holds the current grid, move counter and cached analysis.

    ``reachable`` and ``solved_path`` are computed on first access and kept
    until :meth:`invalidate` is called after the grid changes.
    """

    def __init__(self, grid: Grid, moves: int = 0) -> None:
        self.grid = grid
        self.moves: int = moves
        self._reachable: frozenset[CellKey] | None = None
        self._solved_path: frozenset[CellKey] | None = None

    def increment_moves(self) -> None:
        self.moves += 1

    # -- analysis -------------------------------------------------------------

    def invalidate(self) -> None:
        self._reachable = None
        self._solved_path = None

    @property
    def reachable(self) -> frozenset[CellKey]:
        if self._reachable is None:
            self._reachable = Solver.reachable(self.grid)
        return self._reachable

    @property
    def solved_path(self) -> frozenset[CellKey]:
        if self._solved_path is None:
            self._solved_path = Solver.solve(self.grid)
        return self._solved_path

    @property
    def is_solved(self) -> bool:
        return bool(self.solved_path)
