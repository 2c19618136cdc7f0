"""Saved-board persistence, one slot per difficulty."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from zenloops.core.exceptions import GridDecodeError
from zenloops.models.difficulty import Difficulty
from zenloops.models.grid import Grid
from zenloops.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class SavedGame:
    grid: Grid
    moves: int = 0


class SaveStore:
    """Loads and saves in-progress boards from a JSON file.

    The file maps a difficulty name to ``{"grid": [...], "moves": n}``.
    Anything that fails to decode is treated as absent so the caller can
    generate a fresh board instead.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._slots: dict[str, Any] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable save file %s: %s", self.filepath, exc)
            return
        if not isinstance(data, dict):
            LOGGER.warning("Ignoring save file %s: expected an object", self.filepath)
            return
        self._slots = data

    def _write(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(self._slots, indent=2) + "\n")

    # -- slots ----------------------------------------------------------------

    def save(self, difficulty: Difficulty, grid: Grid, moves: int = 0) -> None:
        self._slots[difficulty.value] = {"grid": grid.to_data(), "moves": moves}
        self._write()

    def load(self, difficulty: Difficulty) -> SavedGame | None:
        """Return the saved game for *difficulty*, or ``None`` if absent or corrupt."""
        entry = self._slots.get(difficulty.value)
        if entry is None:
            return None
        try:
            return _decode_entry(entry)
        except GridDecodeError as exc:
            LOGGER.warning("Discarding saved %s board: %s", difficulty.value, exc)
            return None

    def clear(self, difficulty: Difficulty) -> None:
        if self._slots.pop(difficulty.value, None) is not None:
            self._write()


def _decode_entry(entry: Any) -> SavedGame:
    if not isinstance(entry, dict) or "grid" not in entry:
        raise GridDecodeError("Saved entry must be an object with a grid.")
    moves = entry.get("moves", 0)
    if isinstance(moves, bool) or not isinstance(moves, int) or moves < 0:
        raise GridDecodeError(f"Invalid move count {moves!r}.")
    return SavedGame(grid=Grid.from_data(entry["grid"]), moves=moves)
