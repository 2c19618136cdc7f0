"""Board-size presets for each difficulty level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class DifficultyConfig:
    rows: int
    cols: int
    block_fraction: float


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def config(self) -> DifficultyConfig:
        return PRESETS[self]


PRESETS: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(rows=5, cols=5, block_fraction=0.08),
    Difficulty.MEDIUM: DifficultyConfig(rows=6, cols=6, block_fraction=0.14),
    Difficulty.HARD: DifficultyConfig(rows=7, cols=7, block_fraction=0.20),
}
