"""Tile model for the pipe-rotation puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"


class TileKind(StrEnum):
    END = "end"
    STRAIGHT = "straight"
    CORNER = "corner"
    TEE = "tee"
    CROSS = "cross"
    BLOCK = "block"


# Clockwise order; rotating by one quarter turn advances one step.
CLOCKWISE: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)

_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}

# Open directions of each kind at rotation 0.
CANONICAL_OPENINGS: dict[TileKind, frozenset[Direction]] = {
    TileKind.END: frozenset({Direction.N}),
    TileKind.STRAIGHT: frozenset({Direction.N, Direction.S}),
    TileKind.CORNER: frozenset({Direction.N, Direction.E}),
    TileKind.TEE: frozenset({Direction.N, Direction.E, Direction.W}),
    TileKind.CROSS: frozenset(CLOCKWISE),
    TileKind.BLOCK: frozenset(),
}


def opposite(direction: Direction) -> Direction:
    return _OPPOSITES[direction]


def delta(direction: Direction) -> tuple[int, int]:
    """Return the ``(d_row, d_col)`` unit step for *direction*."""
    return _DELTAS[direction]


def turn(direction: Direction, quarter_turns: int) -> Direction:
    """Rotate *direction* clockwise by *quarter_turns*."""
    return CLOCKWISE[(CLOCKWISE.index(direction) + quarter_turns) % 4]


def _rotated(kind: TileKind, rotation: int) -> frozenset[Direction]:
    return frozenset(turn(d, rotation) for d in CANONICAL_OPENINGS[kind])


# Precomputed lookup: (kind, rotation) -> open directions.
_OPENINGS: dict[tuple[TileKind, int], frozenset[Direction]] = {
    (kind, rotation): _rotated(kind, rotation)
    for kind in TileKind
    for rotation in range(4)
}


@dataclass(frozen=True)
class Tile:
    """A single grid tile: a kind plus a quarter-turn count in ``0..3``."""

    kind: TileKind
    rotation: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TileKind(self.kind))
        if isinstance(self.rotation, bool) or not isinstance(self.rotation, int):
            raise ValueError(f"Rotation must be an int, got {self.rotation!r}.")
        if not 0 <= self.rotation <= 3:
            raise ValueError(f"Rotation must be in 0..3, got {self.rotation}.")

    @property
    def is_block(self) -> bool:
        return self.kind is TileKind.BLOCK

    def rotated(self, quarter_turns: int = 1) -> Tile:
        """Return a copy turned clockwise by *quarter_turns*."""
        return Tile(self.kind, (self.rotation + quarter_turns) % 4)

    def to_data(self) -> dict[str, object]:
        return {"kind": self.kind.value, "rotation": self.rotation}


def open_directions(tile: Tile) -> frozenset[Direction]:
    """Return the set of directions *tile* is open toward."""
    return _OPENINGS[(tile.kind, tile.rotation)]


def match_openings(openings: frozenset[Direction]) -> Tile | None:
    """Find the first (kind, rotation) whose open directions equal *openings*.

    Kinds are tried in order end, straight, corner, tee, cross and rotations
    from 0 to 3.  Returns ``None`` when nothing matches (e.g. an empty set).
    """
    for kind in TileKind:
        if kind is TileKind.BLOCK:
            continue
        for rotation in range(4):
            if _OPENINGS[(kind, rotation)] == openings:
                return Tile(kind, rotation)
    return None
