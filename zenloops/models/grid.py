"""Grid model: a rectangular matrix of rotatable tiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple

from zenloops.core.exceptions import GridDecodeError
from zenloops.models.tile import Direction, Tile, TileKind, delta

_RECORD_KEYS = frozenset({"kind", "rotation"})
_KINDS = frozenset(kind.value for kind in TileKind)


class CellKey(NamedTuple):
    row: int
    col: int

    def step(self, direction: Direction) -> CellKey:
        dr, dc = delta(direction)
        return CellKey(self.row + dr, self.col + dc)


@dataclass
class Grid:
    """Represents the puzzle board.

    Tiles are stored row-major; ``tiles[0][0]`` is the start cell and
    ``tiles[rows - 1][cols - 1]`` the end cell.
    """

    rows: int
    cols: int
    tiles: list[list[Tile]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, tiles: list[list[Tile]]) -> Grid:
        """Create a grid from a nested list of tiles.

        Example::

            Grid.from_rows([[Tile(TileKind.END, 2)], [Tile(TileKind.END, 0)]])
        """
        if not tiles or not tiles[0]:
            raise ValueError("A grid needs at least one row and one column.")
        cols = len(tiles[0])
        if any(len(row) != cols for row in tiles):
            raise ValueError("All grid rows must have the same length.")
        return cls(rows=len(tiles), cols=cols, tiles=[row[:] for row in tiles])

    @classmethod
    def from_data(cls, data: Any) -> Grid:
        """Decode the nested ``{kind, rotation}`` structure made by :meth:`to_data`.

        Malformed input raises :class:`GridDecodeError`; nothing is coerced.
        """
        if not isinstance(data, list) or not data:
            raise GridDecodeError("Grid data must be a non-empty list of rows.")
        tiles: list[list[Tile]] = []
        for r, row in enumerate(data):
            if not isinstance(row, list) or not row:
                raise GridDecodeError(f"Row {r} must be a non-empty list.")
            tiles.append([_decode_tile(record, r, c) for c, record in enumerate(row)])

        cols = len(tiles[0])
        if any(len(row) != cols for row in tiles):
            raise GridDecodeError("Grid rows have differing lengths.")

        grid = cls(rows=len(tiles), cols=cols, tiles=tiles)
        if grid.tile(grid.start).is_block or grid.tile(grid.end).is_block:
            raise GridDecodeError("Start and end cells cannot be blocks.")
        return grid

    def to_data(self) -> list[list[dict[str, object]]]:
        return [[tile.to_data() for tile in row] for row in self.tiles]

    # -- queries --------------------------------------------------------------

    @property
    def start(self) -> CellKey:
        return CellKey(0, 0)

    @property
    def end(self) -> CellKey:
        return CellKey(self.rows - 1, self.cols - 1)

    def in_bounds(self, cell: CellKey) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def tile(self, cell: CellKey) -> Tile:
        return self.tiles[cell.row][cell.col]

    def cells(self) -> Iterator[CellKey]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield CellKey(r, c)

    # -- mutation -------------------------------------------------------------

    def rotate(self, row: int, col: int) -> bool:
        """Turn the tile at (row, col) one quarter clockwise.

        Returns False, leaving the grid untouched, for blocks and cells
        outside the board.
        """
        if not self.in_bounds(CellKey(row, col)):
            return False
        tile = self.tiles[row][col]
        if tile.is_block:
            return False
        self.tiles[row][col] = tile.rotated()
        return True

    def copy(self) -> Grid:
        return Grid(
            rows=self.rows,
            cols=self.cols,
            tiles=[row[:] for row in self.tiles],
        )


def _decode_tile(record: Any, row: int, col: int) -> Tile:
    where = f"({row},{col})"
    if not isinstance(record, dict) or set(record) != _RECORD_KEYS:
        raise GridDecodeError(f"Tile {where} must be a {{kind, rotation}} record.")
    kind, rotation = record["kind"], record["rotation"]
    if not isinstance(kind, str) or kind not in _KINDS:
        raise GridDecodeError(f"Tile {where} has unknown kind {kind!r}.")
    # bool is an int subclass; reject it explicitly
    if isinstance(rotation, bool) or not isinstance(rotation, int) or not 0 <= rotation <= 3:
        raise GridDecodeError(f"Tile {where} has invalid rotation {rotation!r}.")
    return Tile(TileKind(kind), rotation)
