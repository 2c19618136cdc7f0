"""Connectivity analysis and path solving over the current tile rotations."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from zenloops.models.grid import CellKey, Grid
from zenloops.models.tile import open_directions, opposite


class Solver:
    """Stateless solver — all methods are static.

    Two neighbouring cells are linked only when each tile is open toward
    the other; a stub facing a closed side is not a connection.
    """

    @staticmethod
    def linked_neighbors(grid: Grid, cell: CellKey) -> Iterator[CellKey]:
        """Yield the cells joined to *cell* by a mutually open edge."""
        for direction in open_directions(grid.tile(cell)):
            nxt = cell.step(direction)
            if not grid.in_bounds(nxt):
                continue
            if opposite(direction) in open_directions(grid.tile(nxt)):
                yield nxt

    @staticmethod
    def reachable(grid: Grid) -> frozenset[CellKey]:
        """Return every cell connected to the start cell."""
        if grid.rows < 1 or grid.cols < 1:
            return frozenset()

        seen = {grid.start}
        queue = deque([grid.start])
        while queue:
            cell = queue.popleft()
            for nxt in Solver.linked_neighbors(grid, cell):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return frozenset(seen)

    @staticmethod
    def solve(grid: Grid) -> frozenset[CellKey]:
        """Return the cells on a shortest start-to-end path, or ``frozenset()`` if none."""
        if grid.rows < 1 or grid.cols < 1:
            return frozenset()

        start, end = grid.start, grid.end
        parent: dict[CellKey, CellKey | None] = {start: None}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            if cell == end:
                break
            for nxt in Solver.linked_neighbors(grid, cell):
                if nxt not in parent:
                    parent[nxt] = cell
                    queue.append(nxt)

        if end not in parent:
            return frozenset()

        path: set[CellKey] = set()
        cur: CellKey | None = end
        while cur is not None:
            path.add(cur)
            cur = parent[cur]
        return frozenset(path)


def reachable_from_start(grid: Grid) -> frozenset[CellKey]:
    return Solver.reachable(grid)


def solved_path(grid: Grid) -> frozenset[CellKey]:
    return Solver.solve(grid)
