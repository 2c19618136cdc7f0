"""Grid model: rotation, bounds and the persisted ``{kind, rotation}`` format."""

from __future__ import annotations

import json

import pytest

from zenloops.core.exceptions import GridDecodeError
from zenloops.engine.gamegenerator import generate_grid
from zenloops.models.grid import CellKey, Grid
from zenloops.models.tile import Tile, TileKind


# -- helpers ------------------------------------------------------------------


def _record(kind: str, rotation: object) -> dict:
    return {"kind": kind, "rotation": rotation}


def _column(middle: dict) -> list:
    """Three-row single-column data with *middle* between the endpoints."""
    return [[_record("end", 2)], [middle], [_record("end", 0)]]


# -- serialization ------------------------------------------------------------


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_generated_grid_round_trips_through_json(seed: int) -> None:
    grid = generate_grid(6, 6, 0.14, seed=seed)
    data = json.loads(json.dumps(grid.to_data()))

    restored = Grid.from_data(data)

    assert restored == grid
    assert restored.to_data() == grid.to_data()


def test_to_data_is_row_major_records() -> None:
    grid = Grid.from_rows(
        [
            [Tile(TileKind.END, 2), Tile(TileKind.BLOCK, 0)],
            [Tile(TileKind.CORNER, 3), Tile(TileKind.END, 0)],
        ]
    )
    assert grid.to_data() == [
        [_record("end", 2), _record("block", 0)],
        [_record("corner", 3), _record("end", 0)],
    ]


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(None, id="none"),
        pytest.param("grid", id="string"),
        pytest.param([], id="no-rows"),
        pytest.param([[]], id="empty-row"),
        pytest.param([[_record("end", 2), _record("end", 0)], [_record("end", 0)]], id="ragged"),
        pytest.param(_column(_record("pipe", 0)), id="unknown-kind"),
        pytest.param(_column(_record("straight", 4)), id="rotation-too-big"),
        pytest.param(_column(_record("straight", -1)), id="rotation-negative"),
        pytest.param(_column(_record("straight", "1")), id="rotation-string"),
        pytest.param(_column(_record("straight", 1.0)), id="rotation-float"),
        pytest.param(_column(_record("straight", True)), id="rotation-bool"),
        pytest.param(_column({"kind": "straight"}), id="missing-rotation"),
        pytest.param(_column({"kind": "straight", "rotation": 0, "x": 1}), id="extra-key"),
        pytest.param(_column(["straight", 0]), id="not-a-record"),
        pytest.param([[_record("block", 0)], [_record("end", 0)]], id="blocked-start"),
        pytest.param([[_record("end", 2)], [_record("block", 0)]], id="blocked-end"),
    ],
)
def test_from_data_rejects_malformed_input(data: object) -> None:
    with pytest.raises(GridDecodeError):
        Grid.from_data(data)


def test_decode_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Grid.from_data([[{"kind": "end"}]])


# -- rotation -----------------------------------------------------------------


def test_rotate_advances_one_quarter_and_wraps() -> None:
    grid = Grid.from_data(_column(_record("corner", 3)))

    assert grid.rotate(1, 0) is True
    assert grid.tile(CellKey(1, 0)) == Tile(TileKind.CORNER, 0)


def test_rotate_refuses_blocks_and_out_of_bounds() -> None:
    grid = Grid.from_data(_column(_record("block", 1)))
    before = grid.copy()

    assert grid.rotate(1, 0) is False
    assert grid.rotate(3, 0) is False
    assert grid.rotate(0, -1) is False
    assert grid == before


def test_block_built_from_text_kind_cannot_rotate() -> None:
    grid = Grid.from_rows([[Tile("end", 2)], [Tile("block", 0)], [Tile("end", 0)]])

    assert grid.rotate(1, 0) is False
    assert Grid.from_data(grid.to_data()) == grid


def test_copy_is_independent() -> None:
    grid = Grid.from_data(_column(_record("straight", 0)))
    clone = grid.copy()
    clone.rotate(1, 0)

    assert grid.tile(CellKey(1, 0)).rotation == 0
    assert clone.tile(CellKey(1, 0)).rotation == 1


# -- cell keys ----------------------------------------------------------------


def test_cell_keys_compare_structurally() -> None:
    assert CellKey(2, 3) == CellKey(2, 3)
    assert CellKey(2, 3) == (2, 3)
    assert len({CellKey(0, 1), CellKey(0, 1), CellKey(1, 0)}) == 2


def test_start_and_end_are_opposite_corners() -> None:
    grid = generate_grid(4, 6, 0.1, seed=3)
    assert grid.start == CellKey(0, 0)
    assert grid.end == CellKey(3, 5)
    assert len(list(grid.cells())) == 24


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        Grid.from_rows([[Tile(TileKind.END, 2)], []])
