"""Zen Loops command line.

Usage::

    zenloops new -d medium          # fresh 6×6 board
    zenloops rotate 1 2             # turn the tile at row 1, col 2
    zenloops status --json          # dump the saved board
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from zenloops.engine.gameplay import GamePlay
from zenloops.models.difficulty import Difficulty
from zenloops.models.savestore import SaveStore
from zenloops.utils.logger import configure_logging, get_logger

DATA_DIR = Path("data")
SAVE_FILE = "boards.json"

LOGGER = get_logger(__name__)

console = Console()
app = typer.Typer(add_completion=False, help="Rotate pipe tiles to connect A to B.")


# -- helpers ------------------------------------------------------------------


def _store(ctx: typer.Context) -> SaveStore:
    return SaveStore(ctx.obj["data_dir"] / SAVE_FILE)


def _resume(store: SaveStore, difficulty: Difficulty) -> GamePlay:
    """Load the saved board for *difficulty*, generating one if none is usable."""
    saved = store.load(difficulty)
    if saved is None:
        LOGGER.info("No usable %s board saved; generating a new one", difficulty.value)
        game = GamePlay(difficulty)
        store.save(difficulty, game.grid, game.state.moves)
        return game
    return GamePlay.from_grid(saved.grid, difficulty, moves=saved.moves)


def _render_status(game: GamePlay) -> Table:
    """Return a summary table (moves, connectivity, solved state)."""
    grid = game.grid
    state = game.state
    table = Table(show_header=False, title=f"Zen Loops · {game.difficulty.value}")
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_row("Board", f"{grid.rows}×{grid.cols}")
    table.add_row("Moves", str(state.moves))
    table.add_row("Connected to A", f"{len(state.reachable)}/{grid.rows * grid.cols}")
    if game.is_won:
        path = " ".join(f"{r},{c}" for r, c in sorted(state.solved_path))
        table.add_row("Status", "[bold green]Solved[/bold green]")
        table.add_row("Path", path)
    else:
        table.add_row("Status", "[yellow]Not connected[/yellow]")
    return table


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Directory holding the saved boards.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log generator retries and store warnings.",
    ),
) -> None:
    """Zen Loops puzzle."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"data_dir": data_dir}


@app.command()
def new(
    ctx: typer.Context,
    difficulty: Difficulty = typer.Option(
        Difficulty.EASY, "-d", "--difficulty",
        help="Board preset.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
) -> None:
    """Generate and save a fresh board."""
    game = GamePlay(difficulty, seed=seed)
    _store(ctx).save(difficulty, game.grid, game.state.moves)
    console.print(_render_status(game))


@app.command()
def rotate(
    ctx: typer.Context,
    row: int = typer.Argument(..., help="Row of the tile (0 = top)."),
    col: int = typer.Argument(..., help="Column of the tile (0 = left)."),
    difficulty: Difficulty = typer.Option(
        Difficulty.EASY, "-d", "--difficulty",
        help="Board preset.",
    ),
) -> None:
    """Turn one tile a quarter clockwise."""
    store = _store(ctx)
    game = _resume(store, difficulty)
    if not game.rotate(row, col):
        console.print(f"[red]Tile ({row},{col}) cannot be rotated.[/red]")
        raise typer.Exit(code=1)
    store.save(difficulty, game.grid, game.state.moves)
    console.print(_render_status(game))


@app.command()
def status(
    ctx: typer.Context,
    difficulty: Difficulty = typer.Option(
        Difficulty.EASY, "-d", "--difficulty",
        help="Board preset.",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the serialized grid instead of the summary.",
    ),
) -> None:
    """Show the saved board for a difficulty."""
    game = _resume(_store(ctx), difficulty)
    if as_json:
        console.print_json(json.dumps(game.grid.to_data()), highlight=False)
        return
    console.print(_render_status(game))


if __name__ == "__main__":
    app()
