"""Rich terminal frontend — tables, colours, and panels.

Draws the board and status line with the ``rich`` library and forwards
each keypress to the engine. All puzzle rules live in the backend; this
module only decides what to show and which cells to offer.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import CELL_COUNT, EMPTY, GRID_SIZE, Board
from backend.models.config import PuzzleConfig
from frontend.cli.input_handler import cell_index, get_key

console = Console()

MSG_START = "Pick a tile next to the empty slot to move it."
MSG_PROGRESS = "Keep going! The data flow is still broken."
MSG_WIN = "\U0001f680 Pipeline Deployed! Rialo Logic Grid Solved!"
MSG_UNSOLVABLE = "This scramble cannot be solved. Press R to reshuffle."

# Offset from the gap to the tile that slides in the given direction.
_OFFSETS: dict[str, tuple[int, int]] = {
    "up": (1, 0),
    "down": (-1, 0),
    "left": (0, 1),
    "right": (0, -1),
}


# -- helpers ------------------------------------------------------------------


def direction_target(board: Board, direction: str) -> int | None:
    """Return the index of the tile that would slide *direction*, if any."""
    er, ec = Board.row_col(board.index_of(EMPTY))
    dr, dc = _OFFSETS[direction]
    tr, tc = er + dr, ec + dc
    if not (0 <= tr < GRID_SIZE and 0 <= tc < GRID_SIZE):
        return None
    return tr * GRID_SIZE + tc


def status_message(game: GamePlay, moved: bool | None) -> str:
    """Pick the status line for the current game.

    *moved* is None before the first keypress of a board.
    """
    if game.is_solved():
        return f"[bold green]{MSG_WIN}[/bold green]"
    if moved is None:
        if not game.is_solvable():
            return f"[yellow]{MSG_UNSOLVABLE}[/yellow]"
        return MSG_START
    return MSG_PROGRESS


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    board = game.board
    movable = set(game.movable_indices())
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_SIZE):
        table.add_column(width=16, justify="center")

    for r, row in enumerate(board.as_rows()):
        cells: list[Text] = []
        for c, label in enumerate(row):
            index = r * GRID_SIZE + c
            cell = Text(f"{index + 1}\n", style="dim")
            if label == EMPTY:
                cell.append("·", style="dim")
            elif board.is_tile_correct(index):
                cell.append(label, style="bold green")
            elif index in movable:
                cell.append(label, style="bold cyan")
            else:
                cell.append(label, style="bold white")
            cells.append(cell)
        table.add_row(*cells)

    return table


def _draw_game(game: GamePlay, status: str) -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  1-9", style="bold cyan")
    controls.append("  pick tile   ", style="dim")
    controls.append("↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    border = "bold green" if game.is_won else "bright_blue"
    panel = Panel(
        Group(
            Align.center(_render_board(game)),
            Text(""),
            Align.center(stats),
        ),
        title="[bold cyan]Rialo Logic Grid[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    moved: bool | None = None

    while True:
        _draw_game(game, status_message(game, moved))
        key = get_key()

        if key == "quit":
            return
        if key == "restart":
            game.restart()
            moved = None
            continue

        target = cell_index(key)
        if target is None and key in _OFFSETS:
            target = direction_target(game.board, key)
        if target is None or target >= CELL_COUNT:
            continue

        if game.attempt_move(target):
            moved = True


# -- public entry point -------------------------------------------------------


def run(config: PuzzleConfig) -> None:
    """Launch the Rich CLI."""
    _play(GamePlay(config))
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
