"""Board model tests — construction, invariants, and win detection."""

from __future__ import annotations

import pytest

from backend.models.board import (
    CELL_COUNT,
    EMPTY,
    SOLVED_TARGET,
    TILES,
    Board,
    InvalidBoardError,
)


# -- construction -------------------------------------------------------------


def test_solved_board_matches_target() -> None:
    board = Board.solved()
    assert tuple(board.cells) == SOLVED_TARGET
    assert board.cells[-1] == EMPTY
    assert len(board.cells) == CELL_COUNT


def test_solved_boards_are_independent() -> None:
    a = Board.solved()
    b = Board.solved()
    a.cells[0], a.cells[8] = a.cells[8], a.cells[0]
    assert b.is_solved()


def test_from_cells_accepts_any_permutation() -> None:
    cells = [EMPTY, *reversed(TILES)]
    board = Board.from_cells(cells)
    assert board.cells == cells
    assert board.cells is not cells


@pytest.mark.parametrize(
    "cells",
    [
        list(TILES),  # too short
        [*SOLVED_TARGET, EMPTY],  # too long
        [*TILES[:7], TILES[0], EMPTY],  # duplicate tile, one missing
        [*TILES, "9. Unknown Step"],  # no empty cell
        [EMPTY, EMPTY, *TILES[2:], TILES[0]],  # two empty cells
    ],
    ids=["short", "long", "duplicate", "no-empty", "two-empty"],
)
def test_from_cells_rejects_invalid(cells: list[str]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_cells(cells)


def test_invalid_board_error_is_value_error() -> None:
    assert issubclass(InvalidBoardError, ValueError)


# -- queries ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("index", "expected"),
    [(0, (0, 0)), (2, (0, 2)), (3, (1, 0)), (4, (1, 1)), (8, (2, 2))],
)
def test_row_col(index: int, expected: tuple[int, int]) -> None:
    assert Board.row_col(index) == expected


def test_index_of_empty() -> None:
    board = Board.from_cells([*TILES[:4], EMPTY, *TILES[4:]])
    assert board.index_of(EMPTY) == 4
    assert board.index_of() == 4
    assert board.index_of(TILES[4]) == 5


def test_index_of_missing_marker_raises() -> None:
    board = Board(cells=[*TILES, "stray"])
    with pytest.raises(InvalidBoardError):
        board.index_of(EMPTY)


def test_as_rows() -> None:
    rows = Board.solved().as_rows()
    assert rows == [
        list(TILES[0:3]),
        list(TILES[3:6]),
        [TILES[6], TILES[7], EMPTY],
    ]


def test_copy_is_deep_enough() -> None:
    board = Board.solved()
    clone = board.copy()
    clone.cells[7], clone.cells[8] = clone.cells[8], clone.cells[7]
    assert board.is_solved()
    assert not clone.is_solved()


# -- win detection ------------------------------------------------------------


def test_is_solved_canonical_order() -> None:
    assert Board.from_cells(list(SOLVED_TARGET)).is_solved()


def test_is_solved_is_idempotent() -> None:
    board = Board.from_cells([*TILES[:7], EMPTY, TILES[7]])
    assert board.is_solved() == board.is_solved()
    solved = Board.solved()
    assert solved.is_solved() == solved.is_solved()


@pytest.mark.parametrize("index", range(CELL_COUNT - 1))
def test_any_swap_with_empty_is_not_solved(index: int) -> None:
    cells = list(SOLVED_TARGET)
    cells[index], cells[8] = cells[8], cells[index]
    assert not Board.from_cells(cells).is_solved()


def test_swapped_tiles_are_not_solved() -> None:
    cells = list(SOLVED_TARGET)
    cells[0], cells[1] = cells[1], cells[0]
    assert not Board.from_cells(cells).is_solved()


def test_is_tile_correct() -> None:
    board = Board.from_cells([TILES[1], TILES[0], *TILES[2:], EMPTY])
    assert not board.is_tile_correct(0)
    assert not board.is_tile_correct(1)
    assert all(board.is_tile_correct(i) for i in range(2, CELL_COUNT))
