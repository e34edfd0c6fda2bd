"""Parity tests for the solvability helpers."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver import Solver
from backend.models.board import EMPTY, SOLVED_TARGET, TILES, Board

A, B, C, D, E, F, G, H = TILES


def test_solved_board_has_no_inversions() -> None:
    board = Board.solved()
    assert Solver.inversions(board) == 0
    assert Solver.is_solvable(board)


def test_single_transposition_is_unsolvable() -> None:
    board = Board.from_cells([B, A, C, D, E, F, G, H, EMPTY])
    assert Solver.inversions(board) == 1
    assert not Solver.is_solvable(board)


def test_reversed_tiles() -> None:
    board = Board.from_cells([EMPTY, *reversed(TILES)])
    # 8 tiles fully reversed: 8 * 7 / 2 inversions.
    assert Solver.inversions(board) == 28
    assert Solver.is_solvable(board)


@pytest.mark.parametrize("empty_at", range(9))
def test_empty_position_does_not_change_parity(empty_at: int) -> None:
    cells = list(TILES)
    cells.insert(empty_at, EMPTY)
    assert Solver.is_solvable(Board.from_cells(cells))


def test_legal_moves_preserve_solvability() -> None:
    board = Board.from_cells([A, B, C, D, E, F, G, EMPTY, H])
    assert Solver.is_solvable(board)
    # Vertical slide: cell 4 into the gap at 7.
    board.cells[4], board.cells[7] = board.cells[7], board.cells[4]
    assert Solver.is_solvable(board)


def test_fix_parity_flips_solvability() -> None:
    board = Board.from_cells([EMPTY, B, A, C, D, E, F, G, H])
    assert not Solver.is_solvable(board)

    Solver.fix_parity(board)

    board.validate()
    assert Solver.is_solvable(board)
    assert board.cells == [EMPTY, A, B, C, D, E, F, G, H]


def test_fix_parity_twice_restores_board() -> None:
    board = Board.solved()
    Solver.fix_parity(board)
    assert not Solver.is_solvable(board)
    Solver.fix_parity(board)
    assert tuple(board.cells) == SOLVED_TARGET
