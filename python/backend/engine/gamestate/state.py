"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.models.board import Board


class PuzzleStatus(StrEnum):
    ACTIVE = "active"
    SOLVED = "solved"


class GameState:
    """Holds the current board, move counter, and status.

    A new state is always ``ACTIVE``; only a move that completes the
    puzzle switches it to ``SOLVED``.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.status = PuzzleStatus.ACTIVE

    # -- moves ----------------------------------------------------------------

    def record_move(self) -> PuzzleStatus:
        """Count an applied move and freeze the game if it solved the board."""
        self.moves += 1
        if self.board.is_solved():
            self.status = PuzzleStatus.SOLVED
        return self.status

    def reset(self) -> None:
        self.moves = 0
        self.status = PuzzleStatus.ACTIVE

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    @property
    def is_active(self) -> bool:
        return self.status is PuzzleStatus.ACTIVE
