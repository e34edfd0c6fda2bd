"""Solvability checks for the 3×3 puzzle."""

from __future__ import annotations

from backend.models.board import EMPTY, TILES, Board

_RANK: dict[str, int] = {label: i for i, label in enumerate(TILES)}


class Solver:
    """Stateless parity helpers — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong relative order."""
        ranks = [_RANK[label] for label in board.cells if label != EMPTY]
        count = 0
        for i in range(len(ranks)):
            for j in range(i + 1, len(ranks)):
                if ranks[i] > ranks[j]:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        The grid is three wide, so the blank row does not matter: the
        board is solvable iff its inversion count is even.
        """
        return Solver.inversions(board) % 2 == 0

    @staticmethod
    def fix_parity(board: Board) -> None:
        """Flip *board*'s parity in-place by swapping the first two tiles."""
        tiles = [i for i, label in enumerate(board.cells) if label != EMPTY]
        first, second = tiles[0], tiles[1]
        board.cells[first], board.cells[second] = (
            board.cells[second],
            board.cells[first],
        )
