"""Generates scrambled puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver import Solver
from backend.models.board import Board
from backend.models.config import SHUFFLE_PASSES

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates boards by shuffling the solved arrangement."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, Empty bottom-right)."""
        return Board.solved()

    @staticmethod
    def shuffle(
        cells: list[str],
        rng: random.Random,
        passes: int = SHUFFLE_PASSES,
    ) -> None:
        """Fisher–Yates shuffle *cells* in-place, *passes* times over."""
        for _ in range(passes):
            for i in range(len(cells) - 1, 0, -1):
                j = rng.randint(0, i)
                cells[i], cells[j] = cells[j], cells[i]

    @staticmethod
    def scramble(
        board: Board,
        rng: random.Random,
        passes: int = SHUFFLE_PASSES,
        solvable_only: bool = False,
    ) -> None:
        """Scramble *board* in-place into a uniformly random permutation.

        Roughly half of all permutations cannot be solved. Unless
        *solvable_only* is set, such boards are kept as they are.
        """
        GameGenerator.shuffle(board.cells, rng, passes)

        if solvable_only and not Solver.is_solvable(board):
            logger.debug("Scramble had odd parity; swapping two tiles")
            Solver.fix_parity(board)

        logger.debug("Scrambled board: %s", board.cells)

    @staticmethod
    def generate(
        rng: random.Random,
        passes: int = SHUFFLE_PASSES,
        solvable_only: bool = False,
    ) -> Board:
        """Return a freshly scrambled board."""
        board = GameGenerator.solved()
        GameGenerator.scramble(board, rng, passes, solvable_only)
        return board
