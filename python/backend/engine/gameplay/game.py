"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, PuzzleStatus
from backend.models.board import CELL_COUNT, EMPTY, Board
from backend.models.config import PuzzleConfig

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    Owns the board; callers read ``board`` to draw it and change it only
    through the operations below.
    """

    def __init__(
        self,
        config: PuzzleConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.restart()

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: PuzzleConfig | None = None,
        rng: random.Random | None = None,
    ) -> "GamePlay":
        """Create a game session from an existing board (e.g. a test fixture)."""
        board.validate()
        obj = object.__new__(cls)
        obj.config = config or PuzzleConfig()
        obj.rng = rng or random.Random(obj.config.seed)
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def status(self) -> PuzzleStatus:
        return self.state.status

    # -- lifecycle ------------------------------------------------------------

    def initialize(self) -> Board:
        """Replace the board with the solved arrangement."""
        self.state = GameState(GameGenerator.solved())
        return self.board

    def scramble(self) -> Board:
        """Shuffle the current board and reopen it for moves."""
        GameGenerator.scramble(
            self.board,
            self.rng,
            passes=self.config.shuffle_passes,
            solvable_only=self.config.solvable_only,
        )
        self.state.reset()
        logger.info(
            "Board scrambled (%d passes, solvable=%s)",
            self.config.shuffle_passes,
            self.is_solvable(),
        )
        return self.board

    def restart(self) -> Board:
        """Run the startup sequence: a fresh board, then a scramble."""
        self.initialize()
        return self.scramble()

    # -- movement -------------------------------------------------------------

    def attempt_move(self, target_index: int) -> bool:
        """Slide the tile at *target_index* into the adjacent Empty cell.

        Returns True if the tile was adjacent to Empty and the move was
        applied. Illegal targets and moves on a solved board leave the
        board untouched.
        """
        empty_index = self.index_of(EMPTY)

        if not self.is_adjacent(target_index, empty_index):
            logger.debug(
                "Rejected move: cell %s is not next to empty cell %d",
                target_index,
                empty_index,
            )
            return False

        if not self.state.is_active:
            logger.debug("Rejected move: puzzle already solved")
            return False

        self._swap(self.board, target_index, empty_index)

        if self.state.record_move() is PuzzleStatus.SOLVED:
            logger.info("Puzzle solved in %d moves", self.state.moves)
        return True

    # -- queries --------------------------------------------------------------

    def index_of(self, marker: str = EMPTY) -> int:
        return self.board.index_of(marker)

    @staticmethod
    def is_adjacent(a: int, b: int) -> bool:
        """Return True if cells *a* and *b* share an edge on the grid."""
        if not (0 <= a < CELL_COUNT and 0 <= b < CELL_COUNT):
            return False
        ar, ac = Board.row_col(a)
        br, bc = Board.row_col(b)
        one_step = abs(ar - br) + abs(ac - bc) == 1
        return one_step and (ar == br or ac == bc)

    def movable_indices(self) -> list[int]:
        """Cells whose tile may slide right now (none once solved)."""
        if not self.state.is_active:
            return []
        empty_index = self.index_of(EMPTY)
        return [i for i in range(CELL_COUNT) if self.is_adjacent(i, empty_index)]

    def is_solved(self) -> bool:
        return self.board.is_solved()

    @property
    def is_won(self) -> bool:
        return self.status is PuzzleStatus.SOLVED

    def is_solvable(self) -> bool:
        return Solver.is_solvable(self.board)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, a: int, b: int) -> None:
        board.cells[a], board.cells[b] = board.cells[b], board.cells[a]
