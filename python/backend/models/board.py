"""Board model for the pipeline puzzle."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

GRID_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE

EMPTY = ""

# Solved order of the trading pipeline steps.
TILES: tuple[str, ...] = (
    "1. Ticker Selection",
    "2. Fetch Real-Time Data",
    "3. Apply Moving Average",
    "4. Check Trading Signal",
    "5. Execute Trade Logic",
    "6. Risk Management Check",
    "7. Update Portfolio",
    "8. Display Live Chart",
)

SOLVED_TARGET: tuple[str, ...] = (*TILES, EMPTY)


class InvalidBoardError(ValueError):
    """Raised when a board is not a permutation of the tile set plus Empty."""


@dataclass
class Board:
    """Represents the 3×3 puzzle board.

    Cells are stored as a flat row-major list of labels. ``EMPTY`` marks the
    open slot.
    """

    cells: list[str]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Board:
        """Return a fresh board equal to ``SOLVED_TARGET``."""
        return cls(cells=list(SOLVED_TARGET))

    @classmethod
    def from_cells(cls, cells: Sequence[str]) -> Board:
        """Create a board from a flat row-major label sequence.

        Example::

            Board.from_cells([*TILES[:7], EMPTY, TILES[7]])
        """
        board = cls(cells=list(cells))
        board.validate()
        return board

    # -- invariants -----------------------------------------------------------

    def validate(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise InvalidBoardError(
                f"Expected {CELL_COUNT} cells for a {GRID_SIZE}×{GRID_SIZE} "
                f"board, got {len(self.cells)}."
            )
        if Counter(self.cells) != Counter(SOLVED_TARGET):
            missing = sorted(set(SOLVED_TARGET) - set(self.cells))
            extra = sorted(
                label for label, n in Counter(self.cells).items()
                if n > SOLVED_TARGET.count(label)
            )
            raise InvalidBoardError(
                f"Board is not a permutation of the tile set: "
                f"missing={missing!r}, unexpected={extra!r}"
            )

    # -- queries --------------------------------------------------------------

    @staticmethod
    def row_col(index: int) -> tuple[int, int]:
        return divmod(index, GRID_SIZE)

    def get_tile(self, index: int) -> str:
        return self.cells[index]

    def index_of(self, label: str = EMPTY) -> int:
        """Return the index of the cell holding *label*."""
        try:
            return self.cells.index(label)
        except ValueError:
            raise InvalidBoardError(f"No cell holds {label!r}.") from None

    def is_solved(self) -> bool:
        """Check if every cell matches the solved arrangement."""
        return tuple(self.cells) == SOLVED_TARGET

    def is_tile_correct(self, index: int) -> bool:
        """Check if the cell at *index* holds its goal label."""
        return self.cells[index] == SOLVED_TARGET[index]

    def as_rows(self) -> list[list[str]]:
        return [
            self.cells[r * GRID_SIZE : (r + 1) * GRID_SIZE]
            for r in range(GRID_SIZE)
        ]

    def copy(self) -> Board:
        return Board(cells=self.cells[:])
