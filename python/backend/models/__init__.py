from backend.models.board import (
    EMPTY,
    SOLVED_TARGET,
    TILES,
    Board,
    InvalidBoardError,
)
from backend.models.config import SHUFFLE_PASSES, PuzzleConfig

__all__ = [
    "EMPTY",
    "SOLVED_TARGET",
    "SHUFFLE_PASSES",
    "TILES",
    "Board",
    "InvalidBoardError",
    "PuzzleConfig",
]
