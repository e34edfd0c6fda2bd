"""Configuration for a puzzle session."""

from __future__ import annotations

from dataclasses import dataclass

# Full Fisher–Yates passes per scramble. Repeating the pass does not change
# the distribution; it hedges against a weak random source.
SHUFFLE_PASSES = 5


@dataclass
class PuzzleConfig:
    """Settings the engine reads when it scrambles a board."""

    shuffle_passes: int = SHUFFLE_PASSES
    seed: int | None = None
    # Off by default: a plain scramble is unsolvable about half the time.
    solvable_only: bool = False

    def __post_init__(self) -> None:
        if self.shuffle_passes < 1:
            raise ValueError(
                f"shuffle_passes must be at least 1, got {self.shuffle_passes}."
            )
