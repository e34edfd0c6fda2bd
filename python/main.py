#!/usr/bin/env python3
"""Pipeline Puzzle — a 3×3 sliding-tile game.

Usage::

    python main.py                  # play with a random scramble
    python main.py --seed 7         # reproducible scramble
    python main.py --solvable-only  # never deal an unsolvable board
    python main.py -v               # debug logging on stderr
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.config import SHUFFLE_PASSES, PuzzleConfig  # noqa: E402


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the scramble's random source.",
    ),
    passes: int = typer.Option(
        SHUFFLE_PASSES, "--passes",
        min=1, max=50,
        help="Full shuffle passes per scramble.",
    ),
    solvable_only: bool = typer.Option(
        False, "--solvable-only",
        help="Fix the parity of unsolvable scrambles.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine events at DEBUG level.",
    ),
) -> None:
    """Pipeline Puzzle."""
    setup_logging(verbose)
    config = PuzzleConfig(
        shuffle_passes=passes,
        seed=seed,
        solvable_only=solvable_only,
    )

    from frontend.cli.rich.app import run

    try:
        run(config)
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted by user")


if __name__ == "__main__":
    app()
