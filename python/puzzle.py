"""
Puzzle lifecycle harness.

A Puzzle names itself, optionally points at an input file, parses the lines
of that file, and answers up to three staged parts. A Solver drives one
puzzle through that lifecycle and prints the answers.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TextIO

logger = logging.getLogger(__name__)

MAX_PUZZLE_PARTS = 3

NOT_SOLVED = "Not solved"


class PuzzleInputError(Exception):
    """The puzzle's input file cannot be read."""


@dataclass(frozen=True)
class PuzzleConfig:
    """Where a puzzle finds its files. Passed explicitly, never read from the environment."""

    root: Path = field(default_factory=Path.cwd)

    def project_file(self, path: str | Path) -> Path:
        return self.root / path


class Puzzle:
    """Base class for puzzles run by Solver. Override what the puzzle needs."""

    name: str = ""

    def input_file_path(self) -> Path | None:
        """Input file to parse; None means the puzzle takes no input."""
        return None

    def parse_content(self, lines: list[str]) -> None:
        """Store whatever the solve stages need from the input lines."""

    def solve_part1(self) -> str:
        return NOT_SOLVED

    def solve_part2(self) -> str:
        return NOT_SOLVED

    def solve_part3(self) -> str:
        return NOT_SOLVED

    def parse_input_file(self) -> None:
        path = self.input_file_path()
        if path is None:
            return
        self.parse_content(read_input_file(path))


def read_input_file(path: Path) -> list[str]:
    """
    Read a text file as a list of lines without line terminators.

    Raises:
        PuzzleInputError: If the file cannot be opened or read
    """
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise PuzzleInputError(f"Failed to open file '{path}' [{e}]") from e
    logger.debug("read_input_file: %s (%d lines)", path, len(lines))
    return lines


class Solver:
    """Runs a puzzle: parse its input, then solve parts 1..parts in order."""

    def __init__(self, puzzle: Puzzle, parts: int) -> None:
        if not 1 <= parts <= MAX_PUZZLE_PARTS:
            raise ValueError(
                f"Invalid number of puzzle parts '{parts}'. "
                f"Allowed range is <1,{MAX_PUZZLE_PARTS}>"
            )
        self.puzzle = puzzle
        self.parts = parts

    read_input_file = staticmethod(read_input_file)

    def stages(self) -> list[Callable[[], str]]:
        stages = [
            self.puzzle.solve_part1,
            self.puzzle.solve_part2,
            self.puzzle.solve_part3,
        ]
        return stages[: self.parts]

    def run(self, out: TextIO | None = None) -> list[str]:
        """
        Print the puzzle name, then one ``Part N: answer`` line per part.

        Returns:
            The answers, in part order
        """
        out = out if out is not None else sys.stdout
        name = self.puzzle.name

        out.write(f"{name}\n")
        out.write("=" * len(name) + "\n")

        self.puzzle.parse_input_file()

        answers: list[str] = []
        for part, stage in enumerate(self.stages(), start=1):
            logger.info("%s: solving part %d", name, part)
            answer = stage()
            out.write(f"Part {part}: {answer}\n")
            answers.append(answer)

        return answers
