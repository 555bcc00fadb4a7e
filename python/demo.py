"""
Demonstration puzzles for the chargrid system.

Usage:
    python demo.py                  # patrol puzzle on the bundled map
    python demo.py patrol MAP.txt   # patrol puzzle on another map
    python demo.py numbers FILE     # sum the integers in FILE
    python demo.py ... -v           # with debug logging
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ascii_render import print_grid, render_grid
from chargrid import Grid
from grid_parser import parse_lines_to_grid, parse_lines_to_integer
from grid_types import Direction, Point, UnknownDirectionError
from puzzle import Puzzle, PuzzleConfig, Solver

OBSTACLE = "#"
FLOOR = "."

GLYPHS = {Direction.N: "^", Direction.E: ">", Direction.S: "v", Direction.W: "<"}


class NumbersPuzzle(Puzzle):
    """Sum one integer per input line."""

    name = "NumbersPuzzle"

    def __init__(self, path: Path) -> None:
        self.path = path
        self.numbers: list[int] = []

    def input_file_path(self) -> Path | None:
        return self.path

    def parse_content(self, lines: list[str]) -> None:
        self.numbers = parse_lines_to_integer([line for line in lines if line.strip()])

    def solve_part1(self) -> str:
        return str(sum(self.numbers))


def find_agent(grid: Grid) -> tuple[Point, Direction]:
    """Locate the single arrow glyph on the map."""
    for point in grid.get_if(lambda c: c not in (OBSTACLE, FLOOR)):
        try:
            return point, Direction.from_glyph(grid[point])
        except UnknownDirectionError:
            continue
    raise ValueError("No agent glyph (<, ^, >, v) found on the map")


def patrol(grid: Grid, start: Point, heading: Direction) -> list[Point]:
    """
    Walk forward, turning right in front of obstacles, until leaving the grid.

    Returns:
        Visited points in walk order (repeats removed), or every point seen
        before a loop was detected
    """
    seen_states: set[tuple[Point, Direction]] = set()
    visited: dict[Point, None] = {start: None}
    point = start

    while (point, heading) not in seen_states:
        seen_states.add((point, heading))
        step = grid.neighbor(point, heading)
        if step is None:
            break
        ahead, _ = step
        if grid[ahead] == OBSTACLE:
            heading = heading.right()
            continue
        point = ahead
        visited[point] = None

    return list(visited)


class PatrolPuzzle(Puzzle):
    """
    An agent patrols a map of floor and obstacles.

    Part 1 counts the cells the agent walks over. Part 2 slides every
    obstacle one row down (the top row empties) and patrols again.
    """

    name = "PatrolPuzzle"

    def __init__(self, path: Path, show: bool = False) -> None:
        self.path = path
        self.show = show
        self.grid: Grid | None = None

    def input_file_path(self) -> Path | None:
        return self.path

    def parse_content(self, lines: list[str]) -> None:
        self.grid = parse_lines_to_grid([line for line in lines if line])

    def _walk(self, grid: Grid) -> str:
        start, heading = find_agent(grid)
        visited = patrol(grid, start, heading)
        if self.show:
            print_grid(grid, visited)
        return str(len(visited))

    def _parsed_grid(self) -> Grid:
        if self.grid is None:
            raise RuntimeError(f"{self.name}: parse_content was not called")
        return self.grid

    def solve_part1(self) -> str:
        return self._walk(self._parsed_grid())

    def solve_part2(self) -> str:
        start, heading = find_agent(self._parsed_grid())
        grid = self._parsed_grid().copy()
        grid[start] = FLOOR
        for col in range(grid.cols):
            grid.col_shift_down(col, 1, FLOOR)
        # The agent stays where it was, only the obstacles move
        grid[start] = GLYPHS[heading]
        if self.show:
            print(render_grid(grid, highlight=[start]))
        return self._walk(grid)


def main(argv: list[str]) -> None:
    verbose = "-v" in argv
    args = [a for a in argv if a != "-v"]
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    config = PuzzleConfig(Path(__file__).resolve().parent)
    kind = args[0] if args else "patrol"

    if kind == "numbers":
        puzzle: Puzzle = NumbersPuzzle(Path(args[1]))
        parts = 1
    elif kind == "patrol":
        path = Path(args[1]) if len(args) > 1 else config.project_file("demo_patrol.txt")
        puzzle = PatrolPuzzle(path, show=True)
        parts = 2
    else:
        print(f"Unknown demo: {kind!r} (expected 'patrol' or 'numbers')")
        return

    Solver(puzzle, parts).run()


if __name__ == "__main__":
    main(sys.argv[1:])
