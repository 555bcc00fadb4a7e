"""
Fixed-shape character grid with bounds-checked access.

Cells are addressed by Point (x = column, y = row). The shape is fixed at
construction; content is mutated through indexed writes, the validated bulk
fill, or the whole-line shift/rotate transforms.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from grid_types import (
    CellWriteError,
    Direction,
    GridConstructionError,
    InvalidCellValueError,
    NegativeShuffleError,
    OutOfGridAccessError,
    Point,
    PointOutOfGridError,
)

logger = logging.getLogger(__name__)

def is_cell_value(value: object) -> bool:
    """A cell holds exactly one character."""
    return isinstance(value, str) and len(value) == 1


NeighborFn = Callable[[Point, Direction], bool]
Neighbor = tuple[Point, Direction]


class Grid:
    """A rectangular matrix of single characters."""

    def __init__(self, matrix: Sequence[Sequence[str]]) -> None:
        """
        Build a grid from rows of characters.

        Only row 0 fixes the column count; the other rows are trusted to match.

        Args:
            matrix: Sequence of rows, each a sequence of characters (a str works)

        Raises:
            GridConstructionError: If there are no rows or row 0 is empty
        """
        if len(matrix) == 0:
            raise GridConstructionError("Grid is empty")
        if len(matrix[0]) == 0:
            raise GridConstructionError("Grid[0] is empty")

        self._cells: list[list[str]] = [list(row) for row in matrix]
        self._rows = len(self._cells)
        self._cols = len(self._cells[0])

    @classmethod
    def new_with(cls, rows: int, cols: int, func: Callable[[Point], str]) -> Grid:
        """Create a rows x cols grid, asking func for every cell in row-major order."""
        if rows < 1 or cols < 1:
            raise GridConstructionError(
                f"Grid must have at least one row and one column, got {rows}x{cols}"
            )
        return cls([[func(Point(x, y)) for x in range(cols)] for y in range(rows)])

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grid:
        """One string per row, one character per column."""
        return cls([list(line) for line in lines])

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    # =========================================================================
    # Indexed access
    # =========================================================================

    def is_point_in_grid(self, point: Point) -> bool:
        return 0 <= point.x < self._cols and 0 <= point.y < self._rows

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.is_point_in_grid(point)

    def _require(self, point: Point) -> None:
        if not self.is_point_in_grid(point):
            raise OutOfGridAccessError(
                f"Point {point} is outside the {self._rows}x{self._cols} grid"
            )

    def __getitem__(self, point: Point) -> str:
        self._require(point)
        return self._cells[point.y][point.x]

    def __setitem__(self, point: Point, value: str) -> None:
        self._require(point)
        if not is_cell_value(value):
            raise CellWriteError(f"Cell value must be a single character, got {value!r}")
        self._cells[point.y][point.x] = value

    def fill(self, data: Sequence[tuple[Point, str]]) -> None:
        """
        Write every (point, value) pair, or nothing at all.

        All points are validated before the first write, so a bad point
        leaves the grid untouched.

        Raises:
            PointOutOfGridError: If any point lies outside the grid
            InvalidCellValueError: If any value is not a single character
        """
        for point, value in data:
            if not self.is_point_in_grid(point):
                raise PointOutOfGridError(f"Point {point} is not in the grid")
            if not is_cell_value(value):
                raise InvalidCellValueError(
                    f"Value for {point} must be a single character, got {value!r}"
                )

        for point, value in data:
            self._cells[point.y][point.x] = value
        logger.debug("fill: wrote %d cells", len(data))

    # =========================================================================
    # Neighbors
    # =========================================================================

    def neighbor(self, point: Point, direction: Direction) -> Neighbor | None:
        return self.neighbor_if(point, direction, lambda _p, _d: True)

    def neighbor_if(
        self, point: Point, direction: Direction, func: NeighborFn
    ) -> Neighbor | None:
        """The neighbor in direction, if it is inside the grid and func accepts it."""
        neighbor = point.neighbor(direction)
        if self.is_point_in_grid(neighbor) and func(neighbor, direction):
            return (neighbor, direction)
        return None

    def neighbors(self, point: Point, directions: Iterable[Direction]) -> list[Neighbor]:
        return self.neighbors_if(point, directions, lambda _p, _d: True)

    def neighbors_if(
        self, point: Point, directions: Iterable[Direction], func: NeighborFn
    ) -> list[Neighbor]:
        found = (self.neighbor_if(point, d, func) for d in directions)
        return [n for n in found if n is not None]

    # =========================================================================
    # Search
    # =========================================================================

    def get_if(self, func: Callable[[str], bool]) -> list[Point]:
        """Positions of every cell accepted by func, in row-major order."""
        return [
            Point(x, y)
            for y, row in enumerate(self._cells)
            for x, c in enumerate(row)
            if func(c)
        ]

    def get_value(self, value: str) -> list[Point]:
        return self.get_value_if(value, lambda: True)

    def get_value_if(self, value: str, func: Callable[[], bool]) -> list[Point]:
        """
        Positions holding value, in row-major order.

        func is a guard that takes no arguments; it is consulted for every
        matching cell but does not see the cell.
        """
        return [
            Point(x, y)
            for y, row in enumerate(self._cells)
            for x, c in enumerate(row)
            if c == value and func()
        ]

    # =========================================================================
    # Lines
    # =========================================================================

    def row_as_string(self, row: int) -> str | None:
        if not 0 <= row < self._rows:
            return None
        return "".join(self._cells[row])

    def col_as_string(self, col: int) -> str | None:
        if not 0 <= col < self._cols:
            return None
        return "".join(row[col] for row in self._cells)

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def equals(self, raw: Sequence[str]) -> bool:
        """Compare shape and content against one string per row."""
        if self._rows != len(raw):
            return False
        for row, line in zip(self._cells, raw):
            if self._cols != len(line) or row != list(line):
                return False
        return True

    def copy(self) -> Grid:
        return Grid(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols})"

    # =========================================================================
    # Shift: linear translation, vacated cells take the default
    # =========================================================================

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise OutOfGridAccessError(f"Row {row} is outside 0..{self._rows - 1}")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise OutOfGridAccessError(f"Column {col} is outside 0..{self._cols - 1}")

    @staticmethod
    def _check_shuffle(shuffle: int) -> None:
        if shuffle < 0:
            raise NegativeShuffleError(f"shuffle must be non-negative, got {shuffle}")

    @staticmethod
    def _check_default(default: str) -> None:
        if not is_cell_value(default):
            raise CellWriteError(f"Shift default must be a single character, got {default!r}")

    @staticmethod
    def _shift_towards_start(line: list[str], shuffle: int, default: str) -> None:
        # Ascending: index i + shuffle is still untouched when it is swapped in
        length = len(line)
        for i in range(length):
            if i < length - shuffle:
                line[i], line[i + shuffle] = line[i + shuffle], line[i]
            else:
                line[i] = default

    @staticmethod
    def _shift_towards_end(line: list[str], shuffle: int, default: str) -> None:
        for i in reversed(range(len(line))):
            if i >= shuffle:
                line[i], line[i - shuffle] = line[i - shuffle], line[i]
            else:
                line[i] = default

    def row_shift_left(self, row: int, shuffle: int, default: str) -> None:
        self._check_row(row)
        self._check_shuffle(shuffle)
        self._check_default(default)
        if shuffle == 0:
            return
        self._shift_towards_start(self._cells[row], shuffle, default)
        logger.debug("row_shift_left: row=%d shuffle=%d", row, shuffle)

    def row_shift_right(self, row: int, shuffle: int, default: str) -> None:
        self._check_row(row)
        self._check_shuffle(shuffle)
        self._check_default(default)
        if shuffle == 0:
            return
        self._shift_towards_end(self._cells[row], shuffle, default)
        logger.debug("row_shift_right: row=%d shuffle=%d", row, shuffle)

    def col_shift_up(self, col: int, shuffle: int, default: str) -> None:
        self._check_col(col)
        self._check_shuffle(shuffle)
        self._check_default(default)
        if shuffle == 0:
            return
        column = self._read_col(col)
        self._shift_towards_start(column, shuffle, default)
        self._write_col(col, column)
        logger.debug("col_shift_up: col=%d shuffle=%d", col, shuffle)

    def col_shift_down(self, col: int, shuffle: int, default: str) -> None:
        self._check_col(col)
        self._check_shuffle(shuffle)
        self._check_default(default)
        if shuffle == 0:
            return
        column = self._read_col(col)
        self._shift_towards_end(column, shuffle, default)
        self._write_col(col, column)
        logger.debug("col_shift_down: col=%d shuffle=%d", col, shuffle)

    def _read_col(self, col: int) -> list[str]:
        return [row[col] for row in self._cells]

    def _write_col(self, col: int, values: list[str]) -> None:
        for row, value in zip(self._cells, values):
            row[col] = value

    # =========================================================================
    # Rotate: circular permutation through a temporary buffer
    # =========================================================================

    def row_rotate_left(self, row: int, shuffle: int) -> None:
        self._check_row(row)
        self._check_shuffle(shuffle)
        if shuffle % self._cols == 0:
            return
        line = self._cells[row]
        rotated = [line[(col + shuffle) % self._cols] for col in range(self._cols)]
        line[:] = rotated
        logger.debug("row_rotate_left: row=%d shuffle=%d", row, shuffle)

    def row_rotate_right(self, row: int, shuffle: int) -> None:
        self._check_row(row)
        self._check_shuffle(shuffle)
        if shuffle % self._cols == 0:
            return
        line = self._cells[row]
        rotated = [line[(col - shuffle) % self._cols] for col in range(self._cols)]
        line[:] = rotated
        logger.debug("row_rotate_right: row=%d shuffle=%d", row, shuffle)

    def col_rotate_up(self, col: int, shuffle: int) -> None:
        self._check_col(col)
        self._check_shuffle(shuffle)
        if shuffle % self._rows == 0:
            return
        rotated = [self._cells[(row + shuffle) % self._rows][col] for row in range(self._rows)]
        self._write_col(col, rotated)
        logger.debug("col_rotate_up: col=%d shuffle=%d", col, shuffle)

    def col_rotate_down(self, col: int, shuffle: int) -> None:
        self._check_col(col)
        self._check_shuffle(shuffle)
        if shuffle % self._rows == 0:
            return
        rotated = [self._cells[(row - shuffle) % self._rows][col] for row in range(self._rows)]
        self._write_col(col, rotated)
        logger.debug("col_rotate_down: col=%d shuffle=%d", col, shuffle)
