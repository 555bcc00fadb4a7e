"""
Shared type definitions for the chargrid system.

Direction and Point are plain values; the Grid that gives them meaning lives
in chargrid.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Errors
# =============================================================================


class GridError(ValueError):
    """Recoverable failure reported back to the caller."""


class GridConstructionError(GridError):
    """Input matrix cannot form a grid (no rows, or an empty first row)."""


class PointOutOfGridError(GridError):
    """A validated bulk operation referenced a point outside the grid."""


class UnknownDirectionError(GridError):
    """A glyph does not name a direction."""


class InvalidCellValueError(GridError):
    """A validated bulk write carried something other than a single character."""


class ContractViolation(Exception):
    """Caller broke a precondition. Never caught inside the library."""


class NonCardinalDirectionError(ContractViolation, ValueError):
    """A cardinal-only operation was given a diagonal direction."""


class OutOfGridAccessError(ContractViolation, IndexError):
    """Direct indexed access outside the grid bounds."""


class CellWriteError(ContractViolation, ValueError):
    """A direct write or shift default is not a single character."""


class NegativeShuffleError(ContractViolation, ValueError):
    """A shift or rotate was asked to move a line by a negative amount."""


# =============================================================================
# Direction
# =============================================================================


class Direction(Enum):
    """Compass direction for traversal, 8-way."""

    N = "N"  # Up (decreasing y)
    NE = "NE"
    E = "E"  # Right (increasing x)
    SE = "SE"
    S = "S"  # Down (increasing y)
    SW = "SW"
    W = "W"  # Left (decreasing x)
    NW = "NW"

    @property
    def is_cardinal(self) -> bool:
        return self in CARDINAL

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) for a single step."""
        return _OFFSETS[self]

    def left(self) -> Direction:
        """Turn 90° counterclockwise."""
        return _turn(self, _LEFT, "left")

    def right(self) -> Direction:
        """Turn 90° clockwise."""
        return _turn(self, _RIGHT, "right")

    def backward(self) -> Direction:
        """Turn around."""
        return _turn(self, _BACKWARD, "backward")

    @classmethod
    def from_glyph(cls, glyph: str | int) -> Direction:
        """
        Parse one of the arrow glyphs ``<``, ``^``, ``>``, ``v``.

        Args:
            glyph: A single character, or its byte value

        Returns:
            The direction the glyph points to

        Raises:
            UnknownDirectionError: If the glyph is not one of the four arrows,
                or an int outside 0..255
        """
        if isinstance(glyph, int):
            # Only byte values name glyphs
            if not 0 <= glyph < 256:
                raise UnknownDirectionError(f"Unrecognized direction byte: {glyph}")
            glyph = chr(glyph)
        try:
            return _GLYPHS[glyph]
        except KeyError:
            raise UnknownDirectionError(
                f"Unrecognized direction glyph: {glyph!r}\n"
                f"  Valid glyphs: {', '.join(repr(g) for g in _GLYPHS)}"
            ) from None


CARDINAL: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)

ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.N,
    Direction.NE,
    Direction.E,
    Direction.SE,
    Direction.S,
    Direction.SW,
    Direction.W,
    Direction.NW,
)

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.NE: (1, -1),
    Direction.E: (1, 0),
    Direction.SE: (1, 1),
    Direction.S: (0, 1),
    Direction.SW: (-1, 1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, -1),
}

_LEFT = {
    Direction.E: Direction.N,
    Direction.S: Direction.E,
    Direction.W: Direction.S,
    Direction.N: Direction.W,
}
_RIGHT = {v: k for k, v in _LEFT.items()}
_BACKWARD = {
    Direction.E: Direction.W,
    Direction.S: Direction.N,
    Direction.W: Direction.E,
    Direction.N: Direction.S,
}

_GLYPHS = {
    "<": Direction.W,
    "^": Direction.N,
    ">": Direction.E,
    "v": Direction.S,
}


def _turn(direction: Direction, table: dict[Direction, Direction], name: str) -> Direction:
    # Turns are undefined for diagonals
    if direction not in table:
        raise NonCardinalDirectionError(f"Invalid direction for {name}: {direction}")
    return table[direction]


# =============================================================================
# Point
# =============================================================================


@dataclass(frozen=True)
class Point:
    """A signed 2D coordinate. x is the column, y is the row."""

    x: int
    y: int

    def neighbor(self, direction: Direction) -> Point:
        return self.neighbor_at(direction, 1)

    def neighbor_at(self, direction: Direction, distance: int) -> Point:
        dx, dy = direction.offset
        return Point(self.x + dx * distance, self.y + dy * distance)

    def neighbor_at_path(self, direction: Direction, distance: int) -> list[Point]:
        """
        Points walked over when moving ``distance`` steps, nearest first.

        The origin is excluded, the destination included.

        Raises:
            NonCardinalDirectionError: If direction is diagonal
        """
        if not direction.is_cardinal:
            raise NonCardinalDirectionError(f"Path is not implemented for {direction}")
        return [self.neighbor_at(direction, step) for step in range(1, distance + 1)]
