"""Tests for grid_types module."""

import pytest

from grid_types import (
    ALL_DIRECTIONS,
    CARDINAL,
    ContractViolation,
    Direction,
    GridError,
    NonCardinalDirectionError,
    Point,
    UnknownDirectionError,
)

DIAGONALS = [Direction.NE, Direction.SE, Direction.SW, Direction.NW]


class TestDirection:
    """Tests for the Direction enumeration."""

    def test_subsets(self) -> None:
        """Cardinal and all-direction constants hold the expected members."""
        assert CARDINAL == (Direction.N, Direction.E, Direction.S, Direction.W)
        assert len(ALL_DIRECTIONS) == 8
        assert set(ALL_DIRECTIONS) == set(Direction)
        assert all(d.is_cardinal for d in CARDINAL)
        assert not any(d.is_cardinal for d in DIAGONALS)

    def test_left(self) -> None:
        assert Direction.N.left() == Direction.W
        assert Direction.E.left() == Direction.N
        assert Direction.S.left() == Direction.E
        assert Direction.W.left() == Direction.S

    def test_right(self) -> None:
        assert Direction.N.right() == Direction.E
        assert Direction.E.right() == Direction.S
        assert Direction.S.right() == Direction.W
        assert Direction.W.right() == Direction.N

    def test_backward(self) -> None:
        assert Direction.N.backward() == Direction.S
        assert Direction.E.backward() == Direction.W
        assert Direction.S.backward() == Direction.N
        assert Direction.W.backward() == Direction.E

    def test_turns_compose(self) -> None:
        """Left undoes right, and two rights make a backward."""
        for d in CARDINAL:
            assert d.left().right() == d
            assert d.right().right() == d.backward()

    @pytest.mark.parametrize("direction", DIAGONALS)
    def test_turns_reject_diagonals(self, direction: Direction) -> None:
        """Turning a diagonal is a contract violation, not a recoverable error."""
        for turn in (direction.left, direction.right, direction.backward):
            with pytest.raises(NonCardinalDirectionError) as exc_info:
                turn()
            assert isinstance(exc_info.value, ContractViolation)
            assert not isinstance(exc_info.value, GridError)

    def test_from_glyph(self) -> None:
        assert Direction.from_glyph("<") == Direction.W
        assert Direction.from_glyph("^") == Direction.N
        assert Direction.from_glyph(">") == Direction.E
        assert Direction.from_glyph("v") == Direction.S

    def test_from_glyph_byte(self) -> None:
        assert Direction.from_glyph(ord("<")) == Direction.W
        assert Direction.from_glyph(ord("^")) == Direction.N
        assert Direction.from_glyph(ord(">")) == Direction.E
        assert Direction.from_glyph(ord("v")) == Direction.S

    @pytest.mark.parametrize(
        "glyph", ["a", "/", "x", "l", "V", "", "<<", ord("a"), -1, 0x110000, 2**64]
    )
    def test_from_glyph_unrecognized(self, glyph: str | int) -> None:
        """Unknown glyphs fail with a recoverable error."""
        with pytest.raises(UnknownDirectionError) as exc_info:
            Direction.from_glyph(glyph)
        assert isinstance(exc_info.value, GridError)


class TestPoint:
    """Tests for Point arithmetic."""

    def test_neighbor(self) -> None:
        point = Point(5, 3)

        assert point.neighbor(Direction.N) == Point(5, 2)
        assert point.neighbor(Direction.NE) == Point(6, 2)
        assert point.neighbor(Direction.E) == Point(6, 3)
        assert point.neighbor(Direction.SE) == Point(6, 4)
        assert point.neighbor(Direction.S) == Point(5, 4)
        assert point.neighbor(Direction.SW) == Point(4, 4)
        assert point.neighbor(Direction.W) == Point(4, 3)
        assert point.neighbor(Direction.NW) == Point(4, 2)

    def test_neighbor_at(self) -> None:
        point = Point(5, 3)

        assert point.neighbor_at(Direction.N, 7) == Point(5, -4)
        assert point.neighbor_at(Direction.NE, 7) == Point(12, -4)
        assert point.neighbor_at(Direction.E, 7) == Point(12, 3)
        assert point.neighbor_at(Direction.SE, 7) == Point(12, 10)
        assert point.neighbor_at(Direction.S, 7) == Point(5, 10)
        assert point.neighbor_at(Direction.SW, 7) == Point(-2, 10)
        assert point.neighbor_at(Direction.W, 7) == Point(-2, 3)
        assert point.neighbor_at(Direction.NW, 7) == Point(-2, -4)

    def test_neighbor_at_zero_is_origin(self) -> None:
        for d in ALL_DIRECTIONS:
            assert Point(-1, 4).neighbor_at(d, 0) == Point(-1, 4)

    def test_neighbor_at_path(self) -> None:
        """Paths exclude the origin, include the destination, nearest first."""
        point = Point(5, 3)

        assert point.neighbor_at_path(Direction.N, 7) == [Point(5, y) for y in range(2, -5, -1)]
        assert point.neighbor_at_path(Direction.E, 7) == [Point(x, 3) for x in range(6, 13)]
        assert point.neighbor_at_path(Direction.S, 7) == [Point(5, y) for y in range(4, 11)]
        assert point.neighbor_at_path(Direction.W, 7) == [Point(x, 3) for x in range(4, -3, -1)]

    def test_neighbor_at_path_ends_at_neighbor_at(self) -> None:
        point = Point(0, 0)
        for d in CARDINAL:
            path = point.neighbor_at_path(d, 4)
            assert len(path) == 4
            assert path[0] == point.neighbor(d)
            assert path[-1] == point.neighbor_at(d, 4)

    def test_neighbor_at_path_zero_distance(self) -> None:
        assert Point(1, 1).neighbor_at_path(Direction.E, 0) == []

    @pytest.mark.parametrize("direction", DIAGONALS)
    def test_neighbor_at_path_rejects_diagonals(self, direction: Direction) -> None:
        with pytest.raises(NonCardinalDirectionError):
            Point(0, 0).neighbor_at_path(direction, 3)

    def test_points_are_hashable_values(self) -> None:
        assert Point(1, 2) == Point(1, 2)
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2
