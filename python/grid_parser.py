"""
Line parsing utilities for chargrid inputs.

Turns raw input lines into integers, string fields, regex-decoded records,
paragraph groups, or a Grid.
"""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from chargrid import Grid
from grid_types import GridError

__all__ = [
    "ParseError",
    "decode_line_to_signed_integer",
    "decode_line_to_string",
    "decode_line_to_unsigned_integer",
    "group_lines",
    "parse_lines_to_grid",
    "parse_lines_to_integer",
    "parse_lines_to_integers",
    "parse_lines_to_strings",
    "parse_lines_to_unsigned_integer",
    "parse_lines_to_unsigned_integers",
    "parse_lines_with_regex",
]

T = TypeVar("T")

_SIGNED = re.compile(r"[+-]?\d+")
_UNSIGNED = re.compile(r"\d+")


class ParseError(GridError):
    """Input lines do not have the expected shape."""


def _numbers(lines: list[str], pattern: re.Pattern[str]) -> list[list[int]]:
    numbers: list[list[int]] = []
    for line_idx, line in enumerate(lines):
        if any(c.isalpha() for c in line):
            raise ParseError(
                f"Line {line_idx}: '{line}' contains non-number character(s)"
            )
        numbers.append([int(m) for m in pattern.findall(line)])
    return numbers


def _exactly_one(rows: list[list[int]]) -> list[int]:
    single: list[int] = []
    for line_idx, row in enumerate(rows):
        if len(row) != 1:
            raise ParseError(
                f"Exactly one integer expected on line {line_idx}, found {row}"
            )
        single.append(row[0])
    return single


def parse_lines_to_integers(lines: list[str]) -> list[list[int]]:
    """Every signed integer on every line."""
    return _numbers(lines, _SIGNED)


def parse_lines_to_integer(lines: list[str]) -> list[int]:
    """One signed integer per line."""
    return _exactly_one(parse_lines_to_integers(lines))


def parse_lines_to_unsigned_integers(lines: list[str]) -> list[list[int]]:
    """Every unsigned integer on every line. Signs are ignored."""
    return _numbers(lines, _UNSIGNED)


def parse_lines_to_unsigned_integer(lines: list[str]) -> list[int]:
    return _exactly_one(parse_lines_to_unsigned_integers(lines))


def parse_lines_to_strings(lines: list[str], pattern: str) -> list[list[str]]:
    """Split each stripped line on pattern and strip every field."""
    return [[field.strip() for field in line.strip().split(pattern)] for line in lines]


def parse_lines_with_regex(
    lines: list[str], regex: str, func: Callable[[list[str]], T]
) -> list[T]:
    """
    Decode every line with a regex and a user decoding function.

    The regex is searched in each line; its capture groups (all of which
    must participate in the match) are handed to func, whose return value
    becomes that line's record.

    Example:
        parse_lines_with_regex(
            ["Button A: X+77, Y+52"],
            r"^Button A: X\\+(\\d+), Y\\+(\\d+)",
            lambda g: (int(g[0]), int(g[1])),
        )
        -> [(77, 52)]

    Args:
        lines: Input lines
        regex: Pattern compiled once for all lines
        func: Decoder from capture groups to a record; may raise

    Returns:
        One decoded record per line

    Raises:
        ParseError: If a line does not match or a group is missing
    """
    pattern = re.compile(regex)
    decoded: list[T] = []

    for line in lines:
        match = pattern.search(line)
        if match is None:
            raise ParseError(f"Failed to parse line '{line}'\n  Pattern: {regex}")

        groups: list[str] = []
        for group_idx, group in enumerate(match.groups()):
            if group is None:
                raise ParseError(
                    f"Missing capture group at index {group_idx}\n  Line: '{line}'"
                )
            groups.append(group)

        decoded.append(func(groups))

    return decoded


def parse_lines_to_grid(lines: list[str]) -> Grid:
    return Grid.from_lines(lines)


def group_lines(lines: list[str]) -> list[list[str]]:
    """Split lines into paragraphs on empty lines, dropping empty paragraphs."""
    groups: list[list[str]] = []
    group: list[str] = []

    for line in lines:
        if line:
            group.append(line)
        elif group:
            groups.append(group)
            group = []

    if group:
        groups.append(group)

    return groups


def _after(line: str, pat: str) -> str:
    pos = line.find(pat)
    if pos < 0:
        raise ParseError(f"Pattern '{pat}' not found in '{line}'")
    return line[pos + len(pat):].strip()


def decode_line_to_unsigned_integer(line: str, pat: str) -> int:
    text = _after(line, pat)
    if _UNSIGNED.fullmatch(text) is None:
        raise ParseError(
            f"Failed to parse '{line}' after pattern '{pat}'\n"
            f"  Substring '{text}' is not an unsigned integer"
        )
    return int(text)


def decode_line_to_signed_integer(line: str, pat: str) -> int:
    text = _after(line, pat)
    if _SIGNED.fullmatch(text) is None:
        raise ParseError(
            f"Failed to parse '{line}' after pattern '{pat}'\n"
            f"  Substring '{text}' is not an integer"
        )
    return int(text)


def decode_line_to_string(line: str, pat: str) -> str:
    return _after(line, pat)
