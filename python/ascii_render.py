"""
ASCII rendering for chargrid grids.

Provides two rendering approaches:
1. Plain dump - one text line per row, visited points replaced by a marker
2. Boxed colour rendering - bordered grid with per-character colours
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, TextIO

import simple_chalk as chalk  # type: ignore[import-untyped]

from chargrid import Grid
from grid_types import Point

logger = logging.getLogger(__name__)


# =============================================================================
# Plain Dump
# =============================================================================


def render_plain(grid: Grid, visited: Iterable[Point] = (), marker: str = "O") -> str:
    """Grid rows joined by newlines, with marker drawn over visited points."""
    visited = set(visited)
    return "\n".join(
        "".join(
            marker if Point(x, y) in visited else grid[Point(x, y)]
            for x in range(grid.cols)
        )
        for y in range(grid.rows)
    )


def print_grid(
    grid: Grid,
    visited: Iterable[Point] = (),
    marker: str = "O",
    file: TextIO | None = None,
) -> None:
    out = file if file is not None else sys.stdout
    out.write(render_plain(grid, visited, marker) + "\n")


# =============================================================================
# Boxed Colour Rendering
# =============================================================================


DEFAULT_PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def char_colors(
    grid: Grid, palette: list[Callable[[str], str]] | None = None
) -> dict[str, Callable[[str], str]]:
    """Assign a palette colour to each distinct character, in sorted order."""
    colors = palette if palette is not None else DEFAULT_PALETTE
    distinct = sorted({c for line in grid.lines() for c in line})
    return {c: colors[i % len(colors)] for i, c in enumerate(distinct)}


def render_grid(
    grid: Grid,
    highlight: Iterable[Point] = (),
    palette: list[Callable[[str], str]] | None = None,
    border: bool = True,
) -> str:
    """
    Render a grid with ANSI colours.

    Args:
        grid: The grid to render
        highlight: Points drawn black on white
        palette: Colour functions cycled over distinct characters
        border: Draw a box around the grid

    Returns:
        Rendered string with ANSI colour codes
    """
    highlight = set(highlight)
    colors = char_colors(grid, palette)
    logger.debug("render_grid: %dx%d, %d colours", grid.rows, grid.cols, len(colors))

    lines: list[str] = []
    if border:
        lines.append("┌" + "─" * grid.cols + "┐")

    for y, row in enumerate(grid.lines()):
        line_parts = ["│"] if border else []
        for x, char in enumerate(row):
            if Point(x, y) in highlight:
                line_parts.append(chalk.bgWhite.black(char))
            else:
                line_parts.append(colors.get(char, lambda s: s)(char))
        if border:
            line_parts.append("│")
        lines.append("".join(line_parts))

    if border:
        lines.append("└" + "─" * grid.cols + "┘")

    return "\n".join(lines)
