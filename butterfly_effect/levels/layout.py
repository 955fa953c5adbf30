"""Level layout parsing.

Layouts are plain text rows, top row first. Parsing is permissive: short rows
leave the missing cells free, and characters or rows that fall outside the
grid are ignored. Rows are flipped so that the last text row lands on the
lowest ``y``.

Glyphs:

* ``W`` static wall
* ``T`` goal cell
* anything else free (``S`` is kept in the shipped layouts as a start marker)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set, Tuple, Union

from pyrsistent import pset

from butterfly_effect.components import Position
from butterfly_effect.grid import GridState
from butterfly_effect.types import Layout, LayoutRows

logger = logging.getLogger(__name__)

WALL_GLYPH = "W"
GOAL_GLYPH = "T"


def parse_layout(
    rows: LayoutRows,
    width: int,
    height: int,
    offset: Tuple[int, int] = (0, 0),
) -> Tuple[Set[Position], Set[Position]]:
    """Read wall and goal cells out of ``rows``.

    Args:
        rows: Layout rows, top row first.
        width: Grid width; cells with ``x >= width`` are dropped.
        height: Grid height; cells with ``y >= height`` are dropped.
        offset: ``(dx, dy)`` added to every cell, e.g. ``(1, 1)`` to fit a
            layout inside a one-cell border.

    Returns:
        Tuple[Set[Position], Set[Position]]: ``(walls, goals)``.
    """
    dx, dy = offset
    walls: Set[Position] = set()
    goals: Set[Position] = set()
    dropped = 0
    for row_index, line in enumerate(reversed(rows)):
        for col_index, glyph in enumerate(line):
            if glyph not in (WALL_GLYPH, GOAL_GLYPH):
                continue
            pos = Position(col_index + dx, row_index + dy)
            if not (0 <= pos.x < width and 0 <= pos.y < height):
                dropped += 1
                continue
            if glyph == WALL_GLYPH:
                walls.add(pos)
            else:
                goals.add(pos)
    if dropped:
        logger.debug("Ignored %d layout cells outside %dx%d grid", dropped, width, height)
    return walls, goals


def border_cells(width: int, height: int) -> Set[Position]:
    """Cells of the one-cell ring around the grid."""
    cells = {Position(0, y) for y in range(height)}
    cells |= {Position(width - 1, y) for y in range(height)}
    cells |= {Position(x, 0) for x in range(width)}
    cells |= {Position(x, height - 1) for x in range(width)}
    return cells


def build_grid(
    rows: LayoutRows,
    width: int,
    height: int,
    border: bool,
    offset: Optional[Tuple[int, int]] = None,
) -> GridState:
    """Build a fresh :class:`GridState` from ``rows``.

    With ``border`` the layout is offset by one cell and surrounded by static
    walls, so a layout of ``width - 2`` columns fills the interior exactly.
    Goal glyphs that collide with the border are dropped. An explicit
    ``offset`` overrides the one implied by ``border``.
    """
    if offset is None:
        offset = (1, 1) if border else (0, 0)
    walls, goals = parse_layout(rows, width, height, offset=offset)
    if border:
        walls |= border_cells(width, height)
    return GridState(
        width=width,
        height=height,
        static_walls=pset(walls),
        goals=pset(goals - walls),
    )


def load_layout_file(path: Union[str, Path]) -> Layout:
    """Read a layout from a text file, one row per line.

    Blank rows are kept: they still occupy a grid row once flipped.
    """
    text = Path(path).read_text(encoding="utf-8")
    return tuple(text.splitlines())
