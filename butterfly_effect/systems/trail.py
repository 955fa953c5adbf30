"""Trail wall system.

Every bend the token makes leaves a permanent wall behind. A bend is detected
on the last three history cells ``prev, mid, last``: when ``prev`` and
``last`` differ on both axes the token changed axis at ``mid``, and ``mid``
becomes a trail wall. Straight runs never deposit.

The deposited cell is always one the token has just left, so it is free; a
converted cell is impassable and cannot reappear in history, so no cell is
deposited twice.
"""

import logging
from dataclasses import replace
from typing import Sequence

from butterfly_effect.components import Position
from butterfly_effect.grid import GridState
from butterfly_effect.state import State

logger = logging.getLogger(__name__)


def is_bend(prev: Position, mid: Position, last: Position) -> bool:
    """True if the three cells are not collinear (``mid`` is a corner)."""
    return prev.x != last.x and prev.y != last.y


def maybe_deposit_trail_wall(
    grid: GridState, history: Sequence[Position]
) -> GridState:
    """Deposit a wall at the middle of the last three history cells on a bend.

    Args:
        grid: Current obstacle layout.
        history: Token history, oldest first. Fewer than three cells never
            deposit.

    Returns:
        GridState: ``grid`` itself when nothing is deposited.
    """
    if len(history) < 3:
        return grid
    prev, mid, last = history[-3], history[-2], history[-1]
    if not is_bend(prev, mid, last):
        return grid
    logger.debug("Trail wall deposited at (%d, %d)", mid.x, mid.y)
    return grid.add_trail_wall(mid)


def undo_all_trail_walls(grid: GridState) -> GridState:
    """Free every trail wall deposited during the current attempt."""
    if len(grid.trail_walls) == 0:
        return grid
    logger.debug("Undoing %d trail walls", len(grid.trail_walls))
    return grid.clear_trail_walls()


def trail_system(state: State) -> State:
    """Run the bend test on the token's history (call after a successful move)."""
    grid = maybe_deposit_trail_wall(state.grid, state.token.history)
    if grid is state.grid:
        return state
    return replace(state, grid=grid)
