"""Reachability check system.

After every token reset the level is re-validated: if no goal can be reached
from the start cell through free cells (trail walls included), the level can
no longer be finished and ``GAME_OVER`` is queued. The check runs only on
``PATH_CHECK_REQUESTED``, never every tick, since only resets change the
walls the next attempt has to live with.
"""

import logging
from typing import Iterable, Optional

from butterfly_effect.components import Position
from butterfly_effect.events import push_event, take_event
from butterfly_effect.grid import GridState
from butterfly_effect.state import State
from butterfly_effect.types import Event
from butterfly_effect.utils.path import first_reachable_goal

logger = logging.getLogger(__name__)


def check(
    grid: GridState, start: Position, goals: Optional[Iterable[Position]] = None
) -> bool:
    """Return True if any goal is reachable from ``start``.

    Args:
        grid: Obstacle layout to validate.
        start: Cell the next attempt starts from.
        goals: Goals to test; defaults to every goal of ``grid``.
    """
    candidates = grid.goals if goals is None else goals
    return first_reachable_goal(grid, start, candidates) is not None


def path_check_system(state: State) -> State:
    state, requested = take_event(state, Event.PATH_CHECK_REQUESTED)
    if not requested:
        return state
    if check(state.grid, state.start):
        logger.debug("Level %d still solvable", state.level.index)
        return state
    logger.info("Level %d is no longer solvable", state.level.index)
    return push_event(state, Event.GAME_OVER)
