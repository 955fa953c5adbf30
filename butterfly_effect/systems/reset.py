"""Explicit player reset.

Consumes ``RESET_REQUESTED``: the current attempt's trail walls are removed
and the token goes back to the start cell with a full budget. Static walls,
settled trail walls, goals, the level index and the goal counter are left
alone. The same follow-up as a goal-reached reset is queued, so the level is
re-validated after the reset.
"""

import logging
from dataclasses import replace

from butterfly_effect.events import take_event
from butterfly_effect.state import State
from butterfly_effect.systems.goal import request_follow_up, reset_token
from butterfly_effect.systems.trail import undo_all_trail_walls
from butterfly_effect.types import Event

logger = logging.getLogger(__name__)


def reset_system(state: State) -> State:
    state, requested = take_event(state, Event.RESET_REQUESTED)
    if not requested:
        return state
    logger.debug("Player reset on level %d", state.level.index)
    state = replace(state, grid=undo_all_trail_walls(state.grid))
    state = reset_token(state)
    return request_follow_up(state)
