"""Goal-reached system.

Consumes ``GOAL_REACHED``: the goal counter and score go up, this attempt's
trail walls become permanent, and the token returns to the start cell with a
full budget. The follow-up is then queued: ``NEXT_LEVEL_REQUESTED`` once more
goals than the level threshold were reached, otherwise
``PATH_CHECK_REQUESTED`` so the level is re-validated against the new walls.
"""

import logging
from dataclasses import replace

from butterfly_effect.components import Attempt, fresh_token
from butterfly_effect.events import push_event, take_event
from butterfly_effect.state import State
from butterfly_effect.types import Event

logger = logging.getLogger(__name__)


def reset_token(state: State) -> State:
    """Put a fresh token on the start cell."""
    return replace(state, token=fresh_token(state.start, state.level.max_turns))


def request_follow_up(state: State) -> State:
    """Queue the level advance or the reachability check after a token reset."""
    if state.attempt.goals_reached > state.level.goal_threshold:
        return push_event(state, Event.NEXT_LEVEL_REQUESTED)
    return push_event(state, Event.PATH_CHECK_REQUESTED)


def goal_system(state: State) -> State:
    state, reached = take_event(state, Event.GOAL_REACHED)
    if not reached:
        return state

    goals_reached = state.attempt.goals_reached + 1
    logger.debug(
        "Goal reached at (%d, %d) on level %d (%d so far)",
        state.token.position.x,
        state.token.position.y,
        state.level.index,
        goals_reached,
    )
    state = replace(
        state,
        attempt=Attempt(goals_reached=goals_reached),
        score=state.score + 1,
        grid=state.grid.settle_trail_walls(),
    )
    state = reset_token(state)
    return request_follow_up(state)
