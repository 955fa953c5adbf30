"""Token movement system.

Advances the token one cell along its committed direction. The step is
clamped to the grid; a step that would stay on the same cell, enter a wall
(static, settled or trail) or that is requested while facing ``NEUTRAL`` is
a no-op and leaves history untouched.

A successful step appends the new cell to ``history`` and, when the new cell
is a goal, queues ``GOAL_REACHED``.
"""

from dataclasses import replace

from butterfly_effect.components import Direction, Token
from butterfly_effect.events import push_event
from butterfly_effect.grid import GridState
from butterfly_effect.state import State
from butterfly_effect.types import Event
from butterfly_effect.utils.grid import clamp_position


def advance(token: Token, grid: GridState) -> Token:
    """Move ``token`` one cell if allowed.

    Returns:
        Token: ``token`` itself when blocked, otherwise the moved copy.
    """
    if token.direction == Direction.NEUTRAL:
        return token
    dx, dy = token.direction.delta
    next_pos = clamp_position(token.position.shifted(dx, dy), grid.width, grid.height)
    if next_pos == token.position or not grid.is_free(next_pos):
        return token
    return token.moved_to(next_pos)


def movement_system(state: State) -> State:
    """Advance the token and queue ``GOAL_REACHED`` on arrival at a goal."""
    moved = advance(state.token, state.grid)
    if moved is state.token:
        return state
    state = replace(state, token=moved)
    if state.grid.is_goal(moved.position):
        state = push_event(state, Event.GOAL_REACHED)
    return state
