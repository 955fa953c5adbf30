"""Input systems.

Translate the set of held actions into token intent:

* :func:`input_system` turns held movement keys into a direction change,
    spending one turn from the budget per accepted change.
* :func:`reset_input_system` queues a ``RESET_REQUESTED`` event while the
    reset key is held.

Direction changes obey two rules. A reversal (requesting the opposite of the
current facing) is ignored, and once ``turns_left`` reaches zero no further
change is accepted. Holding a key that matches the current facing costs
nothing, which also debounces held keys without edge detection.
"""

from dataclasses import replace
from typing import AbstractSet

from butterfly_effect.actions import Action, resolve_direction
from butterfly_effect.components import Direction, Token
from butterfly_effect.events import push_event
from butterfly_effect.state import State
from butterfly_effect.types import Event


def apply_intent(token: Token, requested: Direction) -> Token:
    """Apply a requested direction to ``token``.

    Args:
        token: Current token.
        requested: Direction asked for this tick. ``NEUTRAL`` means "no
            change" since the neutral facing cannot be requested by a key.

    Returns:
        Token: ``token`` itself when nothing changes, otherwise a copy with
            the new direction and one turn fewer.
    """
    if token.out_of_turns or requested == Direction.NEUTRAL:
        return token
    if requested == token.direction.opposite() or requested == token.direction:
        return token
    return replace(token, direction=requested, turns_left=token.turns_left - 1)


def input_system(state: State, held: AbstractSet[Action]) -> State:
    """Update the token's direction from the held movement keys."""
    token = state.token
    if token.out_of_turns:
        return state
    requested = resolve_direction(held, token.direction, state.config.key_priority)
    next_token = apply_intent(token, requested)
    if next_token is token:
        return state
    return replace(state, token=next_token)


def reset_input_system(state: State, held: AbstractSet[Action]) -> State:
    """Queue a reset request while ``Action.RESET`` is held."""
    if Action.RESET not in held:
        return state
    return push_event(state, Event.RESET_REQUESTED)
