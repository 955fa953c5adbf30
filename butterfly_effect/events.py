"""Per-tick event queue helpers.

Stages of the :func:`butterfly_effect.step.step` pipeline talk to each other
through a small queue of tagged :class:`~butterfly_effect.types.Event` values
stored on ``State.events``. A stage raises an event with :func:`push_event`;
the stage that owns the reaction removes it with :func:`take_event`. Whatever
is left at the end of the tick is discarded by :func:`drain_events`, so no
event outlives the tick that produced it.
"""

from dataclasses import replace
from typing import Tuple

from pyrsistent import pvector

from butterfly_effect.state import State
from butterfly_effect.types import Event


def push_event(state: State, event: Event) -> State:
    """Append ``event`` to the queue."""
    return replace(state, events=state.events.append(event))


def take_event(state: State, event: Event) -> Tuple[State, bool]:
    """Remove every queued ``event``.

    Returns:
        Tuple[State, bool]: The state without those events and whether any
            were present.
    """
    if event not in state.events:
        return state, False
    remaining = pvector(queued for queued in state.events if queued != event)
    return replace(state, events=remaining), True


def drain_events(state: State) -> State:
    """Discard everything still queued (end of tick)."""
    if len(state.events) == 0:
        return state
    return replace(state, events=pvector())
