"""State reducer and tick orchestration.

This module wires together all systems in the fixed order that makes up one
*tick*. The exported :func:`step` is the only public mutation entry point for
gameplay progression and is pure: it returns a *new*
:class:`butterfly_effect.state.State`.

Ordering (each stage sees the results of the ones before it):

1. ``input_system`` / ``reset_input_system`` read the held actions.
2. ``movement_system`` advances the token (movement ticks only).
3. ``trail_system`` deposits a wall if the move completed a bend.
4. ``goal_system`` handles a goal arrival and resets the token.
5. ``reset_system`` handles an explicit player reset.
6. ``level_system`` loads the next level when the threshold was passed.
7. ``path_check_system`` re-validates the board after a reset.
8. ``game_over_system`` swaps in the game-over board if it failed.

Events left in the queue are dropped at the end of the tick.
"""

from dataclasses import replace
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from butterfly_effect.actions import Action
from butterfly_effect.events import drain_events
from butterfly_effect.state import State
from butterfly_effect.systems.goal import goal_system
from butterfly_effect.systems.input import input_system, reset_input_system
from butterfly_effect.systems.level import level_system
from butterfly_effect.systems.movement import movement_system
from butterfly_effect.systems.path import path_check_system
from butterfly_effect.systems.reset import reset_system
from butterfly_effect.systems.terminal import game_over_system, is_terminal_state
from butterfly_effect.systems.trail import trail_system
from butterfly_effect.utils.timestep import FixedTimestep

Actions = Union[Action, Iterable[Action]]


def step(state: State, actions: Actions = (), move: bool = True) -> State:
    """Advance the game by one tick.

    Args:
        state (State): Previous immutable game state.
        actions (Action | Iterable[Action]): Actions held during this tick. An
            empty collection (or ``Action.WAIT``) holds nothing.
        move (bool): Whether this tick is a movement tick. Frames between
            movement ticks still process input, resets and level changes.

    Returns:
        State: Next state snapshot. A terminal (won / lost) input state is
            returned unchanged.

    Raises:
        ValueError: If an action is not recognized.
    """
    held = _held_actions(actions)

    if is_terminal_state(state):
        return state

    state = input_system(state, held)
    state = reset_input_system(state, held)

    if move:
        state = _step_move(state)

    state = goal_system(state)
    state = reset_system(state)
    state = level_system(state)
    state = path_check_system(state)
    state = game_over_system(state)

    return _after_step(state)


def run_frame(
    state: State,
    actions: Actions,
    timestep: Optional[FixedTimestep],
    elapsed: float,
) -> Tuple[State, FixedTimestep]:
    """Process one rendered frame of ``elapsed`` seconds.

    Runs one movement tick per interval that became due on ``timestep``, or
    a single non-movement tick when none did. Pass ``None`` on the first
    frame to start a clock at ``state.config.tick_seconds``.

    Returns:
        Tuple[State, FixedTimestep]: The new state and the advanced clock.
    """
    if timestep is None:
        timestep = FixedTimestep.from_config(state.config)
    timestep, ticks = timestep.advance(elapsed)
    if ticks == 0:
        return step(state, actions, move=False), timestep
    for _ in range(ticks):
        state = step(state, actions)
    return state, timestep


def _held_actions(actions: Actions) -> FrozenSet[Action]:
    if isinstance(actions, str):
        actions = (actions,)  # a single Action is itself a str
    try:
        return frozenset(Action(action) for action in actions)
    except ValueError as exc:
        raise ValueError(f"Action is not valid: {actions!r}") from exc


def _step_move(state: State) -> State:
    """Advance the token; run the trail test only if it actually moved."""
    moved_state = movement_system(state)
    if moved_state.token is state.token:
        return state
    return trail_system(moved_state)


def _after_step(state: State) -> State:
    state = drain_events(state)
    return replace(state, turn=state.turn + 1)
