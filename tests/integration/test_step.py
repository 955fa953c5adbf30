from dataclasses import replace
from typing import Optional, Sequence

import pytest

from butterfly_effect.actions import Action
from butterfly_effect.components import Direction, Position
from butterfly_effect.state import State
from butterfly_effect.step import run_frame, step
from butterfly_effect.utils.timestep import FixedTimestep
from tests.test_utils import make_grid, make_state, make_token, positions


def play(state: State, moves: Sequence[Optional[Action]]) -> State:
    for move in moves:
        state = step(state, () if move is None else move)
    return state


def test_straight_then_turn_leaves_wall() -> None:
    state = make_state(grid=make_grid(width=6))
    state = play(state, [Action.RIGHT, None, Action.UP])
    assert state.token.position == Position(3, 2)
    assert list(state.grid.trail_walls) == [Position(3, 1)]
    assert state.token.turns_left == 8
    assert state.turn == 3


def test_straight_run_leaves_no_wall() -> None:
    state = play(make_state(), [Action.UP, None, None])
    assert state.token.position == Position(1, 4)
    assert len(state.grid.trail_walls) == 0


def test_budget_exhaustion_blocks_turns() -> None:
    state = make_state(max_turns=1)
    state = play(state, [Action.RIGHT, Action.UP])
    assert state.token.direction == Direction.RIGHT
    assert state.token.turns_left == 0
    assert state.token.position == Position(3, 1)


def test_reversal_keeps_moving_forward() -> None:
    state = play(make_state(), [Action.RIGHT, Action.LEFT])
    assert state.token.direction == Direction.RIGHT
    assert state.token.position == Position(3, 1)
    assert state.token.turns_left == 9


def test_blocked_tick_leaves_history_alone() -> None:
    state = make_state(grid=make_grid(walls=[(2, 1)]))
    state = play(state, [Action.RIGHT, None])
    assert state.token.position == Position(1, 1)
    assert list(state.token.history) == positions([(1, 1)])


def test_reset_key_undoes_attempt() -> None:
    state = make_state(grid=make_grid(goals=[(4, 4)], width=6))
    state = play(state, [Action.RIGHT, None, Action.UP])
    assert len(state.grid.trail_walls) == 1
    state = step(state, Action.RESET)
    assert len(state.grid.trail_walls) == 0
    assert state.token.position == Position(1, 1)
    assert state.token.turns_left == 10
    assert not state.lose


def test_events_never_outlive_a_tick() -> None:
    state = make_state(grid=make_grid(goals=[(3, 1)]))
    state = play(state, [Action.RIGHT, None])
    assert state.attempt.goals_reached == 1
    assert len(state.events) == 0


def test_terminal_state_is_returned_unchanged() -> None:
    state = replace(make_state(), lose=True)
    assert step(state, Action.UP) is state
    won = replace(make_state(), win=True)
    assert step(won) is won


@pytest.mark.parametrize("actions", ["jump", ["up", "fly"]])
def test_invalid_action_raises(actions: object) -> None:
    with pytest.raises(ValueError):
        step(make_state(), actions)  # type: ignore[arg-type]


def test_string_actions_are_accepted() -> None:
    state = step(make_state(), "up")
    assert state.token.direction == Direction.UP


def test_non_movement_tick_processes_input_only() -> None:
    state = step(make_state(), Action.UP, move=False)
    assert state.token.direction == Direction.UP
    assert state.token.position == Position(1, 1)
    assert state.turn == 1


def test_run_frame_moves_at_fixed_rate() -> None:
    token = make_token((0, 1), direction=Direction.RIGHT, turns_left=9)
    state = make_state(token=token, grid=make_grid(width=8))
    clock = FixedTimestep(step_seconds=0.25)

    state, clock = run_frame(state, (), clock, 0.125)
    assert state.token.position == Position(0, 1)

    state, clock = run_frame(state, (), clock, 0.125)
    assert state.token.position == Position(1, 1)

    state, clock = run_frame(state, (), clock, 0.5)
    assert state.token.position == Position(3, 1)
    assert clock.accumulator == pytest.approx(0.0)


def test_run_frame_reads_input_between_ticks() -> None:
    clock = FixedTimestep(step_seconds=0.25)
    state, clock = run_frame(make_state(), Action.UP, clock, 0.1)
    assert state.token.direction == Direction.UP
    assert state.token.position == Position(1, 1)


@pytest.mark.parametrize("tick_seconds, expected_x", [(0.05, 4), (0.1, 2)])
def test_run_frame_clock_follows_config(tick_seconds: float, expected_x: int) -> None:
    token = make_token((0, 1), direction=Direction.RIGHT, turns_left=9)
    state = make_state(token=token, grid=make_grid(width=8))
    state = replace(state, config=replace(state.config, tick_seconds=tick_seconds))

    state, clock = run_frame(state, (), None, 0.2)
    assert clock.step_seconds == pytest.approx(tick_seconds)
    assert state.token.position == Position(expected_x, 1)
