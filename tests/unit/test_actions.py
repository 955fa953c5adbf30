import pytest

from butterfly_effect.actions import (
    Action,
    DEFAULT_KEY_PRIORITY,
    GymAction,
    resolve_direction,
)
from butterfly_effect.components import Direction


@pytest.mark.parametrize(
    "held, current, expected",
    [
        ([], Direction.UP, Direction.UP),
        ([], Direction.NEUTRAL, Direction.NEUTRAL),
        ([Action.WAIT], Direction.RIGHT, Direction.RIGHT),
        ([Action.RESET], Direction.DOWN, Direction.DOWN),
        ([Action.UP], Direction.NEUTRAL, Direction.UP),
        # Left beats everything
        ([Action.RIGHT, Action.LEFT], Direction.NEUTRAL, Direction.LEFT),
        ([Action.UP, Action.DOWN, Action.LEFT], Direction.NEUTRAL, Direction.LEFT),
        # Down beats up and right
        ([Action.UP, Action.DOWN], Direction.NEUTRAL, Direction.DOWN),
        ([Action.RIGHT, Action.DOWN], Direction.NEUTRAL, Direction.DOWN),
        # Up beats right
        ([Action.RIGHT, Action.UP], Direction.NEUTRAL, Direction.UP),
        (list(Action), Direction.NEUTRAL, Direction.LEFT),
    ],
)
def test_resolve_direction_default_priority(
    held: list[Action], current: Direction, expected: Direction
) -> None:
    assert resolve_direction(held, current) == expected


def test_resolve_direction_custom_priority() -> None:
    priority = (Direction.RIGHT, Direction.UP, Direction.DOWN, Direction.LEFT)
    held = [Action.LEFT, Action.RIGHT]
    assert resolve_direction(held, Direction.NEUTRAL, priority) == Direction.RIGHT


def test_default_priority_order() -> None:
    assert DEFAULT_KEY_PRIORITY == (
        Direction.LEFT,
        Direction.DOWN,
        Direction.UP,
        Direction.RIGHT,
    )


def test_gym_action_indices_are_stable() -> None:
    assert [int(a) for a in GymAction] == list(range(len(Action)))
    assert [a.name for a in GymAction] == [a.name for a in Action]
