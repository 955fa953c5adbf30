"""Action enumerations.

Defines the human readable :class:`Action` (string enum) used by the reducer
and a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

Input is sampled as the *set of currently held* actions each tick. The four
movement actions map onto a requested :class:`Direction`; when several are
held at once the configured priority decides which one wins.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Iterable, Sequence

from butterfly_effect.components import Direction


class Action(StrEnum):
    """String enum of player inputs.

    Members:
        LEFT, UP, RIGHT, DOWN: Movement keys.
        RESET: Undo this attempt's trail walls and return to start.
        WAIT: Nothing held; the token keeps its direction.
    """

    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    RESET = auto()
    WAIT = auto()


ACTION_TO_DIRECTION: Dict[Action, Direction] = {
    Action.LEFT: Direction.LEFT,
    Action.UP: Direction.UP,
    Action.RIGHT: Direction.RIGHT,
    Action.DOWN: Direction.DOWN,
}

# Strongest first.
DEFAULT_KEY_PRIORITY = (Direction.LEFT, Direction.DOWN, Direction.UP, Direction.RIGHT)


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    LEFT = 0  # start at 0 for explicitness
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    RESET = auto()
    WAIT = auto()


def resolve_direction(
    held: Iterable[Action],
    current: Direction,
    priority: Sequence[Direction] = DEFAULT_KEY_PRIORITY,
) -> Direction:
    """Pick the requested direction from the held movement keys.

    Args:
        held: Actions held this tick; non-movement actions are ignored.
        current: The token's committed direction, returned when no movement
            key is held.
        priority: Directions ordered from strongest to weakest.

    Returns:
        Direction: The requested (not yet validated) direction.
    """
    requested = {ACTION_TO_DIRECTION[a] for a in held if a in ACTION_TO_DIRECTION}
    for direction in priority:
        if direction in requested:
            return direction
    return current
