"""Facing direction of the token.

``NEUTRAL`` is the resting direction after every token reset; the token does
not move while neutral.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """Cardinal facing plus the neutral (standing still) state."""

    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    NEUTRAL = auto()

    def opposite(self) -> "Direction":
        """Return the reverse direction. ``NEUTRAL`` is its own opposite."""
        return _OPPOSITE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step ``(dx, dy)`` for this direction (``y`` grows upward)."""
        return _DELTA[self]


_OPPOSITE: Dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.NEUTRAL: Direction.NEUTRAL,
}

_DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.NEUTRAL: (0, 0),
}
