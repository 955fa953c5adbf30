"""Position component.

Immutable integer grid coordinates. ``x`` grows to the right and ``y`` grows
upward, so layout rows read from text are flipped when loaded (see
:mod:`butterfly_effect.levels.layout`).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at bottom).
    """

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Position":
        """Return the coordinate offset by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)
