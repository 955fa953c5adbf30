"""Token component.

The single controllable piece. ``history`` lists every cell entered since the
last reset in chronological order, starting with the start cell; the trail
system reads its last three entries to detect bends.
"""

from dataclasses import dataclass, replace

from pyrsistent import pvector
from pyrsistent.typing import PVector

from butterfly_effect.components.direction import Direction
from butterfly_effect.components.position import Position


@dataclass(frozen=True)
class Token:
    """Controllable token.

    Attributes:
        position: Current cell.
        direction: Committed facing; the token advances along it each tick.
        turns_left: Remaining direction changes for this attempt.
        history: Cells visited since the last reset (oldest first).
    """

    position: Position
    direction: Direction = Direction.NEUTRAL
    turns_left: int = 0
    history: PVector[Position] = pvector()

    def __post_init__(self) -> None:
        if self.turns_left < 0:
            raise ValueError(f"turns_left must be >= 0, got {self.turns_left}")

    @property
    def out_of_turns(self) -> bool:
        """True once the direction-change budget is spent."""
        return self.turns_left == 0

    def moved_to(self, position: Position) -> "Token":
        """Return a copy standing on ``position`` with it appended to history."""
        return replace(self, position=position, history=self.history.append(position))


def fresh_token(start: Position, max_turns: int) -> Token:
    """Token at ``start`` facing neutral with a full budget."""
    return Token(
        position=start,
        direction=Direction.NEUTRAL,
        turns_left=max_turns,
        history=pvector([start]),
    )
