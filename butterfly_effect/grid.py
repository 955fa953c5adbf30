"""Obstacle map for a single level.

:class:`GridState` is the static-plus-trail obstacle layout the token moves
on. It is rebuilt wholesale whenever a level (or an end-state board) is loaded
and otherwise only changes through the trail system:

* ``static_walls`` come from the level layout (including the border).
* ``trail_walls`` are deposited at bend points during the current attempt, in
  insertion order. An explicit player reset removes them.
* ``settled_walls`` are trail walls from earlier attempts. A goal-reached
  reset moves the current ``trail_walls`` here, after which they are as
  permanent as the layout itself.

All queries are pure; "mutators" return a new ``GridState``.
"""

from dataclasses import dataclass, replace
from typing import Iterator

from pyrsistent import pset, pvector
from pyrsistent.typing import PSet, PVector

from butterfly_effect.components import Position


@dataclass(frozen=True)
class GridState:
    """Immutable obstacle / goal layout.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        static_walls (PSet[Position]): Layout walls, border included.
        goals (PSet[Position]): Goal cells. Never overlap ``static_walls``.
        trail_walls (PVector[Position]): Undoable walls from the current attempt.
        settled_walls (PSet[Position]): Trail walls committed by earlier attempts.
    """

    width: int
    height: int
    static_walls: PSet[Position] = pset()
    goals: PSet[Position] = pset()
    trail_walls: PVector[Position] = pvector()
    settled_walls: PSet[Position] = pset()

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid grid size {self.width}x{self.height}")
        overlap = self.static_walls & self.goals
        if overlap:
            raise ValueError(f"Goals placed on walls: {sorted(overlap, key=_key)}")

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_wall(self, pos: Position) -> bool:
        """Return True if any kind of wall occupies ``pos``."""
        return (
            pos in self.static_walls
            or pos in self.settled_walls
            or pos in self.trail_walls
        )

    def is_free(self, pos: Position) -> bool:
        """In bounds and not occupied by a wall."""
        return self.in_bounds(pos) and not self.is_wall(pos)

    def is_goal(self, pos: Position) -> bool:
        return pos in self.goals

    def walls(self) -> Iterator[Position]:
        """Iterate every wall cell (static, settled, then current trail)."""
        yield from self.static_walls
        yield from self.settled_walls
        yield from self.trail_walls

    def free_cells(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                pos = Position(x, y)
                if not self.is_wall(pos):
                    yield pos

    def add_trail_wall(self, pos: Position) -> "GridState":
        """Deposit a trail wall at ``pos``.

        Raises:
            ValueError: If ``pos`` is out of bounds or already a wall. Either
                case means the caller broke the movement invariants.
        """
        if not self.is_free(pos):
            raise ValueError(f"Cannot deposit trail wall on occupied cell {pos}")
        return replace(self, trail_walls=self.trail_walls.append(pos))

    def clear_trail_walls(self) -> "GridState":
        """Drop every undoable trail wall; settled walls stay."""
        return replace(self, trail_walls=pvector())

    def settle_trail_walls(self) -> "GridState":
        """Make the current attempt's trail walls permanent."""
        return replace(
            self,
            settled_walls=self.settled_walls.update(self.trail_walls),
            trail_walls=pvector(),
        )


def _key(pos: Position) -> tuple[int, int]:
    return (pos.y, pos.x)
