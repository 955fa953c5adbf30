"""Grid math helpers.

Pure, lightweight predicates used by the movement and reachability code.
"""

from typing import Iterator

from butterfly_effect.components import Position
from butterfly_effect.grid import GridState

NEIGHBOR_OFFSETS: list[tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def clamp_position(pos: Position, width: int, height: int) -> Position:
    """Clamp ``pos`` into ``[0, width) x [0, height)``."""
    return Position(min(max(pos.x, 0), width - 1), min(max(pos.y, 0), height - 1))


def free_neighbors(grid: GridState, pos: Position) -> Iterator[Position]:
    """Yield the 4-connected neighbors of ``pos`` that are free."""
    for dx, dy in NEIGHBOR_OFFSETS:
        neighbor = pos.shifted(dx, dy)
        if grid.is_free(neighbor):
            yield neighbor
