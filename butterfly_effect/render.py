"""Render surface.

:func:`render_entities` flattens a :class:`State` into the entities a
renderer needs: a cell, a semantic kind and, for the token, its facing and
remaining budget. :func:`render_text` draws the same data as ASCII, top row
first, which is handy in logs and tests.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from butterfly_effect.components import Direction, Position
from butterfly_effect.state import State
from butterfly_effect.types import EntityKind


@dataclass(frozen=True)
class RenderEntity:
    """One drawable entity.

    Attributes:
        position: Cell the entity occupies.
        kind: Wall, goal or token.
        direction: Token facing (token only).
        turns_left: Remaining direction changes (token only).
    """

    position: Position
    kind: EntityKind
    direction: Optional[Direction] = None
    turns_left: Optional[int] = None


TOKEN_GLYPHS: Dict[Direction, str] = {
    Direction.LEFT: "<",
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.NEUTRAL: "o",
}

KIND_GLYPHS: Dict[EntityKind, str] = {
    EntityKind.WALL: "W",
    EntityKind.GOAL: "T",
}


def render_entities(state: State) -> List[RenderEntity]:
    """List walls, goals and the token, token last (drawn on top)."""
    grid = state.grid
    entities = [RenderEntity(pos, EntityKind.WALL) for pos in grid.walls()]
    entities.extend(RenderEntity(pos, EntityKind.GOAL) for pos in grid.goals)
    token = state.token
    entities.append(
        RenderEntity(
            token.position,
            EntityKind.TOKEN,
            direction=token.direction,
            turns_left=token.turns_left,
        )
    )
    return entities


def render_text(state: State, empty: str = " ") -> str:
    """ASCII board, top row first, one line per grid row."""
    grid = state.grid
    rows = [[empty] * grid.width for _ in range(grid.height)]
    for entity in render_entities(state):
        pos = entity.position
        if not grid.in_bounds(pos):
            continue
        if entity.kind == EntityKind.TOKEN:
            glyph = TOKEN_GLYPHS[entity.direction or Direction.NEUTRAL]
        else:
            glyph = KIND_GLYPHS[entity.kind]
        rows[pos.y][pos.x] = glyph
    return "\n".join("".join(row) for row in reversed(rows))
