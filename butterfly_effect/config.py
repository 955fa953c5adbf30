"""Game configuration.

A single frozen :class:`GameConfig` carries every tunable constant. Override
fields with :func:`dataclasses.replace`::

    config = replace(DEFAULT_CONFIG, max_turns=5)
"""

from dataclasses import dataclass
from typing import Tuple

from butterfly_effect.actions import DEFAULT_KEY_PRIORITY
from butterfly_effect.components import Direction, Position
from butterfly_effect.levels.builtin import (
    DEFAULT_LEVELS,
    GAME_OVER_LAYOUT,
    WON_LAYOUT,
)
from butterfly_effect.types import Layout


@dataclass(frozen=True)
class GameConfig:
    """Tunable game constants.

    Attributes:
        width: Arena width in cells, border included.
        height: Arena height in cells, border included.
        start: Token start cell for every level.
        max_turns: Direction changes granted per attempt.
        goal_threshold: A level advances once more goals than this were reached.
        key_priority: Winning order when several movement keys are held.
        tick_seconds: Movement tick interval for :class:`FixedTimestep`.
        border: Surround every level with a ring of static walls.
        levels: Playable layouts in order.
        won_layout: Board shown once every level is cleared.
        game_over_layout: Board shown when a level becomes unsolvable.
    """

    width: int = 24
    height: int = 16
    start: Position = Position(1, 1)
    max_turns: int = 10
    goal_threshold: int = 2
    key_priority: Tuple[Direction, ...] = DEFAULT_KEY_PRIORITY
    tick_seconds: float = 0.05
    border: bool = True
    levels: Tuple[Layout, ...] = DEFAULT_LEVELS
    won_layout: Layout = WON_LAYOUT
    game_over_layout: Layout = GAME_OVER_LAYOUT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid arena size {self.width}x{self.height}")
        if not (0 <= self.start.x < self.width and 0 <= self.start.y < self.height):
            raise ValueError(f"Start cell {self.start} outside the arena")
        if self.max_turns < 0:
            raise ValueError("max_turns must be >= 0")
        if self.goal_threshold < 0:
            raise ValueError("goal_threshold must be >= 0")
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be > 0")


DEFAULT_CONFIG = GameConfig()
