"""Level loading.

:func:`load_level` rebuilds the board for a level index: a fresh
:class:`GridState` from the layout, the goal counter zeroed and a fresh token
on the start cell. An index past the last configured level loads the "won"
board and marks the game as won.

:func:`level_system` consumes ``NEXT_LEVEL_REQUESTED`` and loads the next
index.
"""

import logging
from dataclasses import replace

from butterfly_effect.components import Attempt, Level, fresh_token
from butterfly_effect.config import DEFAULT_CONFIG, GameConfig
from butterfly_effect.events import take_event
from butterfly_effect.grid import GridState
from butterfly_effect.levels.layout import build_grid
from butterfly_effect.state import State
from butterfly_effect.types import Event

logger = logging.getLogger(__name__)


def level_grid(config: GameConfig, index: int) -> GridState:
    """Board for level ``index`` (the "won" board past the last level)."""
    if 0 <= index < len(config.levels):
        layout = config.levels[index]
    else:
        layout = config.won_layout
    return build_grid(layout, config.width, config.height, border=config.border)


def load_level(state: State, index: int) -> State:
    """Replace the board with level ``index``.

    Raises:
        ValueError: If ``index`` is negative.
    """
    if index < 0:
        raise ValueError(f"Level index must be >= 0, got {index}")
    config = state.config
    level = Level(
        index=index,
        max_turns=config.max_turns,
        goal_threshold=config.goal_threshold,
    )
    won = index >= len(config.levels)
    state = replace(
        state,
        grid=level_grid(config, index),
        token=fresh_token(config.start, config.max_turns),
        level=level,
        attempt=Attempt(),
        win=won,
        message="All levels cleared" if won else None,
    )
    if won:
        logger.info("All %d levels cleared", len(config.levels))
    else:
        logger.info("Loaded level %d", index)
    return state


def new_game(config: GameConfig = DEFAULT_CONFIG, level_index: int = 0) -> State:
    """Initial state for ``config`` starting at ``level_index``."""
    state = State(
        grid=GridState(width=config.width, height=config.height),
        token=fresh_token(config.start, config.max_turns),
        config=config,
    )
    return load_level(state, level_index)


def level_system(state: State) -> State:
    state, requested = take_event(state, Event.NEXT_LEVEL_REQUESTED)
    if not requested:
        return state
    return load_level(state, state.level.index + 1)
