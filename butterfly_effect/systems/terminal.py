"""Terminal condition systems.

:func:`game_over_system` consumes ``GAME_OVER``: the board is replaced by the
fixed game-over layout, placed like a level but without the border ring. The
token is parked on the start cell and ``lose`` is set. The win side is handled
by :func:`butterfly_effect.systems.level.load_level`.
"""

import logging
from dataclasses import replace

from butterfly_effect.components import fresh_token
from butterfly_effect.events import take_event
from butterfly_effect.levels.layout import build_grid
from butterfly_effect.state import State
from butterfly_effect.types import Event

logger = logging.getLogger(__name__)


def is_terminal_state(state: State) -> bool:
    """Return True if the game already ended (win or lose)."""
    return state.win or state.lose


def game_over_system(state: State) -> State:
    state, over = take_event(state, Event.GAME_OVER)
    if not over or is_terminal_state(state):
        return state
    config = state.config
    logger.info("Game over on level %d", state.level.index)
    offset = (1, 1) if config.border else (0, 0)
    grid = build_grid(
        config.game_over_layout, config.width, config.height, border=False, offset=offset
    )
    return replace(
        state,
        grid=grid,
        token=fresh_token(config.start, 0),
        lose=True,
        message="Game over: no goal can be reached",
    )
