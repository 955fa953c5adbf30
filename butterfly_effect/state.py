"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
entire game snapshot at a single tick. All systems are pure functions that
take a previous ``State`` plus inputs (held actions) and return a *new*
``State``; no mutation happens in-place. Each field therefore has exactly one
writer per tick: the pipeline stage that replaces it.

Design notes:

* ``grid`` holds walls and goals (see :mod:`butterfly_effect.grid`). It is
    rebuilt wholesale on level load; within a level only the trail system
    adds to it and only the reset/goal stages clear or settle trail walls.
* ``token`` is the controllable piece; ``attempt`` counts goals reached since
    the level was loaded; ``level`` carries the per-level constants.
* ``events`` is the per-tick queue of :class:`~butterfly_effect.types.Event`
    values. It is always empty between ticks.
* ``win`` / ``lose`` are mutually exclusive terminal markers. The reducer
    short-circuits on terminal states.

See :mod:`butterfly_effect.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from butterfly_effect.components import Attempt, Level, Position, Token
from butterfly_effect.config import DEFAULT_CONFIG, GameConfig
from butterfly_effect.grid import GridState
from butterfly_effect.types import Event, Phase


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        grid (GridState): Walls, trail walls and goals of the loaded board.
        token (Token): The controllable token.
        config (GameConfig): Constants the game was started with.
        level (Level): Index and per-level constants of the loaded level.
        attempt (Attempt): Goals reached on the loaded level.
        events (PVector[Event]): Events raised during the current tick.
        turn (int): Tick counter (0-based).
        score (int): Goals reached over the whole game.
        win (bool): True once every level is cleared.
        lose (bool): True once a level became unsolvable.
        message (str | None): Optional informational / terminal message.
    """

    grid: GridState
    token: Token
    config: GameConfig = DEFAULT_CONFIG
    level: Level = Level()
    attempt: Attempt = Attempt()
    events: PVector[Event] = pvector()

    # Status
    turn: int = 0
    score: int = 0
    win: bool = False
    lose: bool = False
    message: Optional[str] = None

    @property
    def start(self) -> Position:
        """The fixed start cell tokens are reset to."""
        return self.config.start

    @property
    def phase(self) -> Phase:
        if self.win:
            return Phase.WON
        if self.lose:
            return Phase.LOST
        return Phase.PLAYING

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of the state for diagnostics.

        Returns:
            PMap[str, Any]: Field name to value for every field except the
            (large, constant) ``config``, skipping fields that are ``None``
            or ``False``. Zero counters such as ``turn`` are kept.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "config":
                continue
            value = getattr(self, field)
            if value is None or value is False:
                continue
            description = description.set(field, value)
        return description
