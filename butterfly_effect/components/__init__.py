"""butterfly_effect.components
==============================

Aggregate import surface for the value objects that make up a
:class:`butterfly_effect.state.State`.

All components are frozen ``@dataclass`` values (or enums) carrying no
behavior beyond small derived helpers; systems replace them wholesale to
express change between ticks::

    from butterfly_effect.components import Direction, Position, Token

"""

from .attempt import Attempt
from .direction import Direction
from .level import Level
from .position import Position
from .token import Token, fresh_token

__all__ = [
    "Attempt",
    "Direction",
    "Level",
    "Position",
    "Token",
    "fresh_token",
]
