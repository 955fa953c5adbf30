"""Fixed-rate movement clock.

Rendering frames arrive at whatever rate the host manages, but the token moves
at a fixed rate. :class:`FixedTimestep` accumulates elapsed wall time and
reports how many movement ticks are due.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from butterfly_effect.config import GameConfig

# Absorbs float error so that e.g. two 0.025s frames make one 0.05s tick.
_EPSILON = 1e-9


@dataclass(frozen=True)
class FixedTimestep:
    """Accumulator for fixed-interval ticks.

    Attributes:
        step_seconds: Interval between movement ticks.
        accumulator: Elapsed time not yet converted into ticks.
    """

    step_seconds: float = 0.05
    accumulator: float = 0.0

    def __post_init__(self) -> None:
        if self.step_seconds <= 0:
            raise ValueError("step_seconds must be > 0")

    @classmethod
    def from_config(cls, config: GameConfig) -> "FixedTimestep":
        """Clock ticking at ``config.tick_seconds``."""
        return cls(step_seconds=config.tick_seconds)

    def advance(self, elapsed: float) -> Tuple["FixedTimestep", int]:
        """Add ``elapsed`` seconds.

        Returns:
            Tuple[FixedTimestep, int]: The updated clock and the number of
                ticks that became due.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed must be >= 0, got {elapsed}")
        total = self.accumulator + elapsed
        ticks = int((total + _EPSILON) // self.step_seconds)
        remainder = max(0.0, total - ticks * self.step_seconds)
        return replace(self, accumulator=remainder), ticks
