from dataclasses import dataclass


@dataclass(frozen=True)
class Attempt:
    """Goal bookkeeping for the current level.

    Attributes:
        goals_reached: Goals hit since the level was loaded. Zeroed only by a
            level load; explicit resets keep it.
    """

    goals_reached: int = 0
