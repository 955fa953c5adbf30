from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    """Per-level constants.

    Attributes:
        index: Position in the level set. An index past the last level means
            the "won" board is loaded.
        max_turns: Direction-change budget granted on every token reset.
        goal_threshold: The level advances once ``goals_reached`` exceeds it.
    """

    index: int = 0
    max_turns: int = 10
    goal_threshold: int = 2
