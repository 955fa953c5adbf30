"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import Sequence, Tuple

# One level layout: text rows, top row first.
Layout = Tuple[str, ...]
LayoutRows = Sequence[str]


class Event(StrEnum):
    """Events exchanged between pipeline stages within one tick."""

    GOAL_REACHED = auto()
    RESET_REQUESTED = auto()
    NEXT_LEVEL_REQUESTED = auto()
    PATH_CHECK_REQUESTED = auto()
    GAME_OVER = auto()


class EntityKind(StrEnum):
    """Semantic tag attached to every entity handed to a renderer."""

    WALL = auto()
    GOAL = auto()
    TOKEN = auto()


class Phase(StrEnum):
    """Coarse game phase reported to observers."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()
