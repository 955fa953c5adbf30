"""Built-in level layouts.

Rows are listed top row first, one character per cell: ``W`` wall, ``T``
goal, anything else free. ``S``/``s`` marks the start cell for readers only;
the start is a fixed configuration constant.
"""

from typing import Tuple

from butterfly_effect.types import Layout


LEVEL_0: Layout = (
    "WWWWWWWWWWW WWWWWWWWWT",
    "WWWWWWWWWW   WWWWWWWW ",
    "WWWWWWWWW             ",
    "WWWWWWWWWW   WWWWWWWW ",
    "WWWWWWWWWWW WWWWWWWWW ",
    "WWWWWWWWWWW WWWWWWWW  ",
    "                      ",
    "  WWWWWWWWW WWWWWWWWWW",
    " WWWWWWWWWW WWWWWWWWWW",
    " WWWWWWWWW  WWWWWWWWWW",
    "            WWWWWWWWWW",
    " WWWWWWWWW  WWWWWWWWWW",
    " WWWWWWWWWW WWWWWWWWWW",
    "SWWWWWWWWWWWWWWWWWWWWW",
)

LEVEL_1: Layout = (
    "          WWWW       T",
    "   WWWW   WWWW        ",
    "   WWWW   WWWW        ",
    "   WWWW   WWWW        ",
    "   WWWW   WWWW        ",
    "   WWWW   WWWW   WWWWW",
    "   WWWW   WWWW   WWWWW",
    "   WWWW   WWWW   WWWWW",
    "   WWWW   WWWW   WWWWW",
    "   WWWW   WWWW   WWWWW",
    "   WWWW          WWWWW",
    "   WWWW          WWWWW",
    "   WWWW          WWWWW",
    "s WWWWW          WWWWW",
)

LEVEL_2: Layout = (
    "                      ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWW W WWWWWWWW ",
    "                      ",
    " WWWWWWWWW T WWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    " WWWWWWWWWW WWWWWWWWW ",
    "S                     ",
)

LEVEL_3: Layout = (
    "          WW          ",
    "          WW          ",
    "         WTTW         ",
    "         W  W         ",
    "W    W   W  W   W    W",
    " TW  W  W    W  W  WT ",
    " W W W W  WW  W W W W ",
    " W  WW W W  W W WW  W ",
    "  W  WW  W  W  WW  W  ",
    "   W W    WW    W W   ",
    "    WW          WW    ",
    "     WWWWW  WWWWW     ",
    "        WW  WW        ",
    "S                     ",
)

WON_LAYOUT: Layout = (
    "                     T",
    "     W W  WWW  W W    ",
    "     W W  W W  W W    ",
    "     WWW  W W  W W    ",
    "      W   W W  W W    ",
    "      W   WWW  WWW    ",
    "                      ",
    "                      ",
    "    W   W WWW W   W   ",
    "    W   W W W WW  W   ",
    "    W   W W W W W W   ",
    "    W W W W W W  WW   ",
    "     W W  WWW W   W   ",
    "                      ",
)

GAME_OVER_LAYOUT: Layout = (
    "                     ",
    "  WWW  WWW W   W WWW ",
    "  W    W W WW WW W   ",
    "  W WW WWW W W W WWW ",
    "  W  W W W W   W W   ",
    "  WWWW W W W   W WWW ",
    "                     ",
    "   WWW W  W WWW WWW  ",
    "   W W W  W W   W W  ",
    "   W W W  W WWW WWW  ",
    "   W W W  W W   WW   ",
    "   WWW  WW  WWW W W  ",
    "                     ",
    "                     ",
)

DEFAULT_LEVELS: Tuple[Layout, ...] = (LEVEL_0, LEVEL_1, LEVEL_2, LEVEL_3)
