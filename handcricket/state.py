"""Screens the game moves between."""

from enum import Enum, auto


class GameState(Enum):
    """The screen that is currently active."""

    MENU = auto()
    TOSS = auto()
    BAT_BOWL = auto()
    PLAY = auto()
    SUMMARY = auto()