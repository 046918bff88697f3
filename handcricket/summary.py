"""The match summary screen: final scores and high-score name entry."""

from __future__ import annotations

from pathlib import Path

from handcricket.highscore import (
    DEFAULT_PATH,
    MAX_NAME_LENGTH,
    HighScoreEntry,
    load_high_score,
    save_high_score,
)
from handcricket.layout import Point, Rect
from handcricket.state import GameState

MAX_MESSAGE_LENGTH = 127
MENU_BUTTON_WIDTH = 150
MENU_BUTTON_HEIGHT = 40
MENU_BUTTON_RISE = 100
_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 125


class Summary:
    """State of the summary screen shown once a match is over."""

    def __init__(
        self,
        message: str,
        user_score: int,
        computer_score: int,
        high_score_path: str | Path = DEFAULT_PATH,
    ) -> None:
        self.message = message[:MAX_MESSAGE_LENGTH]
        self.user_score = user_score
        self.computer_score = computer_score
        self.high_score_path = high_score_path
        self.name = ""
        saved = load_high_score(high_score_path)
        self.awaiting_name = user_score > saved.score

    @property
    def high_score(self) -> HighScoreEntry:
        """The high score currently stored."""
        return load_high_score(self.high_score_path)

    def type_text(self, text: str) -> None:
        """Append typed characters to the name, ignoring unprintable ones."""
        if not self.awaiting_name:
            return
        for char in text:
            if (
                _FIRST_PRINTABLE <= ord(char) <= _LAST_PRINTABLE
                and len(self.name) < MAX_NAME_LENGTH
            ):
                self.name += char

    def backspace(self) -> None:
        """Remove the last character of the name, if any."""
        if self.awaiting_name:
            self.name = self.name[:-1]

    def submit(self) -> bool:
        """Store the new high score under the typed name.

        Returns whether the score was saved; an empty name saves nothing.
        """
        if not self.awaiting_name or not self.name:
            return False
        save_high_score(self.user_score, self.name, self.high_score_path)
        self.awaiting_name = False
        return True

    @staticmethod
    def menu_button(screen_width: int, screen_height: int) -> Rect:
        """Where the button that returns to the main menu is placed."""
        return Rect(
            screen_width // 2 - MENU_BUTTON_WIDTH // 2,
            screen_height - MENU_BUTTON_RISE,
            MENU_BUTTON_WIDTH,
            MENU_BUTTON_HEIGHT,
        )

    def click(
        self, point: Point, screen_width: int, screen_height: int
    ) -> GameState | None:
        """Handle a mouse click; returns the next screen, if it changes."""
        if self.awaiting_name:
            return None
        if self.menu_button(screen_width, screen_height).contains(point):
            return GameState.MENU
        return None