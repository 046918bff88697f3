"""The match itself: two innings of hand cricket against the computer."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path

from handcricket.highscore import DEFAULT_PATH
from handcricket.layout import SHOT_COUNT
from handcricket.state import GameState
from handcricket.summary import Summary

BALLS_PER_INNINGS = 6
WICKET_POPUP_DURATION = 1.5


class Outcome(Enum):
    """The message shown on the play screen after each event."""

    USER_BATTING = "You Are batting"
    COMPUTER_BATTING = "Computer is batting"
    WICKET_COMPUTER_BATS = "WICKET! Now Computer bats."
    WICKET_USER_BATS = "WICKET! Now You bat."
    INNINGS_OVER_COMPUTER_BATS = "Innings Over. Now Computer bats."
    INNINGS_OVER_USER_BATS = "Innings Over. Now You bat."
    USER_OUT = "You are OUT!"
    COMPUTER_OUT = "Computer OUT!"
    USER_WINS = "You Win!"
    COMPUTER_WINS = "Computer Wins!"
    TIED = "Match Tied!"


def computer_choice(rng: random.Random) -> int:
    """The number the computer throws, from 1 to 6."""
    return rng.randint(1, SHOT_COUNT)


def is_wicket(shot: int, ball: int) -> bool:
    """A batter is out when both sides show the same number."""
    return shot == ball


class Match:
    """State of one match: scores, innings, records of each ball and the result."""

    def __init__(self, user_bats_first: bool, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.user_batting = user_bats_first
        self.first_innings = True
        self.over = False
        self.ball = 0
        self.user_score = 0
        self.computer_score = 0
        self.target = 0
        self.user_first_innings = 0
        self.computer_first_innings = 0
        self.user_balls = [0] * BALLS_PER_INNINGS
        self.computer_balls = [0] * BALLS_PER_INNINGS
        self.user_hand = 0
        self.computer_hand = 0
        self.show_wicket_popup = False
        self.popup_timer = 0.0
        self.message = Outcome.USER_BATTING if user_bats_first else Outcome.COMPUTER_BATTING
        self._result: tuple[Outcome, int, int] | None = None

    def play(self, user_choice: int) -> Outcome | None:
        """Play one ball with the user's number; returns the resulting message.

        Returns None when the match is already over.
        """
        if not 1 <= user_choice <= SHOT_COUNT:
            raise ValueError(f"choice must be between 1 and {SHOT_COUNT}: {user_choice}")
        if self.over or self.ball >= BALLS_PER_INNINGS:
            return None

        computer = computer_choice(self.rng)
        self.user_balls[self.ball] = user_choice
        self.computer_balls[self.ball] = computer
        self.user_hand = _hand(user_choice)
        self.computer_hand = _hand(computer)

        if self.user_batting:
            self._user_bats(user_choice, computer)
        else:
            self._computer_bats(user_choice, computer)
        return self.message

    def update(self, dt: float) -> GameState | None:
        """Advance the wicket popup by dt seconds; returns the next screen, if any."""
        if self.show_wicket_popup:
            self.popup_timer -= dt
            if self.popup_timer <= 0:
                self.show_wicket_popup = False
        if self.over and not self.show_wicket_popup:
            return GameState.SUMMARY
        return None

    def summary(self, high_score_path: str | Path = DEFAULT_PATH) -> Summary | None:
        """The summary screen for a decided result, or None if none was reached."""
        if self._result is None:
            return None
        outcome, user_score, computer_score = self._result
        return Summary(outcome.value, user_score, computer_score, high_score_path)

    def _user_bats(self, user_choice: int, computer: int) -> None:
        if is_wicket(user_choice, computer):
            self._raise_popup()
            if self.first_innings:
                self.target = self.user_score
                self.user_first_innings = self.user_score
                self._switch_innings(Outcome.WICKET_COMPUTER_BATS, user_bats_next=False)
            else:
                self.message = Outcome.USER_OUT
                self.over = True
            return

        self.user_score += user_choice
        if not self.first_innings and self.user_score > self.target:
            self._finish(Outcome.USER_WINS, self.user_score, self.computer_first_innings)
            return

        self.ball += 1
        if self.ball < BALLS_PER_INNINGS:
            return
        if self.first_innings:
            self.target = self.user_score
            self.user_first_innings = self.user_score
            self._switch_innings(Outcome.INNINGS_OVER_COMPUTER_BATS, user_bats_next=False)
            return
        if self.user_score == self.target:
            outcome = Outcome.TIED
        elif self.user_score > self.target:
            outcome = Outcome.USER_WINS
        else:
            outcome = Outcome.COMPUTER_WINS
        self._finish(outcome, self.user_score, self.computer_first_innings)

    def _computer_bats(self, user_choice: int, computer: int) -> None:
        if is_wicket(computer, user_choice):
            if self.first_innings:
                self.target = self.computer_score
                self.computer_first_innings = self.computer_score
                self._switch_innings(Outcome.WICKET_USER_BATS, user_bats_next=True)
            else:
                self.message = Outcome.COMPUTER_OUT
                self.over = True
            return

        self.computer_score += computer
        if not self.first_innings and self.computer_score > self.target:
            self._finish(Outcome.COMPUTER_WINS, self.user_first_innings, self.computer_score)
            return

        self.ball += 1
        if self.ball < BALLS_PER_INNINGS:
            return
        if self.first_innings:
            self.target = self.computer_score
            self._switch_innings(Outcome.INNINGS_OVER_USER_BATS, user_bats_next=True)
            return
        if self.computer_score == self.target:
            outcome = Outcome.TIED
        elif self.computer_score > self.target:
            outcome = Outcome.COMPUTER_WINS
        else:
            outcome = Outcome.USER_WINS
        self._finish(outcome, self.user_first_innings, self.computer_score)

    def _raise_popup(self) -> None:
        self.show_wicket_popup = True
        self.popup_timer = WICKET_POPUP_DURATION

    def _switch_innings(self, message: Outcome, user_bats_next: bool) -> None:
        self.message = message
        self.user_batting = user_bats_next
        self.first_innings = False
        self.ball = 0
        self.user_balls = [0] * BALLS_PER_INNINGS
        self.computer_balls = [0] * BALLS_PER_INNINGS
        self.user_score = 0
        self.computer_score = 0
        self.user_hand = 0
        self.computer_hand = 0

    def _finish(self, outcome: Outcome, user_score: int, computer_score: int) -> None:
        self.message = outcome
        self.over = True
        self._result = (outcome, user_score, computer_score)


def _hand(choice: int) -> int:
    """The hand picture index for a number; anything out of range shows a fist."""
    return choice if 0 <= choice <= SHOT_COUNT else 0