"""The coin toss that decides who picks batting or bowling."""

from __future__ import annotations

import random
from enum import Enum

from handcricket.state import GameState

SPIN_SPEED = 720.0
SPIN_DURATION = 1.0


class Coin(Enum):
    """A side of the coin."""

    HEADS = 0
    TAILS = 1

    @property
    def choice_text(self) -> str:
        """The message shown once the user has called this side."""
        return "You chose Heads" if self is Coin.HEADS else "You chose Tails"


class Toss:
    """State of the toss screen: the call, the spinning coin and the result."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.choice: Coin | None = None
        self.result: Coin | None = None
        self.user_won = False
        self.done = False
        self.animating = False
        self.elapsed = 0.0
        self.angle = 0.0

    @property
    def choice_text(self) -> str | None:
        """The message for the user's call, once made."""
        return self.choice.choice_text if self.choice is not None else None

    @property
    def computer_chooses(self) -> bool:
        """Whether the computer picks batting or bowling after the toss."""
        return not self.user_won

    def choose(self, side: Coin) -> bool:
        """Call a side and start spinning the coin.

        Returns False when the coin is already spinning or has landed.
        """
        if self.done or self.animating:
            return False
        self.choice = Coin(side)
        self.animating = True
        self.elapsed = 0.0
        self.angle = 0.0
        return True

    def update(self, dt: float) -> None:
        """Advance the spin by dt seconds, landing the coin when it is over."""
        if not self.animating:
            return
        self.elapsed += dt
        self.angle += SPIN_SPEED * dt
        if self.angle > 360.0:
            self.angle -= 360.0
        if self.elapsed >= SPIN_DURATION:
            self.result = Coin(self.rng.randrange(2))
            self.user_won = self.result is self.choice
            self.animating = False
            self.done = True

    def proceed(self) -> GameState | None:
        """Move on to choosing bat or ball once the toss is decided."""
        if not self.done:
            return None
        return GameState.BAT_BOWL