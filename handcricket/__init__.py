"""Hand cricket game logic: coin toss, match, summary, high scores and layout helpers."""

__version__ = "0.1.0"