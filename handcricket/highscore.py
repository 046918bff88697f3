"""Persistent storage of the single best score."""

from __future__ import annotations

import contextlib
import struct
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = "highscore.dat"
MAX_NAME_LENGTH = 32
_NAME_FIELD = MAX_NAME_LENGTH + 1
_RECORD = struct.Struct(f"<i{_NAME_FIELD}s")
RECORD_SIZE = _RECORD.size


@dataclass(frozen=True)
class HighScoreEntry:
    """The best score and the name of the player who made it."""

    score: int = 0
    name: str = "None"

    def to_bytes(self) -> bytes:
        """Encode the entry as a fixed-size record."""
        raw = self.name.encode("utf-8")[:MAX_NAME_LENGTH]
        return _RECORD.pack(self.score, raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> HighScoreEntry:
        """Decode a fixed-size record."""
        score, raw = _RECORD.unpack(data)
        name = raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(score, name)


def load_high_score(path: str | Path = DEFAULT_PATH) -> HighScoreEntry:
    """Read the stored high score, or the default entry if there is none."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return HighScoreEntry()
    if len(data) < RECORD_SIZE:
        return HighScoreEntry()
    return HighScoreEntry.from_bytes(data[:RECORD_SIZE])


def save_high_score(score: int, name: str, path: str | Path = DEFAULT_PATH) -> None:
    """Store a new high score; a file that cannot be written is ignored."""
    record = HighScoreEntry(score, name).to_bytes()
    with contextlib.suppress(OSError):
        Path(path).write_bytes(record)