import pytest

from handcricket.highscore import (
    MAX_NAME_LENGTH,
    RECORD_SIZE,
    HighScoreEntry,
    load_high_score,
    save_high_score,
)


def test_missing_file_gives_default(tmp_path):
    entry = load_high_score(tmp_path / "absent.dat")
    assert entry == HighScoreEntry(0, "None")


def test_round_trip(tmp_path):
    path = tmp_path / "hs.dat"
    save_high_score(42, "Alice", path)
    assert load_high_score(path) == HighScoreEntry(42, "Alice")


def test_overwrite_keeps_latest(tmp_path):
    path = tmp_path / "hs.dat"
    save_high_score(10, "First", path)
    save_high_score(25, "Second", path)
    assert load_high_score(path) == HighScoreEntry(25, "Second")


def test_record_has_fixed_size(tmp_path):
    path = tmp_path / "hs.dat"
    save_high_score(7, "Bo", path)
    assert path.stat().st_size == RECORD_SIZE


def test_long_name_is_truncated(tmp_path):
    path = tmp_path / "hs.dat"
    long_name = "x" * (MAX_NAME_LENGTH + 10)
    save_high_score(5, long_name, path)
    entry = load_high_score(path)
    assert entry.name == long_name[:MAX_NAME_LENGTH]
    assert entry.score == 5


def test_short_file_gives_default(tmp_path):
    path = tmp_path / "hs.dat"
    path.write_bytes(b"\x01\x02")
    assert load_high_score(path) == HighScoreEntry()


@pytest.mark.parametrize("score", [0, 1, 36, 1000])
def test_bytes_round_trip(score):
    entry = HighScoreEntry(score, "Player")
    assert HighScoreEntry.from_bytes(entry.to_bytes()) == entry


def test_unwritable_path_is_ignored(tmp_path):
    target = tmp_path / "missing_dir" / "hs.dat"
    save_high_score(3, "Z", target)
    assert load_high_score(target) == HighScoreEntry()