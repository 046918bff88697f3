import pytest

from handcricket.highscore import MAX_NAME_LENGTH, load_high_score, save_high_score
from handcricket.state import GameState
from handcricket.summary import Summary


@pytest.fixture
def path(tmp_path):
    return tmp_path / "highscore.dat"


def test_beating_default_asks_for_name(path):
    summary = Summary("You Win!", 5, 3, path)
    assert summary.awaiting_name is True
    assert summary.name == ""


def test_not_beating_saved_score(path):
    save_high_score(20, "Ann", path)
    summary = Summary("Computer Wins!", 20, 25, path)
    assert summary.awaiting_name is False
    assert summary.high_score.score == 20


def test_type_and_submit_saves(path):
    summary = Summary("You Win!", 12, 4, path)
    summary.type_text("Ann")
    assert summary.name == "Ann"
    assert summary.submit() is True
    assert summary.awaiting_name is False
    entry = load_high_score(path)
    assert (entry.score, entry.name) == (12, "Ann")


def test_unprintable_characters_ignored(path):
    summary = Summary("You Win!", 7, 1, path)
    summary.type_text("A\n~\tB")
    assert summary.name == "AB"


def test_name_length_capped(path):
    summary = Summary("You Win!", 7, 1, path)
    summary.type_text("x" * (MAX_NAME_LENGTH + 10))
    assert len(summary.name) == MAX_NAME_LENGTH


def test_backspace(path):
    summary = Summary("You Win!", 7, 1, path)
    summary.type_text("Bo")
    summary.backspace()
    assert summary.name == "B"
    summary.backspace()
    summary.backspace()
    assert summary.name == ""


def test_empty_name_not_saved(path):
    summary = Summary("You Win!", 7, 1, path)
    assert summary.submit() is False
    assert summary.awaiting_name is True
    assert load_high_score(path).score == 0


def test_click_ignored_while_typing(path):
    summary = Summary("You Win!", 7, 1, path)
    button = Summary.menu_button(800, 600)
    centre = (button.x + button.width / 2, button.y + button.height / 2)
    assert summary.click(centre, 800, 600) is None


def test_click_menu_button(path):
    summary = Summary("Match Tied!", 0, 0, path)
    button = Summary.menu_button(800, 600)
    assert button.width == 150 and button.height == 40
    centre = (button.x + button.width / 2, button.y + button.height / 2)
    assert summary.click(centre, 800, 600) is GameState.MENU
    assert summary.click((0, 0), 800, 600) is None


def test_message_truncated(path):
    summary = Summary("m" * 500, 0, 0, path)
    assert len(summary.message) == 127
    assert Summary("You Win!", 0, 0, path).message == "You Win!"