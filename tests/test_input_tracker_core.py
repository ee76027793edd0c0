from __future__ import annotations

import pytest

from wpm_trainer.input_tracker import (
    KeyAction,
    KeyKind,
    Keystroke,
    classify_key,
    head_char_feedback,
)
from wpm_trainer.typing_core import CharFeedback, Status


@pytest.mark.parametrize("ch", ["a", "z", "Q"])
def test_letters_advance_cursor_in_any_state(ch: str) -> None:
    for status in Status:
        r = classify_key(Keystroke.from_char(ch), cursor_index=2, status=status)
        assert r.action is KeyAction.ADVANCE
        assert r.cursor_index == 3


def test_backspace_retreats_and_floors_at_minus_one() -> None:
    bs = Keystroke(KeyKind.BACKSPACE)
    assert classify_key(bs, cursor_index=3, status=Status.PLAYING).cursor_index == 2
    assert classify_key(bs, cursor_index=0, status=Status.PLAYING).cursor_index == -1
    r = classify_key(bs, cursor_index=-1, status=Status.PLAYING)
    assert r.action is KeyAction.RETREAT
    assert r.cursor_index == -1


def test_control_resets_cursor() -> None:
    r = classify_key(Keystroke(KeyKind.CONTROL), cursor_index=4, status=Status.PLAYING)
    assert r.action is KeyAction.RESET_CURSOR
    assert r.cursor_index == -1


def test_space_commits_only_while_playing() -> None:
    space = Keystroke.from_char(" ")
    r = classify_key(space, cursor_index=3, status=Status.PLAYING)
    assert r.action is KeyAction.COMMIT
    assert r.cursor_index == -1

    for status in (Status.WAITING, Status.FINISHED):
        r = classify_key(space, cursor_index=3, status=status)
        assert r.action is KeyAction.IGNORE
        assert r.cursor_index == 3


@pytest.mark.parametrize("ch", ["\r", "\x1b", "7", ",", "é"])
def test_other_keys_are_ignored(ch: str) -> None:
    r = classify_key(Keystroke.from_char(ch), cursor_index=1, status=Status.PLAYING)
    assert r.action is KeyAction.IGNORE
    assert r.cursor_index == 1


def test_from_char_maps_control_characters() -> None:
    assert Keystroke.from_char("\b").kind is KeyKind.BACKSPACE
    assert Keystroke.from_char("\n").kind is KeyKind.ENTER
    assert Keystroke.from_char("\x1b").kind is KeyKind.ESCAPE
    assert Keystroke.from_char("é").kind is KeyKind.OTHER


def test_invalid_cursor_is_rejected() -> None:
    with pytest.raises(ValueError):
        classify_key(Keystroke.from_char("a"), cursor_index=-2, status=Status.PLAYING)


def test_head_char_feedback() -> None:
    assert head_char_feedback("cat", 1, "ca") is CharFeedback.CORRECT
    assert head_char_feedback("cat", 1, "cx") is CharFeedback.INCORRECT
    assert head_char_feedback("cat", -1, "") is CharFeedback.NONE
    assert head_char_feedback("cat", 5, "catsss") is CharFeedback.NONE
    assert head_char_feedback(None, 0, "c") is CharFeedback.NONE
