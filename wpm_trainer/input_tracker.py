"""Keystroke classification for the typing test.

Pure functions only: nothing here reads time or mutates engine state. The
controller decides what to do with each ``KeyAction``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .typing_core import CharFeedback, Status


class KeyKind(str, Enum):
    LETTER = "letter"
    SPACE = "space"
    BACKSPACE = "backspace"
    CONTROL = "control"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


class KeyAction(str, Enum):
    ADVANCE = "advance"
    RETREAT = "retreat"
    RESET_CURSOR = "reset_cursor"
    COMMIT = "commit"
    IGNORE = "ignore"


@dataclass(frozen=True, slots=True)
class Keystroke:
    kind: KeyKind
    char: str = ""

    @classmethod
    def from_char(cls, ch: str) -> Keystroke:
        """Build a keystroke from a single typed character."""

        if len(ch) == 1 and ch.isascii() and ch.isalpha():
            return cls(KeyKind.LETTER, ch)
        if ch == " ":
            return cls(KeyKind.SPACE, ch)
        if ch == "\b":
            return cls(KeyKind.BACKSPACE)
        if ch in ("\r", "\n"):
            return cls(KeyKind.ENTER)
        if ch == "\x1b":
            return cls(KeyKind.ESCAPE)
        return cls(KeyKind.OTHER, ch)


@dataclass(frozen=True, slots=True)
class KeyResult:
    action: KeyAction
    cursor_index: int


def classify_key(keystroke: Keystroke, *, cursor_index: int, status: Status) -> KeyResult:
    if cursor_index < -1:
        raise ValueError("cursor_index must be >= -1")

    kind = keystroke.kind
    if kind is KeyKind.LETTER:
        return KeyResult(KeyAction.ADVANCE, cursor_index + 1)
    if kind is KeyKind.BACKSPACE:
        return KeyResult(KeyAction.RETREAT, max(-1, cursor_index - 1))
    if kind is KeyKind.CONTROL:
        return KeyResult(KeyAction.RESET_CURSOR, -1)
    if kind is KeyKind.SPACE and status is Status.PLAYING:
        return KeyResult(KeyAction.COMMIT, -1)
    # Enter (session reset) and escape (dialog dismissal) are handled by callers.
    return KeyResult(KeyAction.IGNORE, cursor_index)


def head_char_feedback(word: str | None, cursor_index: int, buffer: str) -> CharFeedback:
    """Compare the last typed character with the head word's character at the cursor."""

    if word is None or buffer == "" or not (0 <= cursor_index < len(word)):
        return CharFeedback.NONE
    if word[cursor_index] == buffer[-1]:
        return CharFeedback.CORRECT
    return CharFeedback.INCORRECT
