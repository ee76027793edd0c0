from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path

from .words import DEFAULT_ROW_SIZE, DEFAULT_WORD_COUNT

DURATION_PRESETS: tuple[int, ...] = (15, 30, 60)
DEFAULT_DURATION_S = 60
DEFAULT_VISIBLE_ROWS = 3
DEFAULT_HISTORY_LIMIT = 100

# Upper bound for a custom duration (one hour).
MAX_DURATION_S = 3600

# Commits per second a test is provisioned for. Well above any sustained
# typing speed; pygame key repeat is off, so every commit is a key press.
MAX_WORDS_PER_SECOND = 10

HISTORY_PATH_ENV = "WPM_TRAINER_HISTORY_PATH"
LOG_LEVEL_ENV = "WPM_TRAINER_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class SessionConfig:
    duration_s: int = DEFAULT_DURATION_S
    word_count: int = DEFAULT_WORD_COUNT
    row_size: int = DEFAULT_ROW_SIZE
    visible_rows: int = DEFAULT_VISIBLE_ROWS
    history_limit: int = DEFAULT_HISTORY_LIMIT

    def __post_init__(self) -> None:
        if self.duration_s < 1:
            raise ValueError("duration_s must be >= 1")
        if self.word_count < 1:
            raise ValueError("word_count must be >= 1")
        if self.row_size < 1:
            raise ValueError("row_size must be >= 1")
        if self.visible_rows < 1:
            raise ValueError("visible_rows must be >= 1")
        if self.history_limit < 1:
            raise ValueError("history_limit must be >= 1")

    @property
    def stream_word_count(self) -> int:
        """Words generated per test: never fewer than one test can consume."""
        return max(self.word_count, self.duration_s * MAX_WORDS_PER_SECOND)

    def with_duration(self, duration_s: int) -> SessionConfig:
        return replace(self, duration_s=int(duration_s))


def parse_custom_duration(raw: str) -> int | None:
    """Parse a custom duration entry into whole seconds.

    Any text that parses as a positive number is accepted and floored.
    Returns None for anything else, including values under one second or
    above MAX_DURATION_S.
    """

    text = str(raw).strip()
    if text == "":
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0.0:
        return None
    seconds = int(math.floor(value))
    return seconds if 1 <= seconds <= MAX_DURATION_S else None


def default_history_path() -> Path:
    explicit = os.environ.get(HISTORY_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()
    return Path.home() / ".wpm_trainer_history.json"


def log_level_from_env(default: int = logging.INFO) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if raw == "":
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def log_dir() -> Path:
    xdg_state_home = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    return Path(xdg_state_home) / "wpm_trainer"
