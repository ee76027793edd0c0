from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    FINISHED = "finished"


class CharFeedback(str, Enum):
    """Colouring hint for the character under the cursor in the head word."""

    NONE = "none"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True, slots=True)
class TypingSnapshot:
    """View model for the UI (pure data)."""

    status: Status
    duration_s: int
    remaining_s: int
    input_buffer: str
    cursor_index: int
    committed: int
    correct: int
    wpm: int
    accuracy: int
    head_word: str | None
    head_feedback: CharFeedback
    rows: tuple[tuple[str, ...], ...]
    consumed: tuple[str, ...]

    @property
    def accepting_input(self) -> bool:
        return self.status is not Status.FINISHED


class SeededRng:
    """Simple seeded RNG wrapper to keep deterministic streams explicit."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(int(seed))

    def choice(self, seq: Sequence[str]) -> str:
        return self._rng.choice(seq)
