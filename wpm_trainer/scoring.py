from __future__ import annotations

import math


def compute_wpm(correct: int, elapsed_s: int) -> int:
    """Throughput score: correct words per elapsed second, times 100.

    This is a coarse approximation rather than true words per minute and is
    kept as-is so scores stay comparable with recorded history. At zero
    elapsed seconds the divisor is treated as one.
    """

    if correct < 0:
        raise ValueError("correct must be >= 0")
    if elapsed_s < 0:
        raise ValueError("elapsed_s must be >= 0")
    if elapsed_s == 0:
        return 0 if correct == 0 else int(math.floor(correct * 100))
    return int(math.floor(correct / elapsed_s * 100))


def compute_accuracy(correct: int, committed: int) -> int:
    """Whole-number percentage of committed words typed correctly."""

    if correct < 0 or committed < 0:
        raise ValueError("counts must be >= 0")
    if committed == 0:
        return 100
    return int(math.floor(correct / committed * 100))


class ScoringEngine:
    """Committed-word counters plus the scores derived from them.

    Scores are recomputed from the counters on every call to ``recompute``
    and never adjusted incrementally.
    """

    def __init__(self) -> None:
        self._committed = 0
        self._correct = 0
        self._wpm = 0
        self._accuracy = 100

    @property
    def committed(self) -> int:
        return self._committed

    @property
    def correct(self) -> int:
        return self._correct

    @property
    def wpm(self) -> int:
        return self._wpm

    @property
    def accuracy(self) -> int:
        return self._accuracy

    def record_outcome(self, expected: str, typed: str) -> bool:
        is_correct = typed.strip() == expected
        self._committed += 1
        if is_correct:
            self._correct += 1
        return is_correct

    def recompute(self, elapsed_s: int) -> None:
        self._wpm = compute_wpm(self._correct, elapsed_s)
        self._accuracy = compute_accuracy(self._correct, self._committed)

    def reset(self) -> None:
        self._committed = 0
        self._correct = 0
        self._wpm = 0
        self._accuracy = 100
