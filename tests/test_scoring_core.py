from __future__ import annotations

import math

import pytest

from wpm_trainer.scoring import ScoringEngine, compute_accuracy, compute_wpm


@pytest.mark.parametrize("correct", [0, 1, 7, 9, 23, 150])
@pytest.mark.parametrize("elapsed", [1, 3, 15, 29, 60])
def test_wpm_is_floor_of_correct_per_elapsed_times_100(correct: int, elapsed: int) -> None:
    assert compute_wpm(correct, elapsed) == math.floor(correct / elapsed * 100)


def test_wpm_at_zero_elapsed_treats_divisor_as_one() -> None:
    assert compute_wpm(0, 0) == 0
    assert compute_wpm(1, 0) == 100
    assert compute_wpm(4, 0) == 400


def test_accuracy_is_100_with_nothing_committed() -> None:
    for correct in (0, 1, 5):
        assert compute_accuracy(correct, 0) == 100


def test_accuracy_floors_percentage() -> None:
    assert compute_accuracy(9, 10) == 90
    assert compute_accuracy(2, 3) == 66
    assert compute_accuracy(0, 4) == 0
    assert compute_accuracy(5, 5) == 100


def test_negative_inputs_are_rejected() -> None:
    with pytest.raises(ValueError):
        compute_wpm(-1, 5)
    with pytest.raises(ValueError):
        compute_wpm(1, -5)
    with pytest.raises(ValueError):
        compute_accuracy(1, -1)


def test_record_outcome_trims_typed_text_and_is_case_sensitive() -> None:
    engine = ScoringEngine()

    assert engine.record_outcome("cat", "cat") is True
    assert engine.record_outcome("cat", "  cat ") is True
    assert engine.record_outcome("cat", "Cat") is False
    assert engine.record_outcome("cat", "ca") is False
    assert engine.record_outcome("cat", "") is False
    assert engine.record_outcome("cat", "   ") is False

    assert engine.committed == 6
    assert engine.correct == 2


def test_recompute_tracks_counters_and_reset_clears_everything() -> None:
    engine = ScoringEngine()
    assert (engine.wpm, engine.accuracy) == (0, 100)

    engine.record_outcome("one", "one")
    engine.record_outcome("two", "tow")
    engine.recompute(0)
    assert engine.wpm == 100
    assert engine.accuracy == 50

    engine.recompute(4)
    assert engine.wpm == 25

    engine.reset()
    assert (engine.committed, engine.correct, engine.wpm, engine.accuracy) == (0, 0, 0, 100)
