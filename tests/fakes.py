"""Deterministic stand-ins for the clock, word source and history sink."""

from __future__ import annotations

from dataclasses import dataclass, field

from wpm_trainer.results import CompletedTestRecord


@dataclass
class FakeClock:
    t: float = 0.0

    def now(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += float(dt)


@dataclass
class ListWordSource:
    """Cycles through a fixed word list so tests know every upcoming word."""

    words: list[str]
    calls: int = 0

    def next_word(self) -> str:
        word = self.words[self.calls % len(self.words)]
        self.calls += 1
        return word


@dataclass
class ListHistory:
    records: list[CompletedTestRecord] = field(default_factory=list)
    accept: bool = True

    def prepend(self, record: CompletedTestRecord) -> bool:
        if not self.accept:
            return False
        self.records.insert(0, record)
        return True
