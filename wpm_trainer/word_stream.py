from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import islice

from .words import WordSource


class WordStreamExhaustedError(RuntimeError):
    """Raised when the stream is read or consumed with no words left."""


class WordStream:
    """Ordered, consume-once queue of words to type.

    Words are held in a flat queue. Rows of ``row_size`` words are derived
    for display only: ``_row_offset`` counts how many words of the current
    row have already been consumed, so row 0 is always the partially typed
    row and its first word is the head.
    """

    def __init__(self, words: Iterable[str], *, row_size: int) -> None:
        if row_size < 1:
            raise ValueError("row_size must be >= 1")
        self._pending: deque[str] = deque(words)
        self._consumed: list[str] = []
        self._row_size = int(row_size)
        self._row_offset = 0

    @classmethod
    def generate(cls, source: WordSource, n: int, row_size: int) -> WordStream:
        if n < 1:
            raise ValueError("n must be >= 1")
        return cls((source.next_word() for _ in range(n)), row_size=row_size)

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def remaining(self) -> int:
        return len(self._pending)

    @property
    def is_empty(self) -> bool:
        return not self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def peek_head(self) -> str:
        if not self._pending:
            raise WordStreamExhaustedError("word stream is empty")
        return self._pending[0]

    def consume_head(self) -> bool:
        """Remove the head word. Returns True when row 0 was dropped."""

        if not self._pending:
            raise WordStreamExhaustedError("cannot consume from an empty word stream")
        last_in_row = self._head_row_length() == 1
        self._consumed.append(self._pending.popleft())
        if last_in_row:
            self._row_offset = 0
        else:
            self._row_offset += 1
        return last_in_row

    def consumed(self) -> tuple[str, ...]:
        return tuple(self._consumed)

    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._group(list(self._pending))

    def visible_rows(self, k: int) -> tuple[tuple[str, ...], ...]:
        if k < 1:
            raise ValueError("k must be >= 1")
        wanted = self._head_row_length() + (k - 1) * self._row_size
        return self._group(list(islice(self._pending, wanted)))[:k]

    def _group(self, words: list[str]) -> tuple[tuple[str, ...], ...]:
        first = self._head_row_length()
        out = [tuple(words[:first])] if first else []
        for start in range(first, len(words), self._row_size):
            out.append(tuple(words[start : start + self._row_size]))
        return tuple(out)

    def _head_row_length(self) -> int:
        return min(self._row_size - self._row_offset, len(self._pending))
