from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .typing_core import Status, TypingSnapshot


@dataclass(frozen=True, slots=True)
class CompletedTestRecord:
    """Persistable summary of one finished test.

    Only tests that ran to the end of their countdown produce a record.
    """

    date: str
    time: str
    wpm: int
    accuracy: int
    length_s: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "datetime": [self.date, self.time],
            "wpm": int(self.wpm),
            "accuracy": int(self.accuracy),
            "lengthSec": int(self.length_s),
        }

    @classmethod
    def from_dict(cls, data: object) -> CompletedTestRecord:
        if not isinstance(data, dict):
            raise ValueError("record must be an object")
        stamp = data.get("datetime")
        if not isinstance(stamp, list) or len(stamp) != 2:
            raise ValueError("datetime must be a [date, time] pair")
        return cls(
            date=str(stamp[0]),
            time=str(stamp[1]),
            wpm=_as_int(data.get("wpm"), "wpm"),
            accuracy=_as_int(data.get("accuracy"), "accuracy"),
            length_s=_as_int(data.get("lengthSec"), "lengthSec"),
        )


def record_from_snapshot(snap: TypingSnapshot, *, now: datetime | None = None) -> CompletedTestRecord:
    """Build a CompletedTestRecord from a finished test's snapshot."""

    if snap.status is not Status.FINISHED:
        raise ValueError("only finished tests can be recorded")
    stamp = datetime.now() if now is None else now
    return CompletedTestRecord(
        date=f"{stamp.month}/{stamp.day}/{stamp.year}",
        time=stamp.strftime("%H:%M:%S"),
        wpm=int(snap.wpm),
        accuracy=int(snap.accuracy),
        length_s=int(snap.duration_s),
    )


def _as_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{name} must be a number")
    return int(value)
