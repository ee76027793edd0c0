from __future__ import annotations

import logging
import time
from typing import Protocol

log = logging.getLogger("wpm_trainer.clock")


class Clock(Protocol):
    """Monotonic clock abstraction.

    Core logic depends on this interface rather than calling real time directly.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Production clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


class CountdownTimer:
    """Cancellable periodic timer driven by polling.

    The timer never fires on its own. Callers poll :meth:`due_ticks` and
    receive how many whole periods have elapsed since the last poll. Once
    cancelled it reports no further ticks, so a stale handle can never
    decrement a countdown again.
    """

    def __init__(self, *, clock: Clock, period_s: float = 1.0) -> None:
        if period_s <= 0.0:
            raise ValueError("period_s must be > 0")
        self._clock = clock
        self._period_s = float(period_s)
        self._started_at_s = clock.now()
        self._delivered = 0
        self._cancelled = False

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def active(self) -> bool:
        return not self._cancelled

    @property
    def ticks_delivered(self) -> int:
        return self._delivered

    def due_ticks(self) -> int:
        if self._cancelled:
            return 0
        elapsed = max(0.0, self._clock.now() - self._started_at_s)
        total = int(elapsed // self._period_s)
        due = total - self._delivered
        if due <= 0:
            return 0
        self._delivered = total
        return due

    def cancel(self) -> None:
        # Cancelling twice is a no-op.
        if self._cancelled:
            return
        self._cancelled = True
        log.debug("countdown timer cancelled after %d ticks", self._delivered)
