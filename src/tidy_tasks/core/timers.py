# src/tidy_tasks/core/timers.py

"""
Deferred, cancellable callbacks for a single-threaded event loop.

Nothing runs on its own: the owner of the loop calls run_due(now) between
events, and every callback whose due time has passed runs in due order.
Each scheduled call is identified by a token, so a caller can cancel exactly
the call it scheduled without holding a timer handle.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .ports import Clock

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Scheduled:
    token: int
    due_at: float
    callback: Callable[[], None]


class DeferredCalls:
    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self._pending: dict[int, _Scheduled] = {}
        self._next_token = 1

    def __len__(self) -> int:
        return len(self._pending)

    def call_later(self, delay: float, callback: Callable[[], None]) -> int:
        token = self._next_token
        self._next_token += 1
        due_at = self._clock() + max(0.0, float(delay))
        self._pending[token] = _Scheduled(token=token, due_at=due_at, callback=callback)
        return token

    def cancel(self, token: int | None) -> bool:
        if token is None:
            return False
        return self._pending.pop(token, None) is not None

    def cancel_all(self) -> None:
        self._pending.clear()

    def is_pending(self, token: int | None) -> bool:
        return token is not None and token in self._pending

    def next_due(self) -> float | None:
        if not self._pending:
            return None
        return min(s.due_at for s in self._pending.values())

    def run_due(self, now: float | None = None) -> int:
        """
        Run every call due at `now` (default: clock()). Returns how many ran.

        Calls scheduled by a running callback are not run in the same pass.
        """
        if now is None:
            now = self._clock()

        due = sorted(
            (s for s in self._pending.values() if s.due_at <= now),
            key=lambda s: (s.due_at, s.token),
        )
        ran = 0
        for scheduled in due:
            # An earlier callback may have cancelled this one.
            if self._pending.pop(scheduled.token, None) is None:
                continue
            scheduled.callback()
            ran += 1

        if ran:
            logger.debug("Ran %s deferred call(s), %s still pending", ran, len(self._pending))
        return ran
