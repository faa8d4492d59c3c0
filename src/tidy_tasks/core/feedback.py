# src/tidy_tasks/core/feedback.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from .timers import DeferredCalls

logger = logging.getLogger(__name__)


class FeedbackLevel(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Feedback:
    text: str
    level: FeedbackLevel
    expires: bool = True


class FeedbackChannel:
    """
    The single status-message slot under the input field.

    Showing a message replaces the current one and cancels its pending clear,
    so an old clear can never wipe a newer message. Expiring messages are
    cleared after `clear_after` seconds; sticky ones (validation errors) stay
    until the user types or another message replaces them.
    """

    def __init__(
        self,
        timers: DeferredCalls,
        *,
        clear_after: float = 2.0,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._timers = timers
        self._clear_after = clear_after
        self._current: Feedback | None = None
        self._clear_token: int | None = None
        self.on_change = on_change

    @property
    def current(self) -> Feedback | None:
        return self._current

    @property
    def clear_token(self) -> int | None:
        return self._clear_token

    def show(self, text: str, level: FeedbackLevel = FeedbackLevel.SUCCESS, *, expires: bool = True) -> Feedback:
        self._timers.cancel(self._clear_token)
        self._clear_token = None

        self._current = Feedback(text=text, level=level, expires=expires)
        if expires:
            self._clear_token = self._timers.call_later(self._clear_after, self._expire)
        return self._current

    def success(self, text: str) -> Feedback:
        return self.show(text, FeedbackLevel.SUCCESS)

    def error(self, text: str, *, expires: bool = True) -> Feedback:
        return self.show(text, FeedbackLevel.ERROR, expires=expires)

    def clear(self) -> bool:
        """Drop the current message right away. Returns True if one was shown."""
        self._timers.cancel(self._clear_token)
        self._clear_token = None
        had = self._current is not None
        self._current = None
        return had

    def _expire(self) -> None:
        self._clear_token = None
        if self._current is None:
            return
        logger.debug("Feedback expired: %s", self._current.text)
        self._current = None
        if self.on_change is not None:
            self.on_change()
