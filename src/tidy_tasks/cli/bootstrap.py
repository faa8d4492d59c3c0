# src/tidy_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, deferred calls and feedback channel into AppState.
"""

from __future__ import annotations

import logging
import time

from ..config import get_settings
from ..core.feedback import FeedbackChannel
from ..core.ports import Clock
from ..core.state import AppState
from ..core.timers import DeferredCalls
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    if getattr(settings, "log_to_file", False):
        settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock = time.time) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the clock injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    timers = DeferredCalls(clock=clock)
    state = AppState(
        settings=settings,
        task_store=TaskStore(max_length=settings.max_task_length, clock=clock),
        timers=timers,
        feedback=FeedbackChannel(timers, clear_after=settings.feedback_seconds),
        clock=clock,
    )
    logger.debug(
        "State created max_task_length=%s feedback_seconds=%s",
        settings.max_task_length,
        settings.feedback_seconds,
    )
    return state
