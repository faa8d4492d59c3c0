# src/tidy_tasks/core/state.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import TaskFilter
from .feedback import FeedbackChannel
from .ports import Clock, TaskRepo
from .timers import DeferredCalls

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Everything one session owns: the task collection, the active filter,
    the feedback slot and its deferred clears.

    Built by cli.bootstrap.create_initial_state(); torn down with close().
    """

    # Store Settings on the state for easy access in other modules.
    settings: Any

    task_store: TaskRepo
    timers: DeferredCalls
    feedback: FeedbackChannel

    active_filter: TaskFilter = TaskFilter.ALL
    clock: Clock = field(default=time.time)

    def now(self) -> float:
        return self.clock()

    def close(self) -> None:
        self.timers.cancel_all()
        self.feedback.clear()
        self.task_store.close()
        logger.debug("AppState closed.")
