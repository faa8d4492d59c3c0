# tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from dataclasses import replace

from ..core.ports import Clock
from .task_errors import DuplicateTaskError, EmptyInputError, TooLongError
from .task_models import BulkOutcome, BulkStatus, Task, TaskFilter

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 250


class TaskStore:
    """
    In-memory task store.

    Ordering and identity rules:
    - newest task first (add prepends)
    - ids start at 1 and are never reused, even after deletes
    - no two tasks share the same text, compared case-insensitively

    Tasks are immutable values: toggling replaces the stored item.
    """

    def __init__(
        self,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
        clock: Clock = time.time,
    ) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._max_length = int(max_length)
        self._clock = clock
        logger.debug("TaskStore ready max_length=%s", self._max_length)

    def close(self) -> None:
        """Session teardown: drop everything (nothing is persisted)."""
        dropped = len(self._tasks)
        self._tasks.clear()
        logger.debug("TaskStore closed, dropped=%s", dropped)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def validate_text(self, text: str) -> str:
        """Return the trimmed text or raise a TaskValidationError."""
        cleaned = (text or "").strip()
        if not cleaned:
            raise EmptyInputError()
        if len(cleaned) > self._max_length:
            raise TooLongError(self._max_length, len(cleaned))
        folded = cleaned.casefold()
        if any(t.text.casefold() == folded for t in self._tasks):
            raise DuplicateTaskError(cleaned)
        return cleaned

    def add_task(self, text: str) -> Task:
        cleaned = self.validate_text(text)

        task = Task(id=self._next_id, text=cleaned, created_at=self._clock())
        self._next_id += 1
        self._tasks.insert(0, task)

        logger.debug("Task added id=%s len=%s total=%s", task.id, len(cleaned), len(self._tasks))
        return task

    def toggle_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_task: no task id=%s", task_id)
            return None

        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete_task: no task id=%s", task_id)
            return None

        task = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s total=%s", task.id, len(self._tasks))
        return task

    def clear_completed(self) -> BulkOutcome:
        kept = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(kept)
        if removed == 0:
            return BulkOutcome(BulkStatus.NOTHING_TO_CLEAR, 0)

        self._tasks = kept
        logger.debug("Cleared completed tasks removed=%s total=%s", removed, len(kept))
        return BulkOutcome(BulkStatus.CLEARED, removed)

    def mark_all_complete(self) -> BulkOutcome:
        changed = 0
        for i, task in enumerate(self._tasks):
            if not task.completed:
                self._tasks[i] = replace(task, completed=True)
                changed += 1

        if changed == 0:
            return BulkOutcome(BulkStatus.ALREADY_ALL_COMPLETE, 0)

        logger.debug("Marked tasks complete changed=%s", changed)
        return BulkOutcome(BulkStatus.MARKED_COMPLETE, changed)

    def filtered_tasks(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> Iterator[Task]:
        """
        Lazily yield tasks matching the filter, in stored order.

        Each call starts a fresh pass over a snapshot, so the result can be
        re-requested at any time and is unaffected by later mutations.
        """
        if not isinstance(task_filter, TaskFilter):
            task_filter = TaskFilter.from_keyword(task_filter)

        for task in tuple(self._tasks):
            if task_filter.matches(task):
                yield task
