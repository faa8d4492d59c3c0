# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskFilter(StrEnum):
    """Which tasks the view shows. Never changes the stored collection."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def from_keyword(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.PENDING:
            return not task.completed
        return True


class BulkStatus(StrEnum):
    CLEARED = "cleared"
    NOTHING_TO_CLEAR = "nothing_to_clear"
    MARKED_COMPLETE = "marked_complete"
    ALREADY_ALL_COMPLETE = "already_all_complete"


@dataclass(frozen=True, slots=True)
class BulkOutcome:
    """Result of a bulk action: what happened and to how many tasks."""

    status: BulkStatus
    count: int

    @property
    def changed(self) -> bool:
        return self.count > 0


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    created_at: float
    completed: bool = False

    @property
    def status_label(self) -> str:
        return "Completed" if self.completed else "Pending"
