# src/tidy_tasks/view/render.py

"""
Pure rendering: application state in, View description out.

Nothing here touches a surface, so every rule (stats, empty states, bulk
action labels, relative times) can be tested without one. Task text is
carried raw; escaping belongs to the output renderers.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..core.feedback import Feedback
from ..core.state import AppState
from ..tasks.task_models import Task, TaskFilter

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int


@dataclass(frozen=True, slots=True)
class EmptyState:
    icon: str
    title: str
    message: str


EMPTY_STATES: dict[TaskFilter, EmptyState] = {
    TaskFilter.ALL: EmptyState("📋", "No tasks yet", "Add your first task above to get started!"),
    TaskFilter.COMPLETED: EmptyState("✅", "No completed tasks", "Complete some tasks to see them here!"),
    TaskFilter.PENDING: EmptyState("🎉", "No pending tasks", "Great job! All your tasks are completed!"),
}


@dataclass(frozen=True, slots=True)
class TaskRow:
    task_id: int
    text: str
    completed: bool
    time_ago: str
    status_label: str
    toggle_label: str

    @property
    def created_label(self) -> str:
        return f"Created {self.time_ago}"


@dataclass(frozen=True, slots=True)
class FilterButton:
    task_filter: TaskFilter
    label: str
    active: bool


@dataclass(frozen=True, slots=True)
class BulkControl:
    label: str
    enabled: bool


@dataclass(frozen=True, slots=True)
class BulkActions:
    visible: bool
    clear_completed: BulkControl
    mark_all_complete: BulkControl


@dataclass(frozen=True, slots=True)
class View:
    stats: TaskStats
    active_filter: TaskFilter
    filters: tuple[FilterButton, ...]
    rows: tuple[TaskRow, ...]
    empty_state: EmptyState | None
    bulk_actions: BulkActions
    feedback: Feedback | None = None

    @property
    def is_empty(self) -> bool:
        return not self.rows


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def format_time_ago(seconds: float) -> str:
    """Bucket an age in seconds into 'just now' / minutes / hours / days."""
    seconds = int(seconds // 1)
    if seconds < MINUTE:
        return "just now"
    if seconds < HOUR:
        return f"{pluralize(seconds // MINUTE, 'minute')} ago"
    if seconds < DAY:
        return f"{pluralize(seconds // HOUR, 'hour')} ago"
    return f"{pluralize(seconds // DAY, 'day')} ago"


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
    return TaskStats(total=total, completed=completed, pending=total - completed)


def build_row(task: Task, now: float) -> TaskRow:
    return TaskRow(
        task_id=task.id,
        text=task.text,
        completed=task.completed,
        time_ago=format_time_ago(now - task.created_at),
        status_label=task.status_label,
        toggle_label=f"Mark task as {'incomplete' if task.completed else 'complete'}",
    )


def build_bulk_actions(stats: TaskStats) -> BulkActions:
    clear_label = "Clear Completed"
    if stats.completed > 0:
        clear_label = f"{clear_label} ({stats.completed})"

    mark_label = "Mark All Complete"
    if stats.pending > 0:
        mark_label = f"{mark_label} ({stats.pending})"

    return BulkActions(
        visible=stats.total > 0,
        clear_completed=BulkControl(label=clear_label, enabled=stats.completed > 0),
        mark_all_complete=BulkControl(label=mark_label, enabled=stats.pending > 0),
    )


def build_filters(active: TaskFilter) -> tuple[FilterButton, ...]:
    return tuple(FilterButton(task_filter=f, label=f.value.title(), active=f is active) for f in TaskFilter)


def build_view(state: AppState, *, now: float | None = None) -> View:
    if now is None:
        now = state.now()

    store = state.task_store
    active = state.active_filter

    stats = compute_stats(store.tasks)
    rows = tuple(build_row(task, now) for task in store.filtered_tasks(active))

    return View(
        stats=stats,
        active_filter=active,
        filters=build_filters(active),
        rows=rows,
        empty_state=None if rows else EMPTY_STATES[active],
        bulk_actions=build_bulk_actions(stats),
        feedback=state.feedback.current,
    )
