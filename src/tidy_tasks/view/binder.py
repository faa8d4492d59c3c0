# src/tidy_tasks/view/binder.py

from __future__ import annotations

import logging
from enum import StrEnum

from ..core.ports import ViewSurface
from ..core.state import AppState
from ..tasks.task_errors import TaskValidationError
from ..tasks.task_models import BulkStatus, TaskFilter
from .render import View, build_view, pluralize

logger = logging.getLogger(__name__)


class RowAction(StrEnum):
    TOGGLE = "toggle"
    DELETE = "delete"


class ViewBinder:
    """
    Routes view events into store operations and pushes a freshly built View
    to the surface after every change.

    The binder keeps no task data of its own: tasks, filter and feedback live
    on AppState, input text and focus live on the surface.
    """

    def __init__(self, state: AppState, surface: ViewSurface) -> None:
        self.state = state
        self.surface = surface
        self._hold_render = False
        self._stale = False
        # Auto-cleared feedback must disappear from the screen too.
        self.state.feedback.on_change = self._feedback_changed

    def render(self) -> View:
        view = build_view(self.state)
        self.surface.apply(view)
        self._stale = False
        return view

    def flush(self) -> bool:
        """Render only if a held change has not been shown yet."""
        if not self._stale:
            return False
        self.render()
        return True

    def _feedback_changed(self) -> None:
        if self._hold_render:
            self._stale = True
            return
        self.render()

    def tick(self, now: float | None = None, *, render: bool = True) -> int:
        """
        Run due deferred calls (feedback clears). Call between events.

        With render=False the resulting change is only marked stale, for
        callers that render right after anyway (see flush()).
        """
        self._hold_render = not render
        try:
            return self.state.timers.run_due(now)
        finally:
            self._hold_render = False

    # ---- input field ----

    def submit_input(self) -> bool:
        """Add a task from the input field. Returns True if one was added."""
        text = self.surface.get_input()
        try:
            task = self.state.task_store.add_task(text)
        except TaskValidationError as e:
            # Input stays as typed so the user can fix it.
            logger.debug("Rejected task input: %s", e.message)
            self.state.feedback.error(e.message, expires=False)
            self.render()
            return False

        logger.info("Task added id=%s", task.id)
        self.surface.set_input("")
        self.state.feedback.clear()
        self.state.feedback.success("Task added successfully!")
        self.render()
        self.surface.focus_input()
        return True

    def handle_input_changed(self, *, render: bool = True) -> None:
        if not self.state.feedback.clear():
            return
        if render:
            self.render()
        else:
            self._stale = True

    def handle_key(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        """
        Keyboard contract:
        - Enter in the focused input adds a task
        - Ctrl/Cmd+Enter anywhere focuses the input
        - Escape clears the input, only while it has focus
        Returns True if the key was handled.
        """
        if key == "Enter":
            if ctrl or meta:
                self.surface.focus_input()
                return True
            if self.surface.input_has_focus():
                self.submit_input()
                return True
            return False

        if key == "Escape" and self.surface.input_has_focus():
            self.surface.set_input("")
            self.handle_input_changed()
            return True

        return False

    # ---- rows ----

    def handle_row_action(self, task_id: int | str, action: str) -> bool:
        try:
            tid = int(task_id)
            kind = RowAction(action)
        except (TypeError, ValueError):
            logger.debug("Ignoring row action %r on %r", action, task_id)
            return False

        if kind is RowAction.TOGGLE:
            return self.toggle(tid)
        return self.delete(tid)

    def toggle(self, task_id: int) -> bool:
        task = self.state.task_store.toggle_task(task_id)
        if task is None:
            return False

        self.state.feedback.success(f"Task marked as {'completed' if task.completed else 'pending'}!")
        self.render()
        return True

    def delete(self, task_id: int) -> bool:
        if self.state.task_store.delete_task(task_id) is None:
            return False

        self.state.feedback.success("Task deleted!")
        self.render()
        return True

    # ---- filter ----

    def set_filter(self, keyword: TaskFilter | str) -> TaskFilter:
        task_filter = keyword if isinstance(keyword, TaskFilter) else TaskFilter.from_keyword(keyword)
        self.state.active_filter = task_filter
        self.render()
        return task_filter

    # ---- bulk actions ----

    def clear_completed(self) -> int:
        outcome = self.state.task_store.clear_completed()
        if outcome.status is BulkStatus.NOTHING_TO_CLEAR:
            self.state.feedback.error("No completed tasks to clear")
            self.render()
            return 0

        logger.info("Cleared %s completed task(s)", outcome.count)
        self.state.feedback.success(f"{pluralize(outcome.count, 'completed task')} cleared!")
        self.render()
        return outcome.count

    def mark_all_complete(self) -> int:
        outcome = self.state.task_store.mark_all_complete()
        if outcome.status is BulkStatus.ALREADY_ALL_COMPLETE:
            self.state.feedback.error("All tasks are already completed")
            self.render()
            return 0

        logger.info("Marked %s task(s) complete", outcome.count)
        self.state.feedback.success(f"{pluralize(outcome.count, 'task')} marked as complete!")
        self.render()
        return outcome.count
