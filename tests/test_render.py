# tests/test_render.py

from __future__ import annotations

import pytest

from tidy_tasks.core.state import AppState
from tidy_tasks.tasks.task_models import TaskFilter
from tidy_tasks.view.html import render_html
from tidy_tasks.view.render import (
    EMPTY_STATES,
    build_bulk_actions,
    build_view,
    compute_stats,
    format_time_ago,
)
from tidy_tasks.view.text import render_text, sanitize


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "just now"),
        (30, "just now"),
        (59, "just now"),
        (60, "1 minute ago"),
        (90, "1 minute ago"),
        (150, "2 minutes ago"),
        (3599, "59 minutes ago"),
        (3600, "1 hour ago"),
        (7200, "2 hours ago"),
        (86399, "23 hours ago"),
        (86400, "1 day ago"),
        (3 * 86400 + 5, "3 days ago"),
        (-5, "just now"),
        (90.9, "1 minute ago"),
    ],
)
def test_format_time_ago(seconds: float, expected: str) -> None:
    assert format_time_ago(seconds) == expected


def test_stats_and_bulk_actions(state: AppState) -> None:
    store = state.task_store
    for text in ("a", "b", "c"):
        store.add_task(text)
    store.toggle_task(1)

    stats = compute_stats(store.tasks)
    assert (stats.total, stats.completed, stats.pending) == (3, 1, 2)

    bulk = build_bulk_actions(stats)
    assert bulk.visible is True
    assert bulk.clear_completed.enabled is True
    assert bulk.clear_completed.label == "Clear Completed (1)"
    assert bulk.mark_all_complete.enabled is True
    assert bulk.mark_all_complete.label == "Mark All Complete (2)"


def test_bulk_actions_disabled_and_hidden(state: AppState) -> None:
    empty = build_view(state).bulk_actions
    assert empty.visible is False
    assert empty.clear_completed.enabled is False
    assert empty.clear_completed.label == "Clear Completed"
    assert empty.mark_all_complete.label == "Mark All Complete"

    state.task_store.add_task("a")
    bulk = build_view(state).bulk_actions
    assert bulk.visible is True
    assert bulk.clear_completed.enabled is False
    assert bulk.clear_completed.label == "Clear Completed"

    state.task_store.toggle_task(1)
    bulk = build_view(state).bulk_actions
    assert bulk.mark_all_complete.enabled is False
    assert bulk.mark_all_complete.label == "Mark All Complete"


@pytest.mark.parametrize("task_filter", list(TaskFilter))
def test_empty_state_depends_on_filter(state: AppState, task_filter: TaskFilter) -> None:
    state.active_filter = task_filter
    view = build_view(state)
    assert view.is_empty
    assert view.empty_state == EMPTY_STATES[task_filter]


def test_empty_state_messages_are_distinct() -> None:
    titles = {e.title for e in EMPTY_STATES.values()}
    assert titles == {"No tasks yet", "No completed tasks", "No pending tasks"}


def test_pending_filter_empty_when_everything_done(state: AppState) -> None:
    state.task_store.add_task("a")
    state.task_store.mark_all_complete()
    state.active_filter = TaskFilter.PENDING

    view = build_view(state)
    assert view.rows == ()
    assert view.empty_state.title == "No pending tasks"
    assert view.stats.total == 1
    assert view.bulk_actions.visible is True


def test_rows_follow_filter_and_carry_labels(state: AppState, clock) -> None:
    store = state.task_store
    store.add_task("old")
    clock.advance(7200)
    store.add_task("new")
    store.toggle_task(1)

    view = build_view(state)
    assert [r.text for r in view.rows] == ["new", "old"]

    new, old = view.rows
    assert new.time_ago == "just now"
    assert new.status_label == "Pending"
    assert new.toggle_label == "Mark task as complete"
    assert old.created_label == "Created 2 hours ago"
    assert old.status_label == "Completed"
    assert old.toggle_label == "Mark task as incomplete"

    state.active_filter = TaskFilter.COMPLETED
    assert [r.task_id for r in build_view(state).rows] == [1]


def test_filter_buttons_mark_active(state: AppState) -> None:
    state.active_filter = TaskFilter.PENDING
    view = build_view(state)
    assert [(b.task_filter, b.active) for b in view.filters] == [
        (TaskFilter.ALL, False),
        (TaskFilter.COMPLETED, False),
        (TaskFilter.PENDING, True),
    ]


def test_html_escapes_task_text(state: AppState) -> None:
    state.task_store.add_task("<b>hi</b> & 'bye'")
    html = render_html(build_view(state))

    assert "<b>hi</b>" not in html
    assert "&lt;b&gt;hi&lt;/b&gt; &amp; &#x27;bye&#x27;" in html
    assert 'data-task-id="1"' in html
    assert "Created just now" in html


def test_html_empty_state_and_bulk_region(state: AppState) -> None:
    html = render_html(build_view(state))
    assert 'id="emptyState"' in html
    assert "No tasks yet" in html
    assert 'id="bulkActions"' not in html

    state.task_store.add_task("a")
    html = render_html(build_view(state))
    assert 'id="taskList"' in html
    assert '<button id="clearCompleted" disabled>Clear Completed</button>' in html
    assert '<button id="markAllComplete">Mark All Complete (1)</button>' in html


def test_html_marks_completed_rows(state: AppState) -> None:
    state.task_store.add_task("a")
    state.task_store.toggle_task(1)
    html = render_html(build_view(state))
    assert 'class="task-item completed"' in html
    assert 'class="task-checkbox" checked' in html


def test_text_render_neutralizes_control_chars(state: AppState) -> None:
    state.task_store.add_task("evil \x1b[31mred")
    frame = render_text(build_view(state))
    assert "\x1b" not in frame
    assert "evil \\x1b[31mred" in frame


def test_text_render_shows_counters_and_empty_state(state: AppState) -> None:
    frame = render_text(build_view(state), title="Tasks")
    assert "total 0 · completed 0 · pending 0" in frame
    assert "No tasks yet" in frame
    assert "/clear" not in frame


def test_sanitize_keeps_printable_text() -> None:
    assert sanitize("Buy milk ✅") == "Buy milk ✅"
    assert sanitize("a\tb") == "a\\x09b"
