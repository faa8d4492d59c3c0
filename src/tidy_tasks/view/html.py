# src/tidy_tasks/view/html.py

"""HTML fragment renderer. Every piece of task text goes through escape()."""

from __future__ import annotations

from html import escape

from .render import BulkControl, TaskRow, View


def _attr_disabled(control: BulkControl) -> str:
    return "" if control.enabled else " disabled"


def render_row(row: TaskRow) -> str:
    classes = "task-item completed" if row.completed else "task-item"
    checked = " checked" if row.completed else ""
    return "".join(
        [
            f'<li class="{classes}" data-task-id="{row.task_id}" role="listitem">',
            f'<input type="checkbox" class="task-checkbox"{checked} data-action="toggle"'
            f' aria-label="{escape(row.toggle_label)}">',
            '<div class="task-content">',
            f'<div class="task-text">{escape(row.text)}</div>',
            '<div class="task-meta">',
            f'<span class="task-time">{escape(row.created_label)}</span>',
            f'<span class="task-status">{escape(row.status_label)}</span>',
            "</div>",
            "</div>",
            '<div class="task-actions">',
            '<button class="task-action-btn delete" data-action="delete"'
            ' aria-label="Delete task" title="Delete task">Delete</button>',
            "</div>",
            "</li>",
        ]
    )


def render_html(view: View) -> str:
    parts: list[str] = ['<div class="todo-app">']

    s = view.stats
    parts.append(
        '<div class="stats">'
        f'<span id="totalTasks">{s.total}</span>'
        f'<span id="completedTasks">{s.completed}</span>'
        f'<span id="pendingTasks">{s.pending}</span>'
        "</div>"
    )

    if view.feedback is not None:
        parts.append(
            f'<div id="inputError" class="feedback {view.feedback.level.value}">'
            f"{escape(view.feedback.text)}</div>"
        )
    else:
        parts.append('<div id="inputError" class="feedback"></div>')

    parts.append('<div class="filters">')
    for button in view.filters:
        active = " active" if button.active else ""
        parts.append(
            f'<button class="filter-btn{active}" data-filter="{button.task_filter.value}">'
            f"{escape(button.label)}</button>"
        )
    parts.append("</div>")

    if view.empty_state is not None:
        e = view.empty_state
        parts.append(
            '<div id="emptyState" class="empty-state">'
            f'<div class="empty-icon">{escape(e.icon)}</div>'
            f"<h3>{escape(e.title)}</h3>"
            f"<p>{escape(e.message)}</p>"
            "</div>"
        )
    else:
        parts.append('<ul id="taskList" class="task-list" role="list">')
        parts.extend(render_row(row) for row in view.rows)
        parts.append("</ul>")

    b = view.bulk_actions
    if b.visible:
        parts.append(
            '<div id="bulkActions" class="bulk-actions">'
            f'<button id="clearCompleted"{_attr_disabled(b.clear_completed)}>'
            f"{escape(b.clear_completed.label)}</button>"
            f'<button id="markAllComplete"{_attr_disabled(b.mark_all_complete)}>'
            f"{escape(b.mark_all_complete.label)}</button>"
            "</div>"
        )

    parts.append("</div>")
    return "\n".join(parts)
