# src/tidy_tasks/view/text.py

"""Plain-text (console) renderer."""

from __future__ import annotations

import unicodedata

from ..core.feedback import FeedbackLevel
from .render import TaskRow, View

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"


def sanitize(text: str) -> str:
    """
    Make text safe to print: control and format characters (ESC, BEL, CR,
    bidi overrides, ...) are shown as escape codes instead of being sent to
    the terminal.
    """
    out: list[str] = []
    for ch in text:
        if unicodedata.category(ch).startswith("C"):
            code = ord(ch)
            out.append(f"\\x{code:02x}" if code <= 0xFF else f"\\u{code:04x}")
        else:
            out.append(ch)
    return "".join(out)


class _Style:
    def __init__(self, color: bool) -> None:
        self.color = color

    def __call__(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return "".join(codes) + text + RESET


def render_row(row: TaskRow, *, color: bool = False) -> str:
    style = _Style(color)
    box = "[x]" if row.completed else "[ ]"
    text = sanitize(row.text)
    if row.completed:
        text = style(text, DIM)
    status = style(row.status_label, GREEN if row.completed else YELLOW)
    meta = style(f"{row.created_label} · ", DIM)
    return f"  {row.task_id:>3} {box} {text}\n        {meta}{status}"


def render_text(view: View, *, color: bool = False, title: str = "Tasks") -> str:
    style = _Style(color)
    lines: list[str] = []

    s = view.stats
    lines.append(style(title, BOLD) + f"  total {s.total} · completed {s.completed} · pending {s.pending}")

    tabs = []
    for button in view.filters:
        label = button.label
        tabs.append(style(f"[{label}]", BOLD) if button.active else f" {label} ")
    lines.append("Filter: " + " ".join(tabs))
    lines.append("")

    if view.empty_state is not None:
        e = view.empty_state
        lines.append(f"  {e.icon}  {style(e.title, BOLD)}")
        lines.append(f"      {e.message}")
    else:
        lines.extend(render_row(row, color=color) for row in view.rows)

    b = view.bulk_actions
    if b.visible:
        lines.append("")
        controls = []
        for command, control in (("/clear", b.clear_completed), ("/done-all", b.mark_all_complete)):
            label = f"{control.label} {command}"
            controls.append(label if control.enabled else style(f"({label})", DIM))
        lines.append("  ".join(controls))

    if view.feedback is not None:
        fb = view.feedback
        lines.append("")
        lines.append(style(sanitize(fb.text), GREEN if fb.level is FeedbackLevel.SUCCESS else RED))

    return "\n".join(lines)
