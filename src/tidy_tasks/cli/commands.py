# src/tidy_tasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..tasks.task_models import TaskFilter
from ..view.binder import RowAction, ViewBinder
from ..view.html import render_html
from ..view.render import build_view

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[ViewBinder, list[str]], str]
CommandHandler3 = Callable[[ViewBinder, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /toggle, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        """
        raw=True hands the handler the rest of the line as a single argument,
        whitespace intact, instead of splitting it into words.
        """
        aliases = aliases or []
        key = name.lower()
        self._help[key] = help_text
        for n in [key, *(a.lower() for a in aliases)]:
            self._handlers[n] = handler
            if raw:
                self._raw.add(n)

    def handle(
        self,
        binder: ViewBinder,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" for nothing to say) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(binder, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(binder, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Anything else is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(binder: ViewBinder, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(binder: ViewBinder, args: list[str]) -> str:
    binder.surface.set_input(args[0] if args else "")
    binder.submit_input()
    return ""


def _row_command(action: RowAction, usage: str) -> CommandHandler2:
    def handler(binder: ViewBinder, args: list[str]) -> str:
        if len(args) != 1:
            return usage
        # Unknown ids are ignored on purpose: they are stale references.
        binder.handle_row_action(args[0], action)
        return ""

    return handler


cmd_toggle = _row_command(RowAction.TOGGLE, "Usage: /toggle <id>")
cmd_delete = _row_command(RowAction.DELETE, "Usage: /delete <id>")


def cmd_filter(binder: ViewBinder, args: list[str]) -> str:
    """
    /filter                          -> show the active filter
    /filter all|completed|pending    -> switch
    """
    choices = " | ".join(f.value for f in TaskFilter)
    if not args:
        return f"Filter is {binder.state.active_filter.value}. Use /filter {choices}."

    keyword = args[0].lower()
    if keyword not in {f.value for f in TaskFilter}:
        return f"Unknown filter: {keyword}. Use /filter {choices}."

    binder.set_filter(keyword)
    return ""


def cmd_clear(binder: ViewBinder, args: list[str]) -> str:
    binder.clear_completed()
    return ""


def cmd_done_all(binder: ViewBinder, args: list[str]) -> str:
    binder.mark_all_complete()
    return ""


def cmd_stats(binder: ViewBinder, args: list[str]) -> str:
    s = build_view(binder.state).stats
    return f"Tasks: total {s.total}, completed {s.completed}, pending {s.pending}."


def cmd_html(binder: ViewBinder, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit("Rendering current view as HTML...")
    return render_html(build_view(binder.state))


def cmd_focus(binder: ViewBinder, args: list[str]) -> str:
    binder.handle_key("Enter", ctrl=True)
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", raw=True)
registry.register("toggle", cmd_toggle, help_text="Toggle a task: /toggle <id>.", aliases=["t"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("filter", cmd_filter, help_text="Filter the list: /filter all | completed | pending.")
registry.register("clear", cmd_clear, help_text="Clear completed tasks.")
registry.register("done-all", cmd_done_all, help_text="Mark all tasks complete.", aliases=["complete-all"])
registry.register("stats", cmd_stats, help_text="Show task counters.")
registry.register("html", cmd_html, help_text="Print the current view as an HTML fragment.")
registry.register("focus", cmd_focus, help_text="Focus the input (same as Ctrl+Enter).")
