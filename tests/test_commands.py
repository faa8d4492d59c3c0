# tests/test_commands.py

from __future__ import annotations

from tidy_tasks.cli.commands import CommandRegistry, registry
from tidy_tasks.core.state import AppState
from tidy_tasks.tasks.task_models import TaskFilter
from tidy_tasks.view.binder import ViewBinder

from .fakes import FakeSurface


def test_command_registry_routes_2_and_3_params(binder: ViewBinder) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(binder, args):
        called["h2"] += 1
        return "h2"

    def h3(binder, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(binder, "/a x") == "h2"
    assert reg.handle(binder, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(binder: ViewBinder) -> None:
    reg = CommandRegistry()
    assert reg.handle(binder, "hello") is None
    assert "Unknown command" in (reg.handle(binder, "/nope") or "")
    assert "Empty command" in (reg.handle(binder, "/") or "")


def test_help_lists_commands(binder: ViewBinder) -> None:
    text = registry.handle(binder, "/help") or ""
    for name in ("/add", "/toggle", "/delete", "/filter", "/clear", "/done-all", "/html"):
        assert name in text


def test_task_commands_drive_the_binder(binder: ViewBinder, surface: FakeSurface, state: AppState) -> None:
    assert registry.handle(binder, "/add Buy   milk") == ""
    assert registry.handle(binder, "/add Walk dog") == ""
    assert [t.text for t in state.task_store.tasks] == ["Walk dog", "Buy   milk"]

    registry.handle(binder, "/toggle 1")
    assert state.task_store.get_task(1).completed is True

    assert registry.handle(binder, "/stats") == "Tasks: total 2, completed 1, pending 1."

    registry.handle(binder, "/filter completed")
    assert state.active_filter is TaskFilter.COMPLETED
    assert [r.task_id for r in surface.last.rows] == [1]

    registry.handle(binder, "/clear")
    assert state.task_store.count_tasks() == 1

    registry.handle(binder, "/done-all")
    assert all(t.completed for t in state.task_store.tasks)

    registry.handle(binder, "/rm 2")
    assert state.task_store.count_tasks() == 0


def test_row_commands_validate_arguments(binder: ViewBinder, state: AppState) -> None:
    assert registry.handle(binder, "/toggle") == "Usage: /toggle <id>"
    assert registry.handle(binder, "/delete 1 2") == "Usage: /delete <id>"
    # Unknown ids are silently ignored.
    assert registry.handle(binder, "/toggle 77") == ""


def test_filter_command_rejects_unknown_keyword(binder: ViewBinder, state: AppState) -> None:
    reply = registry.handle(binder, "/filter soon") or ""
    assert reply.startswith("Unknown filter: soon.")
    assert state.active_filter is TaskFilter.ALL
    assert "Filter is all" in (registry.handle(binder, "/filter") or "")


def test_html_command_escapes(binder: ViewBinder) -> None:
    registry.handle(binder, "/add <b>hi</b>")
    emitted: list[str] = []
    html = registry.handle(binder, "/html", emit=emitted.append) or ""
    assert "&lt;b&gt;hi&lt;/b&gt;" in html
    assert "<b>hi</b>" not in html
    assert emitted


def test_focus_command(binder: ViewBinder, surface: FakeSurface) -> None:
    surface.focused = False
    registry.handle(binder, "/focus")
    assert surface.focused is True


def test_add_keeps_inner_whitespace(binder: ViewBinder, state: AppState) -> None:
    registry.handle(binder, "/add   a  b")
    assert [t.text for t in state.task_store.tasks] == ["a  b"]

    # Same text typed as a plain line is a duplicate, not a new task.
    binder.surface.set_input("A  B")
    assert binder.submit_input() is False
    assert state.task_store.count_tasks() == 1


def test_add_without_text_reports_empty_input(binder: ViewBinder, surface: FakeSurface) -> None:
    assert registry.handle(binder, "/add") == ""
    assert surface.last.feedback.text == "Please enter a task description"


def test_raw_registration_covers_aliases(binder: ViewBinder) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def h(binder, args):
        seen.append(args)
        return ""

    reg.register("say", h, "say", aliases=["s"], raw=True)
    reg.register("words", h, "words")

    reg.handle(binder, "/say  x   y ")
    reg.handle(binder, "/s z")
    reg.handle(binder, "/say")
    reg.handle(binder, "/words x   y")
    assert seen == [["x   y "], ["z"], [], ["x", "y"]]
