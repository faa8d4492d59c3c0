# src/tidy_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..view.binder import ViewBinder
from ..view.render import View
from ..view.text import render_text

logger = logging.getLogger(__name__)

PROMPT = "> "
ESC = "\x1b"
CLEAR_SCREEN = "\033[2J\033[H"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleSurface:
    """
    Line-based view surface.

    The prompt is the input field: it always has focus, and its value is the
    line the user just typed. Every apply() prints a full frame; on a TTY the
    screen is cleared first so the latest frame is the only one visible.
    """

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        color: bool = False,
        title: str = "Tasks",
        clear_screen: bool | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._input = ""
        self._focused = True
        self.title = title
        self.color = color
        if clear_screen is None:
            try:
                clear_screen = self._out.isatty()
            except Exception:
                clear_screen = False
        self.clear_screen = clear_screen
        self.last_view: View | None = None

    # ---- ViewSurface ----

    def get_input(self) -> str:
        return self._input

    def set_input(self, value: str) -> None:
        self._input = value

    def focus_input(self) -> None:
        self._focused = True

    def input_has_focus(self) -> bool:
        return self._focused

    def apply(self, view: View) -> None:
        self.last_view = view
        frame = render_text(view, color=self.color, title=self.title)
        if self.clear_screen:
            self._out.write(CLEAR_SCREEN)
        self.write(frame + "\n")

    # ---- plain output ----

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def print_ts(self, text: str) -> None:
        self.write(f"[{_ts_local()}] {text}\n")


def run_console_loop(
    binder: ViewBinder,
    surface: ConsoleSurface,
    *,
    registry: CommandRegistry = command_registry,
    read_line: Callable[[str], str] = input,
) -> None:
    """
    Read lines until EOF, Ctrl+C or /exit.

    - "/command args" goes to the command registry
    - a line holding only ESC acts as the Escape key
    - anything else is typed into the input field and submitted with Enter
    """
    logger.info("Console connector started.")
    surface.print_ts("Type a task and press Enter. Use /help for commands, /exit to quit.")
    binder.render()

    def emit(text: str) -> None:
        surface.print_ts(text)

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            surface.write("\n")
            break

        stripped = line.strip()
        if stripped.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Expired feedback and "the user typed something" both clear the
        # message; the event below (or flush) draws a single frame for both.
        binder.tick(render=False)
        binder.handle_input_changed(render=False)

        if stripped == ESC:
            binder.handle_key("Escape")
        elif stripped.startswith("/"):
            try:
                reply = registry.handle(binder, stripped, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."
            # Frame first, so a cleared screen does not swallow the reply.
            binder.flush()
            if reply:
                surface.print_ts(reply)
        else:
            surface.set_input(line)
            binder.handle_key("Enter")

        binder.flush()

    logger.info("Console connector finished.")
