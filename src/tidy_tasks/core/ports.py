# src/tidy_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The binder depends on Protocols instead of concrete implementations.
This keeps the view surface and storage swappable and makes testing easier.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..view.render import View

Clock = Callable[[], float]
# Returns "now" as epoch seconds (time.time compatible).


class TaskRepo(Protocol):
    @property
    def tasks(self) -> tuple[Any, ...]: ...

    def count_tasks(self) -> int: ...
    def get_task(self, task_id: int) -> Any | None: ...
    def add_task(self, text: str) -> Any: ...
    def toggle_task(self, task_id: int) -> Any | None: ...
    def delete_task(self, task_id: int) -> Any | None: ...
    def clear_completed(self) -> Any: ...
    def mark_all_complete(self) -> Any: ...
    def filtered_tasks(self, task_filter: Any = ...) -> Iterator[Any]: ...
    def close(self) -> None: ...


class ViewSurface(Protocol):
    """
    Where the rendered view goes and where user input comes from.

    The surface owns view-only state (input text, focus). It never holds
    task data: everything it shows arrives through apply().
    """

    def get_input(self) -> str: ...
    def set_input(self, value: str) -> None: ...
    def focus_input(self) -> None: ...
    def input_has_focus(self) -> bool: ...
    def apply(self, view: View) -> None: ...
