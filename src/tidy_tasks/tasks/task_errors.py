# tasks/task_errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task-domain errors."""


class TaskValidationError(TaskError, ValueError):
    """
    Rejected input for a new task.

    `message` is user-facing; the view shows it as-is.
    """

    message = "Invalid task"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyInputError(TaskValidationError):
    message = "Please enter a task description"


class TooLongError(TaskValidationError):
    def __init__(self, limit: int, length: int) -> None:
        self.limit = limit
        self.length = length
        super().__init__(f"Task description must be {limit} characters or less")


class DuplicateTaskError(TaskValidationError):
    message = "This task already exists"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__()
