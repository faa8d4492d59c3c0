"""tidy-tasks: an in-memory task list with a console view."""

__version__ = "0.1.0"
