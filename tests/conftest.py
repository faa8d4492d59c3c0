# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tidy_tasks.cli.bootstrap import create_initial_state
from tidy_tasks.core.state import AppState
from tidy_tasks.tasks.task_store import TaskStore
from tidy_tasks.view.binder import ViewBinder

from .fakes import FakeClock, FakeSurface


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="tidy-test",
        log_level="DEBUG",
        log_to_file=False,
        color=False,
        max_task_length=250,
        feedback_seconds=2.0,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    return create_initial_state(settings=settings, clock=clock)


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture()
def binder(state: AppState, surface: FakeSurface) -> ViewBinder:
    return ViewBinder(state, surface)
