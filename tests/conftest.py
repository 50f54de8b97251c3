# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.core.state import AppState
from taskdesk.tasks.task_models import TaskRecord


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the menu.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        file_logging=False,
        data_dir=tmp_path / "data",
        active_capacity=100,
        date_format="%Y-%m-%d",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def make_task():
    def _make(title: str, importance: int = 2, due: str = "2024-05-10") -> TaskRecord:
        return TaskRecord(title=title, importance=importance, due_date=date.fromisoformat(due))

    return _make
