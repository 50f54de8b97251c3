# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.config import Settings
from taskdesk.logging_setup import setup_logging


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "TASKDESK_APP_NAME",
        "TASKDESK_LOG_LEVEL",
        "TASKDESK_FILE_LOGGING",
        "TASKDESK_DATA_DIR",
        "TASKDESK_ACTIVE_CAPACITY",
        "TASKDESK_DATE_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "taskdesk"
    assert s.log_level == "INFO"
    assert s.file_logging is True
    assert s.data_dir == Path(".local/taskdesk")
    assert s.active_capacity == 100
    assert s.date_format == "%Y-%m-%d"


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDESK_APP_NAME", "desk")
    monkeypatch.setenv("TASKDESK_FILE_LOGGING", "off")
    monkeypatch.setenv("TASKDESK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKDESK_ACTIVE_CAPACITY", "5")
    monkeypatch.setenv("TASKDESK_DATE_FORMAT", "%d.%m.%Y")

    s = Settings.from_env()

    assert s.app_name == "desk"
    assert s.file_logging is False
    assert s.data_dir == tmp_path
    assert s.active_capacity == 5
    assert s.date_format == "%d.%m.%Y"

    state = create_initial_state(settings=s)
    assert state.active.capacity == 5


def test_settings_ignore_bad_capacity(monkeypatch) -> None:
    monkeypatch.setenv("TASKDESK_ACTIVE_CAPACITY", "lots")
    assert Settings.from_env().active_capacity == 100
    monkeypatch.setenv("TASKDESK_ACTIVE_CAPACITY", "0")
    assert Settings.from_env().active_capacity == 100


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("taskdesk.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "taskdesk.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_without_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        assert setup_logging(log_dir=None) is None
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
