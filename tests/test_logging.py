# tests/test_logging.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.utils.logging import log_error, setup_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_log_file(restore_root_logger, tmp_path: Path) -> None:
    setup_logging("info", tmp_path / "logs")

    try:
        raise OSError("disk full")
    except OSError as e:
        log_error(e, "TaskStore.create_task", task_id="42")

    for handler in logging.getLogger().handlers:
        handler.flush()

    content = (tmp_path / "logs" / "task_tracker.log").read_text(encoding="utf-8")
    assert "TaskStore.create_task failed (task_id=42): disk full" in content
    assert "Traceback" in content


def test_setup_logging_replaces_handlers(restore_root_logger) -> None:
    setup_logging("DEBUG")
    setup_logging("WARNING")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING
