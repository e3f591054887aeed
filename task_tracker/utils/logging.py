"""
Logging helpers for the Task Tracker
Configures the root logger once and provides a uniform error logger
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("task_tracker")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure logging with a console handler and, when log_dir is given,
    a file handler that receives everything down to DEBUG.

    Call this once, before the first log record is emitted.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_dir else level)

    # Remove pre-existing handlers to avoid duplicates on re-configuration.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path / "task_tracker.log"), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.captureWarnings(True)


def log_error(error: BaseException, context: str, task_id: Optional[str] = None) -> None:
    """
    Log an error with its stack trace.

    Args:
        error: The exception that occurred
        context: Where it happened, e.g. "TaskStore.create_task"
        task_id: The task involved, if any
    """
    if task_id is not None:
        logger.error("%s failed (task_id=%s): %s", context, task_id, error, exc_info=error)
    else:
        logger.error("%s failed: %s", context, error, exc_info=error)


__all__ = ["setup_logging", "log_error"]
