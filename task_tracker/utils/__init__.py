"""
Utilities module for the Task Tracker
Shared error types and logging helpers
"""
from .errors import (
    TaskStoreError,
    TaskValidationError,
    TaskNotFoundException,
    PersistenceError,
)
from .logging import setup_logging, log_error

__all__ = [
    "TaskStoreError",
    "TaskValidationError",
    "TaskNotFoundException",
    "PersistenceError",
    "setup_logging",
    "log_error",
]
