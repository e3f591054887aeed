"""
Error types for the Task Tracker
Raised by the task store and translated into responses by the API layer
"""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.task import Task


class TaskStoreError(Exception):
    """Base exception for task store errors"""
    pass


class TaskValidationError(TaskStoreError):
    """Raised when candidate task fields are rejected"""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class TaskNotFoundException(TaskStoreError):
    """Raised when a task is not found"""
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class PersistenceError(TaskStoreError):
    """
    Raised when the backing store cannot be read or written.

    When raised from a mutating operation the in-memory change has already
    been applied; `task` holds the affected record (None for loads).
    """
    def __init__(self, cause: BaseException, task: Optional["Task"] = None):
        self.cause = cause
        self.task = task
        super().__init__(f"Persistence failed: {cause}")


__all__ = [
    "TaskStoreError",
    "TaskValidationError",
    "TaskNotFoundException",
    "PersistenceError",
]
