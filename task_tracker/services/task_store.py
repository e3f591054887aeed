"""
Task store for the Task Tracker
Owns the in-memory task collection and flushes it to the backing store after every mutation
"""
import logging
import threading
import time
from typing import Optional

from ..models.task import Task, TaskCreate, TaskFilter, TaskStatus, TaskUpdate
from ..persistence.base import PersistenceSink
from ..utils.errors import PersistenceError, TaskNotFoundException, TaskValidationError
from ..utils.logging import log_error
from .ids import IdGenerator, UuidIdGenerator
from .validation import (
    DUE_DATE_INVALID,
    STATUS_INVALID,
    is_valid_due_date,
    is_valid_status,
    validate_task_fields,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status", "due_date", "category", "user")
# Fields stored trimmed; the rest are stored exactly as supplied.
TRIMMED_FIELDS = ("title", "due_date")


def _present(value: Optional[str]) -> Optional[str]:
    """Treat missing and blank values alike: both mean "not supplied"."""
    if value is None or not value.strip():
        return None
    return value


class TaskStore:
    """
    Authoritative task collection.

    All reads and writes go through one re-entrant lock, and every mutation
    saves the full collection to the sink before the lock is released, so
    concurrent callers observe the same order of changes as the backing store.

    Records returned to callers are copies; the collection itself never leaves
    the store.
    """

    def __init__(
        self,
        sink: PersistenceSink,
        id_generator: Optional[IdGenerator] = None,
        *,
        save_retries: int = 0,
        retry_delay_seconds: float = 0.0,
    ):
        self._sink = sink
        self._ids = id_generator or UuidIdGenerator()
        self._save_retries = max(0, save_retries)
        self._retry_delay_seconds = max(0.0, retry_delay_seconds)
        self._tasks: list[Task] = []
        self._lock = threading.RLock()

    # ---- lifecycle ----

    def load(self) -> int:
        """
        Replace the collection with the contents of the backing store.

        Returns:
            Number of tasks loaded

        Raises:
            PersistenceError: If the backing store is unreadable or holds duplicate ids
        """
        with self._lock:
            tasks = self._sink.load()
            last_issued = self._sink.load_last_id()
            ids = [task.id for task in tasks]
            if len(set(ids)) != len(ids):
                raise PersistenceError(ValueError("backing store contains duplicate task ids"))
            self._tasks = list(tasks)
            self._ids.seed(ids, last_issued)
        logger.info("TaskStore ready total=%d", len(tasks))
        return len(tasks)

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---- queries ----

    def list_tasks(self, filters: Optional[TaskFilter] = None) -> list[Task]:
        """
        Get tasks matching every supplied criterion, in creation order.

        Args:
            filters: Optional status and due date equality criteria

        Returns:
            List of matching tasks (all tasks when no criteria are supplied)

        Raises:
            TaskValidationError: If a supplied criterion is malformed
        """
        status = _present(filters.status) if filters else None
        due_date = _present(filters.due_date) if filters else None

        if status is not None and not is_valid_status(status):
            raise TaskValidationError(STATUS_INVALID)
        if due_date is not None:
            if not is_valid_due_date(due_date):
                raise TaskValidationError(DUE_DATE_INVALID)
            due_date = due_date.strip()

        with self._lock:
            snapshot = list(self._tasks)

        return [
            task.model_copy()
            for task in snapshot
            if (status is None or task.status == status)
            and (due_date is None or task.due_date == due_date)
        ]

    def get_task_by_id(self, task_id: str) -> Task:
        """
        Raises:
            TaskNotFoundException: If no task has this id
        """
        with self._lock:
            _, task = self._find(task_id)
            return task.model_copy()

    # ---- mutations ----

    def create_task(self, task_data: TaskCreate) -> Task:
        """
        Validate and store a new task.

        Args:
            task_data: Candidate fields; status defaults to Pending when absent

        Returns:
            Created task with its assigned id

        Raises:
            TaskValidationError: If the candidate is rejected (nothing is stored)
            PersistenceError: If the flush failed (the task stays in memory)
        """
        status = _present(task_data.status) or TaskStatus.PENDING.value
        reason = validate_task_fields(task_data.title, task_data.due_date, status)
        if reason:
            logger.info("Rejected task create: %s", reason)
            raise TaskValidationError(reason)

        with self._lock:
            task = Task(
                id=self._allocate_id(),
                title=task_data.title.strip(),
                description=_present(task_data.description),
                status=status,
                due_date=task_data.due_date.strip(),
                category=_present(task_data.category),
                user=_present(task_data.user),
            )
            self._tasks.append(task)
            logger.info("Task created id=%s status=%s due=%s", task.id, task.status.value, task.due_date)
            self._flush("TaskStore.create_task", task)
            return task.model_copy()

    def update_task(self, task_id: str, task_data: TaskUpdate) -> Task:
        """
        Apply a partial update.

        Only fields that are present and non-empty overwrite stored values.
        The merged record must pass full validation before it replaces the old one.

        Args:
            task_id: Task to update
            task_data: Partial fields

        Returns:
            Updated task

        Raises:
            TaskNotFoundException: If no task has this id
            TaskValidationError: If the merged record is rejected (nothing changes)
            PersistenceError: If the flush failed (the update stays in memory)
        """
        with self._lock:
            index, current = self._find(task_id)

            changes = {}
            for field in UPDATABLE_FIELDS:
                value = _present(getattr(task_data, field))
                if value is not None:
                    changes[field] = value.strip() if field in TRIMMED_FIELDS else value

            merged = current.model_dump()
            merged.update(changes)
            reason = validate_task_fields(merged["title"], merged["due_date"], merged["status"])
            if reason:
                logger.info("Rejected task update id=%s: %s", task_id, reason)
                raise TaskValidationError(reason)

            if not changes:
                return current.model_copy()

            updated = Task.model_validate(merged)
            self._tasks[index] = updated
            logger.info("Task updated id=%s fields=%s", task_id, ",".join(sorted(changes)))
            self._flush("TaskStore.update_task", updated)
            return updated.model_copy()

    def delete_task(self, task_id: str) -> Task:
        """
        Remove a task. Surviving ids are never changed.

        Returns:
            The removed task

        Raises:
            TaskNotFoundException: If no task has this id (nothing is saved)
            PersistenceError: If the flush failed (the task stays removed in memory)
        """
        with self._lock:
            index, _ = self._find(task_id)
            removed = self._tasks.pop(index)
            logger.info("Task deleted id=%s", task_id)
            self._flush("TaskStore.delete_task", removed)
            return removed.model_copy()

    # ---- helpers ----

    def _find(self, task_id: str) -> tuple[int, Task]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index, task
        raise TaskNotFoundException(task_id)

    def _allocate_id(self) -> str:
        existing = {task.id for task in self._tasks}
        task_id = self._ids.next_id()
        while task_id in existing:
            task_id = self._ids.next_id()
        return task_id

    def _flush(self, context: str, task: Task) -> None:
        """Save the whole collection, retrying up to save_retries times."""
        attempts = self._save_retries + 1
        last_error: Optional[PersistenceError] = None

        for attempt in range(1, attempts + 1):
            try:
                self._sink.save(list(self._tasks), self._ids.last_issued)
                return
            except PersistenceError as e:
                last_error = e
            except OSError as e:
                last_error = PersistenceError(e)

            if attempt < attempts:
                logger.warning(
                    "Save failed (attempt %d/%d): %s", attempt, attempts, last_error
                )
                time.sleep(self._retry_delay_seconds)

        log_error(last_error, context, task.id)
        raise PersistenceError(last_error.cause, task=task.model_copy())


__all__ = ["TaskStore"]
