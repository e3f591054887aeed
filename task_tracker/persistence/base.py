"""
Persistence sink interface for the Task Tracker
"""
from typing import Protocol, Sequence, runtime_checkable

from ..models.task import Task


@runtime_checkable
class PersistenceSink(Protocol):
    """
    Durable representation of the whole task collection.

    load() returns the saved collection in order (empty when nothing was saved yet).
    save() replaces the stored collection with `tasks` in one atomic step and
    records `last_id`, the highest sequential id ever issued (0 when unused).
    load_last_id() returns that mark so ids of deleted tasks survive a restart.
    All three raise PersistenceError on failure.
    """

    def load(self) -> list[Task]:
        ...

    def load_last_id(self) -> int:
        ...

    def save(self, tasks: Sequence[Task], last_id: int = 0) -> None:
        ...
