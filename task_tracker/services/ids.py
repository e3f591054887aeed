"""
Task id generation for the Task Tracker
One scheme is active per deployment: random UUIDs or a monotonic integer sequence
"""
import uuid
from typing import Iterable, Protocol


class IdGenerator(Protocol):
    def seed(self, existing_ids: Iterable[str], last_issued: int = 0) -> None:
        """Observe ids already in the collection and the saved id mark (called after load)."""
        ...

    def next_id(self) -> str:
        ...

    @property
    def last_issued(self) -> int:
        """Mark to persist with each save; 0 when the scheme keeps no counter."""
        ...


class UuidIdGenerator:
    """Random UUID4 strings."""

    def seed(self, existing_ids: Iterable[str], last_issued: int = 0) -> None:
        return

    def next_id(self) -> str:
        return str(uuid.uuid4())

    @property
    def last_issued(self) -> int:
        return 0


class SequentialIdGenerator:
    """
    Integers rendered as strings: "1", "2", ...

    The counter only moves forward. Its value is saved with the collection,
    so ids of deleted tasks are not handed out again, even after a restart.
    Seeding resumes past the largest of the saved mark, the collection size
    and the highest numeric id on record.
    """

    def __init__(self) -> None:
        self._last = 0

    def seed(self, existing_ids: Iterable[str], last_issued: int = 0) -> None:
        ids = list(existing_ids)
        numeric = [int(i) for i in ids if i.isdigit()]
        self._last = max([self._last, last_issued, len(ids), *numeric])

    def next_id(self) -> str:
        self._last += 1
        return str(self._last)

    @property
    def last_issued(self) -> int:
        return self._last


def create_id_generator(scheme: str) -> IdGenerator:
    if scheme == "sequential":
        return SequentialIdGenerator()
    if scheme == "uuid":
        return UuidIdGenerator()
    raise ValueError(f"Unknown id scheme: {scheme!r}")


__all__ = ["IdGenerator", "UuidIdGenerator", "SequentialIdGenerator", "create_id_generator"]
