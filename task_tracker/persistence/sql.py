"""
SQLite sink for the Task Tracker
Stores the collection in a SQLModel table, replaced in a single transaction on every save
"""
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import ValidationError
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Field, Session, SQLModel, create_engine, select

from ..models.task import Task
from ..utils.errors import PersistenceError

logger = logging.getLogger(__name__)


class TaskRow(SQLModel, table=True):
    """Task row; `position` keeps the collection's insertion order"""
    __tablename__ = "task"

    position: int = Field(primary_key=True)
    task_id: str = Field(nullable=False, unique=True, index=True)
    title: str = Field(nullable=False)
    description: Optional[str] = Field(default=None)
    status: str = Field(nullable=False)
    due_date: str = Field(nullable=False)
    category: Optional[str] = Field(default=None)
    user_ref: Optional[str] = Field(default=None)

    @classmethod
    def from_task(cls, position: int, task: Task) -> "TaskRow":
        return cls(
            position=position,
            task_id=task.id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            due_date=task.due_date,
            category=task.category,
            user_ref=task.user,
        )

    def to_task(self) -> Task:
        return Task(
            id=self.task_id,
            title=self.title,
            description=self.description,
            status=self.status,
            due_date=self.due_date,
            category=self.category,
            user=self.user_ref,
        )


class TaskMeta(SQLModel, table=True):
    """Key/value bookkeeping saved alongside the task rows"""
    __tablename__ = "task_meta"

    key: str = Field(primary_key=True)
    value: int = Field(nullable=False)


LAST_ID_KEY = "last_id"


class SqlModelSink:
    """
    Embedded-database backing store.

    Same contract as JsonFileSink; a save deletes every row, inserts the
    current collection and updates the id mark inside one transaction.
    """

    def __init__(self, db_path: Union[str, Path], echo: bool = False):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(f"sqlite:///{self.db_path}", echo=echo)
        try:
            SQLModel.metadata.create_all(self.engine, tables=[TaskRow.__table__, TaskMeta.__table__])
        except SQLAlchemyError as e:
            raise PersistenceError(e)

    def load(self) -> list[Task]:
        try:
            with Session(self.engine) as session:
                rows = session.exec(select(TaskRow).order_by(TaskRow.position)).all()
                tasks = [row.to_task() for row in rows]
        except (SQLAlchemyError, ValidationError) as e:
            raise PersistenceError(e)

        logger.info("Loaded %d tasks from %s", len(tasks), self.db_path)
        return tasks

    def load_last_id(self) -> int:
        try:
            with Session(self.engine) as session:
                meta = session.get(TaskMeta, LAST_ID_KEY)
                return meta.value if meta else 0
        except SQLAlchemyError as e:
            raise PersistenceError(e)

    def save(self, tasks: Sequence[Task], last_id: int = 0) -> None:
        try:
            with Session(self.engine) as session:
                session.execute(delete(TaskRow))
                for position, task in enumerate(tasks):
                    session.add(TaskRow.from_task(position, task))
                if last_id > 0:
                    session.merge(TaskMeta(key=LAST_ID_KEY, value=last_id))
                session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(e)

        logger.debug("Saved %d tasks to %s", len(tasks), self.db_path)

    def close(self) -> None:
        self.engine.dispose()


__all__ = ["TaskRow", "TaskMeta", "SqlModelSink"]
