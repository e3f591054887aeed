"""
Task model for the Task Tracker
Defines the task record and the untyped input shapes the API layer builds from requests
"""
from typing import Any, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    """Task status options"""
    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Task(BaseModel):
    """A stored task record. Serialized with camelCase keys (dueDate)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    due_date: str = Field(alias="dueDate")
    category: Optional[str] = None
    user: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        """JSON-ready dict with every field, as written to the backing store."""
        return self.model_dump(mode="json", by_alias=True)


class _TaskInput(BaseModel):
    """
    Raw candidate fields parsed from a form body, JSON body or tool call.

    Values are kept as text; domain validation happens in the task store so
    rejections carry the store's reasons rather than schema errors.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[str] = Field(default=None, alias="dueDate")
    category: Optional[str] = None
    user: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Any:
        # JSON clients may send numeric references (e.g. "user": 2).
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class TaskCreate(_TaskInput):
    """Schema for creating a new task"""
    pass


class TaskUpdate(_TaskInput):
    """Schema for a partial task update; absent or empty fields are left unchanged"""
    pass


class TaskFilter(BaseModel):
    """Optional equality criteria for listing tasks"""
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    due_date: Optional[str] = Field(default=None, alias="dueDate")

    def is_empty(self) -> bool:
        return not self.status and not self.due_date


__all__ = ["TaskStatus", "Task", "TaskCreate", "TaskUpdate", "TaskFilter"]
