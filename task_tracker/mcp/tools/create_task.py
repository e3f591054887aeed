"""
Create Task MCP Tool
Creates a new task
"""
from typing import Optional
from pydantic import Field

from ..server import mcp, get_task_store
from ...models.task import TaskCreate
from ...utils.errors import TaskValidationError, PersistenceError


@mcp.tool()
def create_task(
    title: str = Field(..., description="Task title (at least 3 chars)"),
    due_date: str = Field(..., description="Due date in ISO format (YYYY-MM-DD)"),
    description: Optional[str] = Field(None, description="Detailed task description"),
    status: Optional[str] = Field(None, description="Task status: Pending (default) or Completed"),
    category: Optional[str] = Field(None, description="Category ID"),
    user: Optional[str] = Field(None, description="ID of the user the task belongs to"),
) -> dict:
    """Create a new task."""
    task_data = TaskCreate(
        title=title,
        description=description,
        status=status,
        due_date=due_date,
        category=category,
        user=user,
    )
    try:
        task = get_task_store().create_task(task_data)
        return task.to_record()
    except TaskValidationError as e:
        return {"error": "validation_error", "message": e.reason}
    except PersistenceError as e:
        return {"error": "persistence_error", "message": str(e), "id": e.task.id if e.task else None}
