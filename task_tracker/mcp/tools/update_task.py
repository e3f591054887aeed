"""
Update Task MCP Tool
Updates task attributes
"""
from typing import Optional
from pydantic import Field

from ..server import mcp, get_task_store
from ...models.task import TaskUpdate
from ...services.task_store import UPDATABLE_FIELDS
from ...utils.errors import TaskNotFoundException, TaskValidationError, PersistenceError


@mcp.tool()
def update_task(
    task_id: str = Field(..., description="Task ID to update"),
    title: Optional[str] = Field(None, description="New title"),
    description: Optional[str] = Field(None, description="New description"),
    status: Optional[str] = Field(None, description="New status: Pending or Completed"),
    due_date: Optional[str] = Field(None, description="New due date (YYYY-MM-DD)"),
    category: Optional[str] = Field(None, description="New category ID"),
    user: Optional[str] = Field(None, description="New user ID"),
) -> dict:
    """Update an existing task's attributes. Omitted fields keep their values."""
    task_data = TaskUpdate(
        title=title,
        description=description,
        status=status,
        due_date=due_date,
        category=category,
        user=user,
    )
    changes = [field for field in UPDATABLE_FIELDS if (getattr(task_data, field) or "").strip()]
    if not changes:
        return {"error": "validation_error", "message": "No fields to update"}

    try:
        task = get_task_store().update_task(task_id, task_data)
        return {**task.to_record(), "changes": changes}
    except TaskNotFoundException as e:
        return {"error": "not_found", "message": str(e)}
    except TaskValidationError as e:
        return {"error": "validation_error", "message": e.reason}
    except PersistenceError as e:
        return {"error": "persistence_error", "message": str(e), "id": task_id}
