"""
Complete Task MCP Tool
Marks a task as completed (idempotent)
"""
from pydantic import Field

from ..server import mcp, get_task_store
from ...models.task import TaskStatus, TaskUpdate
from ...utils.errors import TaskNotFoundException, TaskValidationError, PersistenceError


@mcp.tool()
def complete_task(
    task_id: str = Field(..., description="Task ID to complete"),
) -> dict:
    """Mark a task as completed (idempotent operation)."""
    store = get_task_store()
    try:
        task = store.get_task_by_id(task_id)
        already_completed = task.status == TaskStatus.COMPLETED

        if not already_completed:
            task = store.update_task(task_id, TaskUpdate(status=TaskStatus.COMPLETED.value))

        return {**task.to_record(), "already_completed": already_completed}
    except TaskNotFoundException as e:
        return {"error": "not_found", "message": str(e)}
    except TaskValidationError as e:
        return {"error": "validation_error", "message": e.reason}
    except PersistenceError as e:
        return {"error": "persistence_error", "message": str(e), "id": task_id}
