"""
Delete Task MCP Tool
Permanently deletes a task
"""
from pydantic import Field

from ..server import mcp, get_task_store
from ...utils.errors import TaskNotFoundException, PersistenceError


@mcp.tool()
def delete_task(
    task_id: str = Field(..., description="Task ID to delete"),
) -> dict:
    """Permanently delete a task."""
    try:
        task = get_task_store().delete_task(task_id)
        return {
            "deleted": True,
            "task_id": task_id,
            "title": task.title,
        }
    except TaskNotFoundException as e:
        return {"error": "not_found", "message": str(e), "deleted": False}
    except PersistenceError as e:
        return {"error": "persistence_error", "message": str(e), "deleted": True, "task_id": task_id}
