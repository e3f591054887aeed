"""
List Tasks MCP Tool
Lists tasks with optional status and due date filtering
"""
from typing import Optional
from pydantic import Field

from ..server import mcp, get_task_store
from ...models.task import TaskFilter
from ...utils.errors import TaskValidationError


@mcp.tool()
def list_tasks(
    status: Optional[str] = Field(None, description="Only tasks with this status: Pending or Completed"),
    due_date: Optional[str] = Field(None, description="Only tasks due on this date (YYYY-MM-DD)"),
) -> dict:
    """List tasks in creation order, optionally filtered."""
    try:
        tasks = get_task_store().list_tasks(TaskFilter(status=status, due_date=due_date))
    except TaskValidationError as e:
        return {"error": "validation_error", "message": e.reason}

    return {
        "tasks": [task.to_record() for task in tasks],
        "total": len(tasks),
        "filters_applied": {
            "status": status,
            "dueDate": due_date,
        },
    }
