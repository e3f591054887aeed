"""
Get Task MCP Tool
Retrieves a specific task by ID
"""
from pydantic import Field

from ..server import mcp, get_task_store
from ...utils.errors import TaskNotFoundException


@mcp.tool()
def get_task(
    task_id: str = Field(..., description="Task ID to retrieve"),
) -> dict:
    """Retrieve a specific task by ID."""
    try:
        return get_task_store().get_task_by_id(task_id).to_record()
    except TaskNotFoundException as e:
        return {"error": "not_found", "message": str(e)}
