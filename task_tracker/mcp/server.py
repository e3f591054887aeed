"""
MCP Server setup for the Task Tracker
Uses FastMCP pattern to expose task store operations as tools
"""
from typing import Optional

from mcp.server.fastmcp import FastMCP

from ..services.task_store import TaskStore

# Initialize the MCP server
mcp = FastMCP(name="Task Tracker MCP Server")

_task_store: Optional[TaskStore] = None

__all__ = ["mcp", "register_tools", "set_task_store", "get_task_store", "run_mcp_server"]


def set_task_store(store: Optional[TaskStore]) -> None:
    """Attach the task store the tools operate on."""
    global _task_store
    _task_store = store


def get_task_store() -> TaskStore:
    if _task_store is None:
        raise RuntimeError("MCP task store is not configured; call set_task_store() first")
    return _task_store


def register_tools():
    """
    Import the tool modules so their @mcp.tool() handlers attach to `mcp`.

    The tools resolve the store on each call, so set_task_store() must run
    before the server takes requests.
    """
    # tool modules import `mcp` from this one
    from .tools import (
        create_task,
        list_tasks,
        get_task,
        complete_task,
        update_task,
        delete_task,
    )
    return [
        create_task,
        list_tasks,
        get_task,
        complete_task,
        update_task,
        delete_task,
    ]


def run_mcp_server() -> None:
    """Serve the task tools over stdio (console script: task-tracker-mcp)."""
    from ..bootstrap import create_task_store
    from ..config import get_settings
    from ..utils.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    set_task_store(create_task_store(settings))
    register_tools()
    mcp.run()
