"""
MCP Tools module for the Task Tracker
Contains all MCP tool definitions for task operations
"""
from .create_task import create_task
from .list_tasks import list_tasks
from .get_task import get_task
from .complete_task import complete_task
from .update_task import update_task
from .delete_task import delete_task

__all__ = [
    "create_task",
    "list_tasks",
    "get_task",
    "complete_task",
    "update_task",
    "delete_task",
]
