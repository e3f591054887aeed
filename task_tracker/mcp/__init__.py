"""
MCP (Model Context Protocol) module for the Task Tracker
Exposes task operations as MCP tools
"""
from .server import mcp, register_tools, set_task_store, get_task_store, run_mcp_server

__all__ = [
    "mcp",
    "register_tools",
    "set_task_store",
    "get_task_store",
    "run_mcp_server",
]
