"""
Persistence module for the Task Tracker
Backing stores that hold the full task collection across restarts
"""
from .base import PersistenceSink
from .json_file import JsonFileSink
from .sql import SqlModelSink, TaskRow
from .factory import create_sink

__all__ = [
    "PersistenceSink",
    "JsonFileSink",
    "SqlModelSink",
    "TaskRow",
    "create_sink",
]
