"""
Models module for the Task Tracker
Contains the task record, its input schemas and the reference data models
"""
from .task import Task, TaskStatus, TaskCreate, TaskUpdate, TaskFilter
from .user import User
from .category import Category

__all__ = [
    "Task",
    "TaskStatus",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilter",
    "User",
    "Category",
]
