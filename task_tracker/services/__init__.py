"""
Services module for the Task Tracker
Contains the task store and the business logic around it
"""
from .task_store import TaskStore
from .ids import IdGenerator, UuidIdGenerator, SequentialIdGenerator, create_id_generator
from .reference_service import ReferenceService, ReferenceDataError
from .validation import validate_task_fields

__all__ = [
    "TaskStore",
    "IdGenerator",
    "UuidIdGenerator",
    "SequentialIdGenerator",
    "create_id_generator",
    "ReferenceService",
    "ReferenceDataError",
    "validate_task_fields",
]
