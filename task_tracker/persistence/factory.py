"""
Sink selection for the Task Tracker
"""
from ..config import Settings
from .base import PersistenceSink
from .json_file import JsonFileSink
from .sql import SqlModelSink


def create_sink(settings: Settings) -> PersistenceSink:
    """Build the backing store configured by settings.storage_backend."""
    if settings.storage_backend == "sqlite":
        return SqlModelSink(settings.tasks_db_path)
    return JsonFileSink(settings.tasks_file)
