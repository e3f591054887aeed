"""
Startup wiring for the Task Tracker
Builds the task store and reference data from settings
"""
import logging

from .config import Settings
from .persistence import create_sink
from .services.ids import create_id_generator
from .services.reference_service import ReferenceService
from .services.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(settings: Settings, load: bool = True) -> TaskStore:
    """
    Build the task store for the configured backend and id scheme.

    Raises:
        PersistenceError: If load is True and the backing store cannot be read
    """
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    store = TaskStore(
        create_sink(settings),
        create_id_generator(settings.id_scheme),
        save_retries=settings.save_retries,
        retry_delay_seconds=settings.save_retry_delay_seconds,
    )
    logger.info(
        "Task store backend=%s id_scheme=%s", settings.storage_backend, settings.id_scheme
    )
    if load:
        store.load()
    return store


def create_reference_service(settings: Settings) -> ReferenceService:
    return ReferenceService.from_files(settings.users_file, settings.categories_file)


__all__ = ["create_task_store", "create_reference_service"]
