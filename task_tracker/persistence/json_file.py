"""
JSON file sink for the Task Tracker
Rewrites the whole collection as a pretty-printed JSON array on every save
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence, Union

from pydantic import ValidationError

from ..models.task import Task
from ..utils.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileSink:
    """
    Flat-file backing store.

    The file holds a JSON array of task records with camelCase keys, in
    collection order. Saves go to a temporary file in the same directory
    which is fsynced and then renamed over the target, so a crash mid-write
    leaves either the old file or the new one.

    The sequential id mark lives in a small sidecar (`<name>.meta`), written
    before the task file. It only ever grows, so a crash between the two
    writes can leave it ahead of the tasks but never behind.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.meta_path = self.path.with_name(f"{self.path.name}.meta")

    def load(self) -> list[Task]:
        if not self.path.exists():
            logger.info("No task file at %s; starting empty", self.path)
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            raise PersistenceError(e)

        if not isinstance(data, list):
            raise PersistenceError(ValueError(f"{self.path} does not contain a JSON array"))

        try:
            tasks = [Task.model_validate(item) for item in data]
        except ValidationError as e:
            raise PersistenceError(e)

        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def load_last_id(self) -> int:
        if not self.meta_path.exists():
            return 0
        try:
            data = json.loads(self.meta_path.read_text(encoding="utf-8"))
            last_id = data["lastId"]
        except (OSError, ValueError, TypeError, KeyError) as e:
            raise PersistenceError(e)
        if not isinstance(last_id, int) or isinstance(last_id, bool) or last_id < 0:
            raise PersistenceError(ValueError(f"{self.meta_path} has an invalid lastId"))
        return last_id

    def save(self, tasks: Sequence[Task], last_id: int = 0) -> None:
        if last_id > 0:
            self._write_atomic(self.meta_path, json.dumps({"lastId": last_id}))

        payload = json.dumps([task.to_record() for task in tasks], ensure_ascii=False, indent=4)
        self._write_atomic(self.path, payload)

        logger.debug("Saved %d tasks to %s", len(tasks), self.path)

    def _write_atomic(self, path: Path, payload: str) -> None:
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(e)
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)


__all__ = ["JsonFileSink"]
