"""
Reference data service for the Task Tracker
Loads the read-only user and category lists shown alongside tasks
"""
import json
import logging
from pathlib import Path
from typing import List, Optional, Type, TypeVar, Union

from pydantic import ValidationError
from sqlmodel import SQLModel

from ..models.category import Category
from ..models.user import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class ReferenceDataError(Exception):
    """Raised when a reference data file cannot be parsed"""
    pass


def _load_list(path: Path, model: Type[ModelT]) -> List[ModelT]:
    if not path.exists():
        logger.warning("Reference data file %s not found; using an empty list", path)
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("expected a JSON array")
        return [model.model_validate(item) for item in data]
    except (OSError, ValueError, ValidationError) as e:
        raise ReferenceDataError(f"Invalid reference data in {path}: {e}") from e


class ReferenceService:
    """Users and categories, loaded once at startup and never modified"""

    def __init__(self, users: List[User], categories: List[Category]):
        self._users = list(users)
        self._categories = list(categories)

    @classmethod
    def from_files(
        cls,
        users_file: Union[str, Path],
        categories_file: Union[str, Path],
    ) -> "ReferenceService":
        users = _load_list(Path(users_file), User)
        categories = _load_list(Path(categories_file), Category)
        logger.info("Loaded %d users and %d categories", len(users), len(categories))
        return cls(users, categories)

    def list_users(self) -> List[User]:
        return list(self._users)

    def list_categories(self) -> List[Category]:
        return list(self._categories)

    def get_user(self, user_id: Optional[str]) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def get_category(self, category_id: Optional[str]) -> Optional[Category]:
        return next((c for c in self._categories if c.id == category_id), None)


__all__ = ["ReferenceService", "ReferenceDataError"]
