"""
Task field validation for the Task Tracker
Pure checks shared by the create, update and list paths of the task store
"""
from datetime import date, datetime
from typing import Optional

from ..models.task import TaskStatus

TITLE_MIN_LENGTH = 3

TITLE_INVALID = "title invalid."
DUE_DATE_INVALID = "due date invalid."
STATUS_INVALID = "status invalid."


def is_valid_title(title: Optional[str]) -> bool:
    return bool(title) and len(title.strip()) >= TITLE_MIN_LENGTH


def is_valid_due_date(due_date: Optional[str]) -> bool:
    """Accept ISO 8601 calendar dates ("2024-12-01") and datetimes."""
    if not due_date or not due_date.strip():
        return False
    value = due_date.strip()
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        pass
    try:
        datetime.fromisoformat(value)
        return True
    except ValueError:
        return False


def is_valid_status(status: Optional[str]) -> bool:
    """An absent status is valid (it defaults to Pending on create)."""
    return status is None or status in TaskStatus.values()


def validate_task_fields(
    title: Optional[str],
    due_date: Optional[str],
    status: Optional[str] = None,
) -> Optional[str]:
    """
    Check candidate task fields.

    Args:
        title: Candidate title
        due_date: Candidate due date text
        status: Candidate status, or None when not supplied

    Returns:
        None when accepted, otherwise the rejection reason of the first failing check
    """
    if not is_valid_title(title):
        return TITLE_INVALID
    if not is_valid_due_date(due_date):
        return DUE_DATE_INVALID
    if not is_valid_status(status):
        return STATUS_INVALID
    return None


__all__ = [
    "TITLE_MIN_LENGTH",
    "TITLE_INVALID",
    "DUE_DATE_INVALID",
    "STATUS_INVALID",
    "is_valid_title",
    "is_valid_due_date",
    "is_valid_status",
    "validate_task_fields",
]
