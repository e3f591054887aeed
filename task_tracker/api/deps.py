"""
Request dependencies for the Task Tracker API
"""
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..services.reference_service import ReferenceService
from ..services.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """The application's task store, created at startup."""
    return request.app.state.task_store


def get_reference_service(request: Request) -> ReferenceService:
    return request.app.state.reference_service


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


async def read_request_fields(request: Request) -> Dict[str, Optional[Any]]:
    """
    Parse a request body into a flat dict of fields.

    JSON bodies must be objects; anything else is read as a form
    (urlencoded or multipart). An empty body yields an empty dict.
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        body = await request.body()
        if not body:
            return {}
        data = await request.json()
        if not isinstance(data, dict):
            raise ValueError("JSON body must be an object")
        return data

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
