"""
Page routes for the Task Tracker
Server-rendered task list, task detail and add-task form
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ...models.task import TaskCreate, TaskFilter, TaskStatus
from ...services.reference_service import ReferenceService
from ...services.task_store import TaskStore
from ...utils.errors import PersistenceError, TaskNotFoundException, TaskValidationError
from ..deps import get_reference_service, get_task_store, get_templates


router = APIRouter()


def _form_context(reference: ReferenceService, values: Optional[dict] = None, error: Optional[str] = None) -> dict:
    return {
        "statuses": TaskStatus.values(),
        "users": reference.list_users(),
        "categories": reference.list_categories(),
        "values": values or {},
        "error": error,
    }


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    task_status: Optional[str] = Query(None, alias="status"),
    store: TaskStore = Depends(get_task_store),
    reference: ReferenceService = Depends(get_reference_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Render the task list, optionally filtered by ?status=."""
    error = None
    try:
        tasks = await run_in_threadpool(store.list_tasks, TaskFilter(status=task_status))
    except TaskValidationError as e:
        error = e.reason
        tasks = await run_in_threadpool(store.list_tasks)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "tasks": tasks,
            "statuses": TaskStatus.values(),
            "selected_status": task_status,
            "error": error,
            "reference": reference,
        },
        status_code=status.HTTP_400_BAD_REQUEST if error else status.HTTP_200_OK,
    )


@router.get("/tasks/new", response_class=HTMLResponse)
async def add_task_form(
    request: Request,
    reference: ReferenceService = Depends(get_reference_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Render the add-task form."""
    return templates.TemplateResponse(request, "add_task.html", _form_context(reference))


@router.post("/tasks/new", response_class=HTMLResponse)
async def add_task_submit(
    request: Request,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    task_status: Optional[str] = Form(None, alias="status"),
    due_date: Optional[str] = Form(None, alias="dueDate"),
    category: Optional[str] = Form(None),
    user: Optional[str] = Form(None),
    store: TaskStore = Depends(get_task_store),
    reference: ReferenceService = Depends(get_reference_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Create a task from the form and go back to the list."""
    task_data = TaskCreate(
        title=title,
        description=description,
        status=task_status,
        due_date=due_date,
        category=category,
        user=user,
    )
    try:
        await run_in_threadpool(store.create_task, task_data)
    except TaskValidationError as e:
        return templates.TemplateResponse(
            request,
            "add_task.html",
            _form_context(reference, task_data.model_dump(by_alias=True), e.reason),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except PersistenceError:
        return templates.TemplateResponse(
            request,
            "add_task.html",
            _form_context(
                reference,
                task_data.model_dump(by_alias=True),
                "The task was created but could not be saved.",
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/tasks/{task_id}", response_class=HTMLResponse)
async def task_detail(
    task_id: str,
    request: Request,
    store: TaskStore = Depends(get_task_store),
    reference: ReferenceService = Depends(get_reference_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Render details of a single task."""
    try:
        task = await run_in_threadpool(store.get_task_by_id, task_id)
    except TaskNotFoundException as e:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"message": str(e)},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return templates.TemplateResponse(
        request,
        "task_detail.html",
        {
            "task": task,
            "user": reference.get_user(task.user),
            "category": reference.get_category(task.category),
        },
    )
