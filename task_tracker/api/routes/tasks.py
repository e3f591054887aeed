"""
Task API routes for the Task Tracker
JSON endpoints for creating, listing, reading, updating and deleting tasks
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ValidationError

from ...models.task import Task, TaskCreate, TaskFilter, TaskUpdate
from ...services.task_store import TaskStore
from ...utils.errors import PersistenceError, TaskNotFoundException, TaskValidationError
from ..deps import get_task_store, read_request_fields


router = APIRouter()


class DeleteTaskResponse(BaseModel):
    """Response from deleting a task"""
    message: str
    id: str


def persistence_failed(e: PersistenceError) -> HTTPException:
    """The change was applied in memory but could not be saved."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error": "persistence_error",
            "message": "The change was applied but could not be saved",
            "task_id": e.task.id if e.task else None,
        },
    )


async def _parse_body(request: Request, schema):
    try:
        fields = await read_request_fields(request)
        return schema.model_validate(fields)
    except (ValueError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Malformed request body: {e}",
        )


@router.get("/tasks", response_model=List[Task])
async def list_tasks(
    task_status: Optional[str] = Query(None, alias="status"),
    due_date: Optional[str] = Query(None, alias="dueDate"),
    store: TaskStore = Depends(get_task_store),
):
    """
    Get all tasks, optionally filtered by status and/or due date.

    Args:
        task_status: Only tasks with this status (Pending or Completed)
        due_date: Only tasks due on exactly this date
        store: Task store

    Returns:
        Matching tasks in creation order
    """
    try:
        return await run_in_threadpool(
            store.list_tasks, TaskFilter(status=task_status, due_date=due_date)
        )
    except TaskValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.reason)


@router.get("/tasks/{task_id}", response_model=Task)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a specific task by ID."""
    try:
        return await run_in_threadpool(store.get_task_by_id, task_id)
    except TaskNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(request: Request, store: TaskStore = Depends(get_task_store)):
    """
    Create a new task from a form or JSON body.

    Body fields: title, description, status, dueDate, category, user.

    Raises:
        HTTPException 400: Validation failed
        HTTPException 500: Task created but not saved
    """
    task_data = await _parse_body(request, TaskCreate)
    try:
        return await run_in_threadpool(store.create_task, task_data)
    except TaskValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.reason)
    except PersistenceError as e:
        raise persistence_failed(e)


@router.put("/tasks/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    request: Request,
    store: TaskStore = Depends(get_task_store),
):
    """
    Update a task. Only the fields present and non-empty in the body change.

    Raises:
        HTTPException 400: The resulting task would be invalid
        HTTPException 404: Task not found
        HTTPException 500: Task updated but not saved
    """
    task_data = await _parse_body(request, TaskUpdate)
    try:
        return await run_in_threadpool(store.update_task, task_id, task_data)
    except TaskNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except TaskValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.reason)
    except PersistenceError as e:
        raise persistence_failed(e)


@router.delete("/tasks/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Permanently delete a task."""
    try:
        await run_in_threadpool(store.delete_task, task_id)
    except TaskNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        raise persistence_failed(e)
    return DeleteTaskResponse(message="Task deleted", id=task_id)
