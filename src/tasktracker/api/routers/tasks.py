from __future__ import annotations

from typing import Generator, List

from fastapi import APIRouter, Depends, Request, status

from ..db import TaskStore
from ..schemas import ErrorOut, TaskCreate, TaskOut, TaskUpdate
from ..services import TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Task not found"}}
_INVALID = {422: {"model": ErrorOut, "description": "Validation error"}}


def get_store(request: Request) -> TaskStore:
    """
    Return the store handle opened by the application lifespan.
    """
    return request.app.state.store


def get_task_service(store: TaskStore = Depends(get_store)) -> Generator[TaskService, None, None]:
    """
    Yield a TaskService bound to a fresh session for the current request.
    """
    with store.session() as session:
        yield TaskService(session)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TaskOut],
    summary="List Tasks",
    description="Return every task. No ordering is guaranteed.",
)
def list_tasks(service: TaskService = Depends(get_task_service)) -> List[TaskOut]:
    """
    List all tasks.
    """
    return service.find_all()


# PUBLIC_INTERFACE
@router.get(
    "/{task_id}",
    response_model=TaskOut,
    summary="Get Task",
    description="Get a single task by ID.",
    responses={200: {"description": "Task found"}, **_NOT_FOUND},
)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)) -> TaskOut:
    return service.find_one(task_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a task. The title is trimmed and must not be empty; completed defaults to false.",
    responses={201: {"description": "Task created"}, **_INVALID},
)
def create_task(payload: TaskCreate, service: TaskService = Depends(get_task_service)) -> TaskOut:
    """
    Create a new task and return it with its assigned id.
    """
    return service.create(payload)


# PUBLIC_INTERFACE
@router.put(
    "/{task_id}",
    response_model=TaskOut,
    summary="Update Task",
    description="Update the supplied fields of a task. Omitted or null fields keep their value.",
    responses={200: {"description": "Task updated"}, **_NOT_FOUND, **_INVALID},
)
def update_task(task_id: int, payload: TaskUpdate, service: TaskService = Depends(get_task_service)) -> TaskOut:
    """
    Partial update of a task.
    """
    return service.update(task_id, payload)


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id}",
    response_model=TaskOut,
    summary="Delete Task",
    description="Delete a task by ID and return the removed task.",
    responses={200: {"description": "Task deleted"}, **_NOT_FOUND},
)
def delete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> TaskOut:
    return service.remove(task_id)
