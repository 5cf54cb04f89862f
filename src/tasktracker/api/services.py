from __future__ import annotations

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .errors import TaskNotFoundError, TaskValidationError
from .models import Task
from .schemas import TaskCreate, TaskOut, TaskUpdate

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskService:
    """
    Task operations over one store session.

    Each mutating call is its own unit of work and commits before returning.
    Results are returned as TaskOut snapshots so they stay valid after the
    session closes.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> List[TaskOut]:
        """Return every task in the order the store yields them."""
        rows = self._session.scalars(select(Task)).all()
        return [TaskOut.model_validate(row) for row in rows]

    def find_one(self, task_id: int) -> TaskOut:
        """Return a task by id or raise TaskNotFoundError."""
        return TaskOut.model_validate(self._get(task_id))

    def create(self, data: TaskCreate) -> TaskOut:
        """
        Insert a task.

        The title is trimmed and must not be empty; completed defaults to
        false when omitted.
        """
        title = (data.title or "").strip()
        if not title:
            raise TaskValidationError("title is required")

        task = Task(title=title, completed=data.completed if data.completed is not None else False)
        self._session.add(task)
        self._session.commit()
        logger.info("Created task %s", task.id)
        return TaskOut.model_validate(task)

    def update(self, task_id: int, data: TaskUpdate) -> TaskOut:
        """
        Apply the supplied fields to an existing task.

        The title is stored as given; it is not trimmed or re-validated.
        """
        task = self._get(task_id)
        changes = data.changes()
        for field, value in changes.items():
            setattr(task, field, value)
        self._session.commit()
        logger.info("Updated task %s (%s)", task_id, ", ".join(sorted(changes)) or "no changes")
        return TaskOut.model_validate(task)

    def remove(self, task_id: int) -> TaskOut:
        """Delete a task and return it as it was before removal."""
        task = self._get(task_id)
        removed = TaskOut.model_validate(task)
        self._session.delete(task)
        self._session.commit()
        logger.info("Deleted task %s", task_id)
        return removed

    def _get(self, task_id: int) -> Task:
        task = self._session.get(Task, task_id)
        if task is None:
            logger.debug("Task %s not found", task_id)
            raise TaskNotFoundError(task_id)
        return task
