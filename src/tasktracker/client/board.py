"""Board state for the task client.

The board keeps the last fetched task list as its only source of truth and
re-fetches after every mutation. Everything shown to the user (the filtered
list, counts, progress, suggested next task) is derived from that snapshot
each time view() is called.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import httpx

from .http import Task, TaskApiClient

logger = logging.getLogger(__name__)

FILTERS: Tuple[str, ...] = ("All", "Active", "Completed")
FALLBACK_NEXT_TASK = "your pending task"

# response bodies that do not match the task shape
_PARSE_ERRORS = (ValueError, KeyError, TypeError)


def progress_percent(completed: int, total: int) -> int:
    """Completion percentage rounded half up; 0 for an empty list."""
    if total <= 0:
        return 0
    return int(math.floor(completed / total * 100 + 0.5))


def filter_tasks(tasks: Sequence[Task], bucket: str) -> List[Task]:
    if bucket == "Active":
        return [t for t in tasks if not t.completed]
    if bucket == "Completed":
        return [t for t in tasks if t.completed]
    return list(tasks)


@dataclass(frozen=True)
class BoardView:
    """Derived view of the board; never stored, rebuilt on every render."""

    filter: str
    visible: List[Task]
    total: int
    completed_count: int
    active_count: int
    progress: int
    next_task: str

    @classmethod
    def build(cls, tasks: Sequence[Task], bucket: str) -> "BoardView":
        completed_count = sum(1 for t in tasks if t.completed)
        next_task = next((t.title for t in tasks if not t.completed), "") or FALLBACK_NEXT_TASK
        return cls(
            filter=bucket,
            visible=filter_tasks(tasks, bucket),
            total=len(tasks),
            completed_count=completed_count,
            active_count=len(tasks) - completed_count,
            progress=progress_percent(completed_count, len(tasks)),
            next_task=next_task,
        )

    @property
    def summary(self) -> str:
        return (
            f"Based on your tasks, focus on {self.next_task} first. "
            f"You're {self.progress}% done. Keep it up!"
        )


# PUBLIC_INTERFACE
class TaskBoard:
    """
    Stateful single-view board.

    Attributes:
        tasks: last fetched snapshot, in server order
        title: pending input for a new task
        message: status line shown to the user
        filter: one of FILTERS
    """

    def __init__(self, api: TaskApiClient) -> None:
        self.api = api
        self.tasks: List[Task] = []
        self.title = ""
        self.message = ""
        self.filter = "All"

    def fetch(self) -> bool:
        """Replace the snapshot with the server's list. Keeps the old list on failure."""
        try:
            self.tasks = self.api.list_tasks()
        except (httpx.HTTPError, *_PARSE_ERRORS) as exc:
            logger.error("Fetch tasks error: %s", exc)
            self.message = "Could not load tasks"
            return False
        return True

    def add(self) -> bool:
        """
        Create a task from the pending title.

        Blank input is ignored without a request. On failure the title is
        kept so the user can retry by hand.
        """
        if not self.title.strip():
            return False
        try:
            self.api.create_task(self.title)
        except httpx.HTTPStatusError as exc:
            logger.error("Save failed: %s %s", exc.response.status_code, exc.response.text)
            self.message = f"Could not save task ({exc.response.status_code})"
            return False
        except (httpx.HTTPError, *_PARSE_ERRORS) as exc:
            logger.error("Add task error: %s", exc)
            self.message = "Could not save task (network)"
            return False
        self.message = "Task saved. Keep going!"
        self.title = ""
        self.fetch()
        return True

    def toggle(self, task: Task) -> bool:
        """Flip one task's completed flag, then re-fetch."""
        try:
            self.api.set_completed(task.id, not task.completed)
        except (httpx.HTTPError, *_PARSE_ERRORS) as exc:
            logger.error("Toggle task %s error: %s", task.id, exc)
            self.message = "Could not update task"
            return False
        self.fetch()
        return True

    def delete(self, task_id: int) -> bool:
        """Remove one task, then re-fetch."""
        try:
            self.api.delete_task(task_id)
        except (httpx.HTTPError, *_PARSE_ERRORS) as exc:
            logger.error("Delete task %s error: %s", task_id, exc)
            self.message = "Could not delete task"
            return False
        self.fetch()
        return True

    def set_filter(self, name: str) -> None:
        for bucket in FILTERS:
            if bucket.lower() == name.strip().lower():
                self.filter = bucket
                return
        raise ValueError(f"unknown filter {name!r}; expected one of {', '.join(FILTERS)}")

    def find(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise KeyError(task_id)

    def view(self) -> BoardView:
        return BoardView.build(self.tasks, self.filter)
