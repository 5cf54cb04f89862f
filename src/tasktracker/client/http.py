from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Task:
    """A task as seen by the client."""

    id: int
    title: str
    completed: bool

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Task":
        completed = data["completed"]
        if not isinstance(completed, bool):
            raise TypeError(f"completed must be a boolean, got {completed!r}")
        return cls(id=int(data["id"]), title=str(data["title"]), completed=completed)


# PUBLIC_INTERFACE
class TaskApiClient:
    """
    Thin wrapper over the task REST API.

    Non-success responses raise httpx.HTTPStatusError and transport problems
    raise httpx.TransportError; callers decide how to report them. An
    httpx.Client may be injected (tests pass FastAPI's TestClient).
    """

    def __init__(self, base_url: str = "http://localhost:4000", client: Optional[httpx.Client] = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_tasks(self) -> List[Task]:
        res = self._client.get("/tasks")
        res.raise_for_status()
        data = res.json()
        if not isinstance(data, list):
            logger.warning("Task list response was not a list; treating as empty")
            return []
        return [Task.from_json(item) for item in data]

    def create_task(self, title: str) -> Task:
        res = self._client.post("/tasks", json={"title": title})
        res.raise_for_status()
        return Task.from_json(res.json())

    def set_completed(self, task_id: int, completed: bool) -> Task:
        res = self._client.put(f"/tasks/{task_id}", json={"completed": completed})
        res.raise_for_status()
        return Task.from_json(res.json())

    def delete_task(self, task_id: int) -> Task:
        res = self._client.delete(f"/tasks/{task_id}")
        res.raise_for_status()
        return Task.from_json(res.json())
