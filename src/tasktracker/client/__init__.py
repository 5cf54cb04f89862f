"""
Task board client: HTTP access to the task API, board state with derived
statistics, and a terminal front-end.
"""

from .board import BoardView, TaskBoard
from .http import Task, TaskApiClient

__all__ = ["BoardView", "Task", "TaskApiClient", "TaskBoard"]
