from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class TaskError(Exception):
    """Base class for task service failures."""


# PUBLIC_INTERFACE
class TaskValidationError(TaskError):
    """Raised when task input breaks a content rule (e.g. blank title)."""


# PUBLIC_INTERFACE
class TaskNotFoundError(TaskError):
    """Raised when an operation targets a task id that does not exist."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


def _error_response(status_code: int, error: str, message: str, detail=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "detail": detail},
    )


# PUBLIC_INTERFACE
def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the JSON error handlers.

    Response format for every failure:
        {
            "error": "ValidationError" | "NotFound" | "StoreError",
            "message": "...",
            "detail": ... (pydantic error list, offending id, or null)
        }
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(
            422,
            "ValidationError",
            "Request validation failed",
            jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(TaskValidationError)
    async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
        return _error_response(422, "ValidationError", str(exc))

    @app.exception_handler(TaskNotFoundError)
    async def not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, "NotFound", "Task not found", {"id": exc.task_id})

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "StoreError", "Task store unavailable")
