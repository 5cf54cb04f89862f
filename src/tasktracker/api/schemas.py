from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    Only the shape is checked here; the non-empty title rule is applied by
    the service so that it holds for every caller.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "completed": False,
            }
        }
    )

    title: str = Field(..., description="Short title for the task")
    completed: Optional[bool] = Field(default=None, description="Completion status flag, false when omitted")


# PUBLIC_INTERFACE
class TaskUpdate(BaseModel):
    """
    Schema for updating an existing task.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Replacement title, stored as given")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")

    def changes(self) -> dict:
        """Return the fields the caller supplied with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Schema returned by the API for a task.
    """

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "completed": False,
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the task")
    title: str = Field(..., description="Short title for the task")
    completed: bool = Field(..., description="Completion status flag")


class ErrorOut(BaseModel):
    """Error envelope shared by every failed response."""

    error: str = Field(..., description="Error kind, e.g. ValidationError or NotFound")
    message: str = Field(..., description="Human readable summary")
    detail: Optional[Any] = Field(default=None, description="Extra error information")
