from __future__ import annotations

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base holding the task store metadata."""


# PUBLIC_INTERFACE
class Task(Base):
    """
    ORM row for a single task.

    Fields:
    - id: Unique integer identifier assigned by the database
    - title: Task title (trimmed and non-empty when created through the service)
    - completed: Boolean completion flag, false on creation unless given
    """

    __tablename__ = "tasks"
    # ids are never handed out twice, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"Task(id={self.id}, title={self.title!r}, completed={self.completed})"
