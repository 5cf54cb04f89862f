from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from .models import Base

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskStore:
    """
    Explicit handle on the task database.

    The handle is inert until open() is called; the application opens it at
    startup and closes it at shutdown. Each unit of work gets its own session
    from session().
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._database_url = database_url
        self._echo = echo
        self._engine: Optional[Engine] = None
        self._sessions: Optional[sessionmaker[Session]] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def dialect(self) -> str:
        return make_url(self._database_url).get_backend_name()

    def open(self) -> None:
        """Create the engine and session factory, and ensure the schema exists."""
        if self._engine is not None:
            return
        connect_args = {}
        if self.dialect == "sqlite":
            self._ensure_sqlite_dir()
            # sessions are opened and used on different worker threads
            connect_args["check_same_thread"] = False
        engine = create_engine(self._database_url, echo=self._echo, connect_args=connect_args)
        Base.metadata.create_all(engine)
        self._engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)
        logger.info("Opened task store (%s)", self.dialect)

    def close(self) -> None:
        """Dispose of the engine. Safe to call on a closed store."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessions = None
        logger.info("Closed task store")

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Yield a session; roll back on error and always close it."""
        if self._sessions is None:
            raise RuntimeError("TaskStore is not open")
        session = self._sessions()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _ensure_sqlite_dir(self) -> None:
        database = make_url(self._database_url).database
        if not database or database == ":memory:":
            return
        os.makedirs(os.path.dirname(database) or ".", exist_ok=True)
