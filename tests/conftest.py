from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tasktracker.api.db import TaskStore
from tasktracker.api.main import create_app
from tasktracker.settings import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file per test."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'tasks.db'}",
        cors_allow_origins=["*"],
        api_host="127.0.0.1",
        api_port=4000,
        api_url="http://testserver",
        log_level="INFO",
        sql_echo=False,
    )


@pytest.fixture()
def client(settings: Settings):
    # entering the context runs the lifespan, which opens the store
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def store(settings: Settings):
    s = TaskStore(settings.database_url)
    s.open()
    yield s
    s.close()
