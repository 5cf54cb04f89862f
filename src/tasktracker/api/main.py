from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..logging_setup import setup_logging
from ..settings import Settings, get_settings
from .db import TaskStore
from .errors import register_exception_handlers
from .routers import tasks as tasks_router

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "tasks", "description": "Create, read, update and delete tasks."},
]


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The task store is opened when the application starts and closed when it
    shuts down. A pre-built store may be passed in; otherwise one is built
    from settings.database_url.
    """
    settings = settings or get_settings()
    store = store or TaskStore(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title="Task Tracker",
        description="Backend API service for tracking tasks.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health and the store dialect.
        """
        return {"message": "Healthy", "database": store.dialect}

    app.include_router(tasks_router.router)
    return app


# PUBLIC_INTERFACE
def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Serving task API on %s:%s", settings.api_host, settings.api_port)
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
