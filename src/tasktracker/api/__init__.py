"""
Task tracker REST API.

Use create_app() to build the FastAPI application; the task store it owns is
opened and closed by the application lifespan.
"""

from .main import create_app

__all__ = ["create_app"]
