"""
Task tracker: a FastAPI task service and a terminal board client.

- tasktracker.api: REST API over a SQLAlchemy-backed task store
- tasktracker.client: HTTP client, board view-model and terminal front-end
"""

__version__ = "0.1.0"
