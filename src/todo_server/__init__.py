"""
In-memory todo list server.

Exposes the application factory and the default FastAPI app instance so the
server can be started with `uvicorn todo_server:app`.
"""

from .main import app, create_app  # noqa: F401
