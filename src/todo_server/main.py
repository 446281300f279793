from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging_setup import setup_logging
from .routers import todos as todos_router
from .settings import Settings, get_settings
from .store import TodoStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "todos",
        "description": "CRUD operations for Todo items kept in process memory.",
    },
]


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """
    Render HTTP errors as plain text.

    Unknown routes and unsupported methods on known routes both answer
    404 "Not Found".
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(todos_router.NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a FastAPI application with its own empty TodoStore.

    Args:
        settings: Explicit settings; loaded from the environment when omitted.

    Returns:
        The configured FastAPI app. Its store is available as `app.state.store`.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo Server",
        description="In-memory todo list service with list, get, create, update and delete endpoints.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = TodoStore(id_policy=settings.id_policy)

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(todos_router.router)
    logger.debug("Created app id_policy=%s empty_list_not_found=%s", settings.id_policy, settings.empty_list_not_found)
    return app


app = create_app()


# PUBLIC_INTERFACE
def run() -> None:
    """Start the server with uvicorn on the configured HOST and PORT."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting todo server on %s:%s", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
