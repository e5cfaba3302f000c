"""FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from coverme import __version__
from coverme.api.responses import bad_request
from coverme.api.routes import router as api_router
from coverme.logging_utils import configure_logging, reset_request_id, set_request_id
from coverme.repositories.todo_repository import InMemoryTodoRepository, TodoRepository
from coverme.settings import Settings, get_settings

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = "Invalid input"
    errors = exc.errors()
    if errors:
        message = errors[0].get("msg", message)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return bad_request(message)


async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request_token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(request_token)
    response.headers["X-Request-ID"] = request_id
    return response


def create_app(
    repository: Optional[TodoRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the todo API around ``repository`` (a fresh in-memory store by default)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="A minimal todo management API",
        version=__version__,
    )
    app.state.repository = repository if repository is not None else InMemoryTodoRepository()
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.middleware("http")(request_id_middleware)
    app.include_router(api_router)
    logger.info("Todo API created with %s", type(app.state.repository).__name__)
    return app
