"""API routes for todo management."""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from coverme.api.dependencies import get_todo_repository
from coverme.api.responses import bad_request, respond_json, server_error
from coverme.errors import TodoError, TodoValidationError
from coverme.models.todo import AddRequest
from coverme.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

STATUS_MESSAGE = "API is up and working!"
INVALID_ID_MESSAGE = "Todo id must be a non-negative integer."
MAX_TODO_ID = 2**63 - 1

_ID_PATTERN = re.compile(r"\+?[0-9]+")

router = APIRouter()


def parse_todo_id(raw: str) -> Optional[int]:
    """Return the id in a path segment, or None unless it is a decimal (optional "+") that fits in int64."""
    if not _ID_PATTERN.fullmatch(raw):
        return None
    todo_id = int(raw)
    if todo_id > MAX_TODO_ID:
        return None
    return todo_id


@router.get("/todo")
def list_todos(repository: TodoRepository = Depends(get_todo_repository)) -> Response:
    """Get all todo items in creation order."""
    try:
        todos = repository.get_all()
    except TodoError as exc:
        logger.warning("Listing todos failed: %s", exc)
        return server_error()
    return respond_json(status.HTTP_200_OK, todos)


@router.get("/status")
def api_status() -> Response:
    """Health check."""
    return respond_json(status.HTTP_200_OK, STATUS_MESSAGE)


@router.post("/todo/create")
def add_todo(
    payload: AddRequest,
    repository: TodoRepository = Depends(get_todo_repository),
) -> Response:
    """Create a new todo item."""
    try:
        todo = repository.add_todo(payload.title, payload.content)
    except TodoValidationError as exc:
        return bad_request(str(exc))
    except TodoError as exc:
        logger.warning("Creating todo failed: %s", exc)
        return server_error()
    logger.info("Created todo id=%s", todo.id)
    return respond_json(status.HTTP_201_CREATED, todo)


@router.get("/todo/{raw_id}")
def get_todo(
    raw_id: str,
    repository: TodoRepository = Depends(get_todo_repository),
) -> Response:
    """Get a specific todo item by ID."""
    todo_id = parse_todo_id(raw_id)
    if todo_id is None:
        return bad_request(INVALID_ID_MESSAGE)
    try:
        todo = repository.get_todo(todo_id)
    except TodoError as exc:
        # Lookup misses answer 500, not 404.
        logger.warning("Fetching todo id=%s failed: %s", todo_id, exc)
        return server_error()
    return respond_json(status.HTTP_200_OK, todo)


@router.post("/todo/{raw_id}/finish")
def finish_todo(
    raw_id: str,
    repository: TodoRepository = Depends(get_todo_repository),
) -> Response:
    """Mark a todo item as finished."""
    todo_id = parse_todo_id(raw_id)
    if todo_id is None:
        return bad_request(INVALID_ID_MESSAGE)
    try:
        repository.finish_todo(todo_id)
    except TodoError as exc:
        logger.warning("Finishing todo id=%s failed: %s", todo_id, exc)
        return server_error()
    logger.info("Finished todo id=%s", todo_id)
    return Response(status_code=status.HTTP_200_OK)
