"""Error kinds raised by the todo storage layer."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for todo storage failures."""


class TodoValidationError(TodoError):
    """Request input could not be turned into a valid operation."""


class NotFoundError(TodoError):
    """No todo is stored under the requested id."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"todo {todo_id} not found")
        self.todo_id = todo_id


class InternalError(TodoError):
    """Any other storage failure."""
