"""Todo repository - data access layer."""

from __future__ import annotations

import itertools
import threading
from typing import List, Protocol, runtime_checkable

from coverme.errors import InternalError, NotFoundError, TodoValidationError
from coverme.models.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Operations the HTTP handlers need from a todo store.

    Implementations raise ``TodoError`` subclasses on failure.
    """

    def add_todo(self, title: str, content: str) -> Todo: ...

    def get_todo(self, todo_id: int) -> Todo: ...

    def get_all(self) -> List[Todo]: ...

    def finish_todo(self, todo_id: int) -> None: ...


class InMemoryTodoRepository:
    """Insertion-ordered in-memory todo storage."""

    def __init__(self) -> None:
        self._todos: List[Todo] = []
        self._ids = itertools.count()
        self._lock = threading.Lock()

    def add_todo(self, title: str, content: str = "") -> Todo:
        """Store a new unfinished todo under the next id."""
        if not title:
            raise TodoValidationError("title must not be empty")
        with self._lock:
            todo = Todo(id=next(self._ids), title=title, content=content)
            self._todos.append(todo)
        return todo

    def get_todo(self, todo_id: int) -> Todo:
        """Get todo by ID."""
        with self._lock:
            return self._find(todo_id)

    def get_all(self) -> List[Todo]:
        """Get all todos in creation order."""
        with self._lock:
            return list(self._todos)

    def finish_todo(self, todo_id: int) -> None:
        """Mark a todo as finished."""
        with self._lock:
            self._find(todo_id).mark_finished()

    def clear(self) -> None:
        """Clear all stored todos (testing helper). Ids keep counting."""
        with self._lock:
            self._todos.clear()

    def _find(self, todo_id: int) -> Todo:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise NotFoundError(todo_id)


class FailingTodoRepository:
    """Repository whose every operation fails."""

    def add_todo(self, title: str, content: str = "") -> Todo:
        raise InternalError("storage unavailable")

    def get_todo(self, todo_id: int) -> Todo:
        raise NotFoundError(todo_id)

    def get_all(self) -> List[Todo]:
        raise InternalError("storage unavailable")

    def finish_todo(self, todo_id: int) -> None:
        raise NotFoundError(todo_id)
