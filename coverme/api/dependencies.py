"""API dependencies for todo management."""

from fastapi import Request

from coverme.repositories.todo_repository import TodoRepository


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency returning the repository the application was built with."""
    return request.app.state.repository
