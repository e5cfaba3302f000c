from .todo_repository import FailingTodoRepository, InMemoryTodoRepository, TodoRepository

__all__ = ["FailingTodoRepository", "InMemoryTodoRepository", "TodoRepository"]
