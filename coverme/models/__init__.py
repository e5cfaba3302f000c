from .todo import AddRequest, Todo

__all__ = ["AddRequest", "Todo"]
