"""Todo model tests."""

import pytest
from pydantic import ValidationError

from coverme.models.todo import AddRequest, Todo


def test_finish_unfinish() -> None:
    todo = Todo(id=1, title="Test Todo 1", content="Some content")
    todo.mark_finished()
    assert todo.finished is True
    todo.mark_finished()
    assert todo.finished is True
    todo.mark_unfinished()
    assert todo.finished is False


def test_todo_serializes_all_fields_in_order() -> None:
    todo = Todo(id=0, title="lol")
    assert list(todo.model_dump()) == ["id", "title", "content", "finished"]
    assert todo.model_dump_json() == '{"id":0,"title":"lol","content":"","finished":false}'


def test_todo_rejects_negative_id() -> None:
    with pytest.raises(ValidationError):
        Todo(id=-1, title="lol")


def test_add_request_requires_title() -> None:
    with pytest.raises(ValidationError):
        AddRequest(title="")
    with pytest.raises(ValidationError):
        AddRequest.model_validate({"content": "no title"})


def test_add_request_ignores_unknown_fields() -> None:
    request = AddRequest.model_validate({"id": 7, "title": "lol", "content": "kek", "finished": True})
    assert request.model_dump() == {"title": "lol", "content": "kek"}


def test_add_request_null_content_is_empty() -> None:
    request = AddRequest.model_validate({"title": "lol", "content": None})
    assert request.content == ""
