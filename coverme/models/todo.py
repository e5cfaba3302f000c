"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Todo(BaseModel):
    """Stored todo item. Field order is the serialization order."""

    id: int = Field(..., ge=0)
    title: str
    content: str = ""
    finished: bool = False

    def mark_finished(self) -> None:
        self.finished = True

    def mark_unfinished(self) -> None:
        self.finished = False


class AddRequest(BaseModel):
    """Body of a todo creation request."""

    title: str = Field(..., min_length=1)
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def null_content_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value
