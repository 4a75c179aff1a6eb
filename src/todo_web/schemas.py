from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for submitting a new Todo item.

    The title is accepted as-is; blank titles are silently ignored by the
    service rather than rejected here.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Buy milk"}})

    title: str = Field(..., description="Title for the new todo item")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "completed": False,
                "created_at": "2025-01-25T10:15:30.123456",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Title of the todo item")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")


class TodoList(BaseModel):
    """All todo items, most recently created first."""

    items: List[TodoOut] = Field(..., description="List of Todo items")


# PUBLIC_INTERFACE
class MutationResult(BaseModel):
    """
    Outcome of a submission.

    - created=True, todo set: a record was persisted
    - created=False, error=None: blank input, nothing happened
    - created=False, error set: the store failed, nothing was persisted
    """

    created: bool = Field(default=False, description="Whether a todo was persisted")
    todo: Optional[TodoOut] = Field(default=None, description="The created todo, if any")
    error: Optional[str] = Field(default=None, description="Recoverable error message")
