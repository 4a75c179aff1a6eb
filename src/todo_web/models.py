from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a persisted Todo item.

    Fields:
    - id: Unique integer identifier assigned by the store
    - title: Non-empty, trimmed title
    - completed: Completion flag. Always False at creation; no operation sets it yet
    - created_at: Creation timestamp, the listing sort key
    """

    id: int
    title: str
    completed: bool
    created_at: datetime
