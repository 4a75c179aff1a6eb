from __future__ import annotations

from fastapi import Request

from .cache import ViewCache
from .services import TodoService


# PUBLIC_INTERFACE
def get_service(request: Request) -> TodoService:
    """Return the TodoService the app was constructed with."""
    return request.app.state.todo_service


# PUBLIC_INTERFACE
def get_view_cache(request: Request) -> ViewCache:
    """Return the app's listing view cache."""
    return request.app.state.view_cache
