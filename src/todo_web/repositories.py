from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from threading import RLock
from typing import List, Optional

from .models import TodoEntity
from .settings import Settings, get_settings


def sort_newest_first(items: List[TodoEntity]) -> List[TodoEntity]:
    """Order by created_at descending; same-tick records fall back to id descending."""
    return sorted(items, key=lambda t: (t["created_at"], t["id"]), reverse=True)


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract store contract for todo storage backends."""

    @abstractmethod
    def create(self, title: str) -> TodoEntity:
        """
        Persist a new TodoEntity with a fresh id, completed=False and
        created_at set to the current time. Raise PersistenceError on failure.
        """

    @abstractmethod
    def list(self) -> List[TodoEntity]:
        """Return all TodoEntities, most recently created first."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository suitable for testing and default runtime.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, TodoEntity] = {}
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def create(self, title: str) -> TodoEntity:
        entity: TodoEntity = {
            "id": self._allocate_id(),
            "title": title,
            "completed": False,
            "created_at": self._now(),
        }
        with self._lock:
            self._items[entity["id"]] = entity
        return entity.copy()

    def list(self) -> List[TodoEntity]:
        with self._lock:
            items = sort_newest_first(list(self._items.values()))
            # Return copies to avoid external mutation
            return [t.copy() for t in items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


# PUBLIC_INTERFACE
def get_repository(settings: Optional[Settings] = None) -> Repository:
    """
    Factory to return the configured repository based on settings.
    - memory: InMemoryRepository
    - sqlite: SQLiteRepository backed by the standard library sqlite3 module
    """
    settings = settings or get_settings()
    if settings.persistence_backend == "sqlite":
        from .db import SQLiteRepository

        return SQLiteRepository(settings.sqlite_db_path)
    return InMemoryRepository()
