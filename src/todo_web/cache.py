from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class ViewCache:
    """
    Thread-safe per-path cache of computed view data.

    A path's entry is recomputed on the next read after ``invalidate(path)``
    has been called. ``invalidate`` matches the ``on_stale`` callback signature
    expected by TodoService, so the app can wire one straight into the other.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._entries: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}

    def get_or_compute(self, path: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if path in self._entries:
                return self._entries[path]
            generation = self._generations.setdefault(path, 0)
        value = compute()
        with self._lock:
            # An invalidation during compute means the value may already be stale
            if self._generations.get(path, 0) == generation:
                self._entries[path] = value
        return value

    def invalidate(self, path: str) -> None:
        with self._lock:
            self._entries.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.debug("Revalidated view %s", path)

    def is_stale(self, path: str) -> bool:
        with self._lock:
            return path not in self._entries

    def clear(self) -> None:
        with self._lock:
            for path in set(self._entries) | set(self._generations):
                self._generations[path] = self._generations.get(path, 0) + 1
            self._entries.clear()
