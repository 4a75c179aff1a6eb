from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .errors import PersistenceError
from .models import TodoEntity
from .repositories import Repository
from .schemas import MutationResult, TodoOut

logger = logging.getLogger(__name__)

LISTING_PATH = "/"
CREATE_FAILED_MESSAGE = "Failed to create todo"


# PUBLIC_INTERFACE
class TodoService:
    """
    Create-and-list workflow over a Repository.

    Args:
        repository: The store to read from and append to.
        on_stale: Called with the listing path after a successful write so a
            caching layer can drop its copy. Optional.
    """

    def __init__(
        self,
        repository: Repository,
        on_stale: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._repo = repository
        self._on_stale = on_stale

    def list_todos(self) -> List[TodoEntity]:
        """Return all todos, most recently created first."""
        return self._repo.list()

    def submit_new_todo(self, raw_input: Optional[str]) -> MutationResult:
        """
        Validate and persist a new todo.

        Blank input is a silent no-op. A PersistenceError is converted into a
        result carrying an error message; it is never re-raised.
        """
        title = (raw_input or "").strip()
        if not title:
            logger.debug("Ignoring blank todo submission")
            return MutationResult()

        try:
            created = self._repo.create(title)
        except PersistenceError:
            logger.exception("Could not persist todo")
            return MutationResult(error=CREATE_FAILED_MESSAGE)

        logger.info("Created todo id=%s", created["id"])
        if self._on_stale is not None:
            self._on_stale(LISTING_PATH)
        return MutationResult(created=True, todo=TodoOut(**created))
