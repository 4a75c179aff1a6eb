import os

import pytest
from fastapi.testclient import TestClient

# Apps built without explicit settings read the environment; keep them off disk
os.environ.setdefault("PERSISTENCE_BACKEND", "memory")

from src.todo_web.cache import ViewCache  # noqa: E402
from src.todo_web.errors import PersistenceError  # noqa: E402
from src.todo_web.main import create_app  # noqa: E402
from src.todo_web.repositories import InMemoryRepository  # noqa: E402
from src.todo_web.settings import Settings  # noqa: E402


class OutageRepository(InMemoryRepository):
    """In-memory store whose writes fail while ``down`` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.down = False

    def create(self, title: str):
        if self.down:
            raise PersistenceError("database unreachable")
        return super().create(title)


@pytest.fixture
def settings():
    return Settings(
        persistence_backend="memory",
        sqlite_db_path="./data/test.db",
        cors_allow_origins=["*"],
        log_level="INFO",
    )


@pytest.fixture
def repo():
    return OutageRepository()


@pytest.fixture
def cache():
    return ViewCache()


@pytest.fixture
def client(settings, repo, cache):
    app = create_app(settings=settings, repository=repo, cache=cache)
    return TestClient(app)
