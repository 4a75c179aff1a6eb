import json

import uvicorn

from src.todo_web import main as main_module
from src.todo_web.generate_openapi import generate_openapi
from src.todo_web.settings import get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["PERSISTENCE_BACKEND", "SQLITE_DB_PATH", "CORS_ALLOW_ORIGINS", "LOG_LEVEL", "HOST", "PORT"]:
            monkeypatch.delenv(name, raising=False)
        s = get_settings()
        assert s.persistence_backend == "memory"
        assert s.sqlite_db_path == "./data/todos.db"
        assert s.cors_allow_origins == ["*"]
        assert s.host == "127.0.0.1"
        assert s.port == 8000
        assert s.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", " SQLite ")
        monkeypatch.setenv("SQLITE_DB_PATH", "/tmp/x.db")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = get_settings()
        assert s.persistence_backend == "sqlite"
        assert s.sqlite_db_path == "/tmp/x.db"
        assert s.cors_allow_origins == ["http://a.test", "http://b.test"]
        assert s.log_level == "DEBUG"

    def test_unknown_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "postgres")
        monkeypatch.setenv("LOG_LEVEL", "loud")
        s = get_settings()
        assert s.persistence_backend == "memory"
        assert s.log_level == "INFO"


class TestGenerateOpenapi:
    def test_writes_schema_with_tags(self, tmp_path):
        out = generate_openapi(str(tmp_path / "interfaces" / "openapi.json"))
        with open(out, encoding="utf-8") as f:
            schema = json.load(f)
        assert "/api/v1/todos/" in schema["paths"]
        assert "/todos" in schema["paths"]
        assert {t["name"] for t in schema["tags"]} >= {"health", "pages", "todos"}

    def test_does_not_open_configured_store(self, tmp_path, monkeypatch):
        db_path = tmp_path / "should_not_exist" / "todos.db"
        monkeypatch.setenv("PERSISTENCE_BACKEND", "sqlite")
        monkeypatch.setenv("SQLITE_DB_PATH", str(db_path))

        generate_openapi(str(tmp_path / "openapi.json"))

        assert not db_path.parent.exists()
        assert not hasattr(main_module, "app")


class TestServe:
    def test_runs_app_factory_under_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "9001")

        main_module.serve()

        assert calls == [
            (("src.todo_web.main:create_app",), {"factory": True, "host": "0.0.0.0", "port": 9001})
        ]

    def test_bad_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        assert get_settings().port == 8000
