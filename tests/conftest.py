"""Shared fixtures for Todo Chat tests."""

import pytest

from todo_chat.config import reset_settings
from todo_chat.core.todo_service import TodoService
from todo_chat.db.connection import Database

_ENV_VARS = [
    "DATABASE_URL",
    "LLM_PROVIDER",
    "LLM_MODEL",
    "GOOGLE_API_KEY",
    "OPENAI_API_KEY",
    "LANGSMITH_TRACING",
    "LANGSMITH_API_KEY",
    "LANGSMITH_PROJECT",
    "VERBOSE_LOGGING",
    "MAX_HISTORY_MESSAGES",
]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temp data dir and clear provider env vars."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'todos.db'}"


@pytest.fixture
def database(database_url):
    db = Database(database_url)
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def service(database):
    return TodoService(database)
