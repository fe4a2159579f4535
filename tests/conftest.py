# tests/conftest.py

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from todo_clock.app.main import create_app
from todo_clock.config import Settings
from todo_clock.infra.store.todo_store_memory import InMemoryTodoStore


@pytest.fixture()
def store() -> InMemoryTodoStore:
    return InMemoryTodoStore()


@pytest.fixture()
def settings() -> Settings:
    """Fast clock, console logging only."""
    return Settings(log_dir=None, clock_interval=0.05)


@pytest.fixture()
def root_logging():
    """create_app() replaces the root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])


@pytest.fixture()
def client(settings: Settings, store: InMemoryTodoStore, root_logging):
    app = create_app(settings, store=store)
    with TestClient(app) as c:
        yield c
