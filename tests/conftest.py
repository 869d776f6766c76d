from datetime import datetime, timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient

from pomodoro_todo.api.main import app
from pomodoro_todo.core.models import Priority, Todo
from pomodoro_todo.db.factory import get_store
from pomodoro_todo.db.memory import InMemoryStore

BASE_TIME = datetime(2026, 3, 1, 9, 0, 0)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_todo():
    ids = count(1)

    def _make(
        priority=Priority.MEDIUM,
        completed=False,
        due_in_days=None,
        created_minutes_ago=0,
        category="General",
        title=None,
        due_date=None,
    ):
        todo_id = str(next(ids))
        created = BASE_TIME - timedelta(minutes=created_minutes_ago)
        return Todo(
            id=todo_id,
            title=title or f"Task {todo_id}",
            completed=completed,
            priority=Priority(priority),
            category=category,
            due_date=due_date or (
                BASE_TIME + timedelta(days=due_in_days) if due_in_days is not None else None
            ),
            created_at=created,
            updated_at=created,
        )

    return _make
