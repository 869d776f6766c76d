"""In-process todo store."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from itertools import count
from threading import RLock

import structlog

from pomodoro_todo.core.models import NewTodo, Todo, TodoFilter, TodoPatch
from pomodoro_todo.db.base import TodoStore
from pomodoro_todo.db.samples import sample_todos

logger = structlog.get_logger()


class InMemoryStore(TodoStore):
    """Dictionary-backed store; records are copied in and out."""

    name = "memory"

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[str, Todo] = {}
        self._ids = count(1)

    def _now(self) -> datetime:
        return datetime.now()

    def list(self, todo_filter: TodoFilter | None = None) -> list[Todo]:
        todo_filter = todo_filter or TodoFilter()
        with self._lock:
            # Reversed insertion order keeps newest-first on equal timestamps.
            matches = [
                replace(t) for t in reversed(self._items.values()) if todo_filter.matches(t)
            ]
        return sorted(matches, key=lambda t: t.created_at, reverse=True)

    def get(self, todo_id: str) -> Todo | None:
        with self._lock:
            todo = self._items.get(todo_id)
            return None if todo is None else replace(todo)

    def create(self, data: NewTodo) -> Todo:
        now = self._now()
        with self._lock:
            todo = Todo(
                id=str(next(self._ids)),
                title=data.title,
                description=data.description,
                completed=data.completed,
                priority=data.priority,
                category=data.category,
                due_date=data.due_date,
                created_at=now,
                updated_at=now,
            )
            self._items[todo.id] = todo
        return replace(todo)

    def update(self, todo_id: str, patch: TodoPatch) -> Todo | None:
        with self._lock:
            existing = self._items.get(todo_id)
            if existing is None:
                return None
            updated = patch.apply(existing, self._now())
            self._items[todo_id] = updated
            return replace(updated)

    def delete(self, todo_id: str) -> Todo | None:
        with self._lock:
            return self._items.pop(todo_id, None)

    def seed_samples(self) -> None:
        """Load the sample todos used for demos."""
        samples = sample_todos(self._now())
        with self._lock:
            for data, created_at in samples:
                todo = self.create(data)
                self._items[todo.id] = replace(todo, created_at=created_at, updated_at=created_at)
        logger.info("sample_todos_seeded", count=len(samples))
