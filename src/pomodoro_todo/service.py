"""Todo operations on top of an injected store."""

from __future__ import annotations

from dataclasses import replace

import structlog

from pomodoro_todo.core.errors import TodoNotFoundError, TodoValidationError
from pomodoro_todo.core.models import NewTodo, Todo, TodoFilter, TodoPatch, TodoStats
from pomodoro_todo.core.stats import compute_stats
from pomodoro_todo.db.base import TodoStore

logger = structlog.get_logger()


def _require_title(title: str | None) -> str:
    stripped = (title or "").strip()
    if not stripped:
        raise TodoValidationError("Title is required")
    return stripped


class TodoService:
    def __init__(self, store: TodoStore):
        self._store = store

    @property
    def store(self) -> TodoStore:
        return self._store

    def list_todos(self, todo_filter: TodoFilter | None = None) -> list[Todo]:
        return self._store.list(todo_filter)

    def get_todo(self, todo_id: str) -> Todo:
        todo = self._store.get(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def create_todo(self, data: NewTodo) -> Todo:
        data = replace(data, title=_require_title(data.title))
        todo = self._store.create(data)
        logger.info("todo_created", todo_id=todo.id, priority=todo.priority.value)
        return todo

    def update_todo(self, todo_id: str, patch: TodoPatch) -> Todo:
        if "title" in patch.changes():
            patch = replace(patch, title=_require_title(patch.title))
        todo = self._store.update(todo_id, patch)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("todo_updated", todo_id=todo_id, fields=sorted(patch.changes()))
        return todo

    def delete_todo(self, todo_id: str) -> Todo:
        todo = self._store.delete(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("todo_deleted", todo_id=todo_id)
        return todo

    def list_categories(self) -> list[str]:
        """Distinct categories in use, in order of first appearance."""
        return list(dict.fromkeys(todo.category for todo in self._store.list()))

    def get_stats(self) -> TodoStats:
        return compute_stats(self._store.list())
