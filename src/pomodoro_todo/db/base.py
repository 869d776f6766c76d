"""Storage contract shared by the todo store backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pomodoro_todo.core.models import NewTodo, Todo, TodoFilter, TodoPatch


class TodoStore(ABC):
    """Persistence for todo records.

    ``list`` returns matches newest-created first. ``get``, ``update`` and
    ``delete`` signal a missing id with ``None``/``False`` rather than raising.
    """

    name: str = "store"

    @abstractmethod
    def list(self, todo_filter: TodoFilter | None = None) -> list[Todo]: ...

    @abstractmethod
    def get(self, todo_id: str) -> Todo | None: ...

    @abstractmethod
    def create(self, data: NewTodo) -> Todo: ...

    @abstractmethod
    def update(self, todo_id: str, patch: TodoPatch) -> Todo | None: ...

    @abstractmethod
    def delete(self, todo_id: str) -> Todo | None:
        """Remove a todo and return it, or ``None`` if it did not exist."""

    def health_check(self) -> bool:
        return True
