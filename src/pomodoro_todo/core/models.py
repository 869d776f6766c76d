"""Domain models for Pomodoro Todo."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any

DEFAULT_CATEGORY = "General"


class Priority(str, Enum):
    """Priority level for a todo item."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class _Unset:
    """Marker for patch fields the caller did not provide."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class Todo:
    """A todo item as held by a store."""

    id: str
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category: str = DEFAULT_CATEGORY
    due_date: datetime | None = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class NewTodo:
    """Validated input for creating a todo; the store assigns id and timestamps."""

    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    category: str = DEFAULT_CATEGORY
    due_date: datetime | None = None
    completed: bool = False


@dataclass(frozen=True)
class TodoPatch:
    """Partial update of a todo.

    Every attribute defaults to ``UNSET``, meaning "leave as is". ``due_date``
    may also be set to ``None`` to clear the due date.
    """

    title: str = UNSET
    description: str = UNSET
    completed: bool = UNSET
    priority: Priority = UNSET
    category: str = UNSET
    due_date: datetime | None = UNSET

    def changes(self) -> dict[str, Any]:
        """Return the attributes that were provided, keyed by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply(self, todo: Todo, now: datetime) -> Todo:
        """Return a copy of ``todo`` with the provided attributes replaced."""
        changes = self.changes()
        if not changes:
            return replace(todo)
        return replace(todo, updated_at=now, **changes)


@dataclass(frozen=True)
class TodoFilter:
    """List filter; ``None`` means no constraint on that attribute."""

    category: str | None = None
    priority: Priority | None = None
    completed: bool | None = None

    def matches(self, todo: Todo) -> bool:
        if self.category is not None and todo.category.lower() != self.category.lower():
            return False
        if self.priority is not None and todo.priority != self.priority:
            return False
        if self.completed is not None and todo.completed != self.completed:
            return False
        return True

    @property
    def active_count(self) -> int:
        return sum(
            1 for value in (self.category, self.priority, self.completed) if value is not None
        )


@dataclass(frozen=True)
class TodoStats:
    total: int
    completed: int
    pending: int
    completion_rate: int
    by_priority: dict[Priority, int]
