"""Pydantic request/response schemas for the Pomodoro Todo API."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from pomodoro_todo.core.models import (
    DEFAULT_CATEGORY,
    NewTodo,
    Priority,
    Todo,
    TodoPatch,
    TodoStats,
)

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base model speaking camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


# Forms submit an empty string when no due date is picked.
DueDate = Annotated[datetime | None, BeforeValidator(_blank_to_none)]


class CreateTodoRequest(ApiModel):
    title: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=2000)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category: str | None = Field(default=None, max_length=100)
    due_date: DueDate = None

    def to_new_todo(self) -> NewTodo:
        return NewTodo(
            title=(self.title or "").strip(),
            description=(self.description or "").strip(),
            completed=self.completed,
            priority=self.priority,
            category=(self.category or "").strip() or DEFAULT_CATEGORY,
            due_date=self.due_date,
        )


class UpdateTodoRequest(ApiModel):
    title: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=2000)
    completed: bool | None = None
    priority: Priority | None = None
    category: str | None = Field(default=None, max_length=100)
    due_date: DueDate = None

    def to_patch(self) -> TodoPatch:
        """Only fields present in the request body end up in the patch.

        An explicit ``null`` clears ``dueDate``; for every other field it is
        treated as absent. A blank ``category`` is ignored.
        """
        provided = self.model_fields_set
        changes: dict[str, Any] = {}
        for name in ("title", "description"):
            value = getattr(self, name)
            if name in provided and value is not None:
                changes[name] = value.strip()
        if "category" in provided and self.category and self.category.strip():
            changes["category"] = self.category.strip()
        for name in ("completed", "priority"):
            value = getattr(self, name)
            if name in provided and value is not None:
                changes[name] = value
        if "due_date" in provided:
            changes["due_date"] = self.due_date
        return TodoPatch(**changes)


class TodoResponse(ApiModel):
    id: str
    title: str
    description: str
    completed: bool
    priority: Priority
    category: str
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_todo(cls, todo: Todo) -> TodoResponse:
        return cls(
            id=todo.id,
            title=todo.title,
            description=todo.description,
            completed=todo.completed,
            priority=todo.priority,
            category=todo.category,
            due_date=todo.due_date,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )

    def to_todo(self) -> Todo:
        return Todo(
            id=self.id,
            title=self.title,
            description=self.description,
            completed=self.completed,
            priority=self.priority,
            category=self.category,
            due_date=self.due_date,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class PriorityCounts(ApiModel):
    high: int
    medium: int
    low: int


class TodoStatsResponse(ApiModel):
    total: int
    completed: int
    pending: int
    completion_rate: int
    by_priority: PriorityCounts

    @classmethod
    def from_stats(cls, stats: TodoStats) -> TodoStatsResponse:
        return cls(
            total=stats.total,
            completed=stats.completed,
            pending=stats.pending,
            completion_rate=stats.completion_rate,
            by_priority=PriorityCounts(
                high=stats.by_priority[Priority.HIGH],
                medium=stats.by_priority[Priority.MEDIUM],
                low=stats.by_priority[Priority.LOW],
            ),
        )

    def to_stats(self) -> TodoStats:
        return TodoStats(
            total=self.total,
            completed=self.completed,
            pending=self.pending,
            completion_rate=self.completion_rate,
            by_priority={
                Priority.HIGH: self.by_priority.high,
                Priority.MEDIUM: self.by_priority.medium,
                Priority.LOW: self.by_priority.low,
            },
        )


class ApiResponse(ApiModel, Generic[T]):
    """Envelope around every payload; ``message`` and ``count`` are omitted when empty."""

    success: bool = True
    data: T
    message: str | None = None
    count: int | None = None

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        data = handler(self)
        for key in ("message", "count"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


class ErrorResponse(ApiModel):
    success: bool = False
    message: str


class HealthResponse(ApiModel):
    status: str
    timestamp: datetime
    service: str
    version: str
    store: str
