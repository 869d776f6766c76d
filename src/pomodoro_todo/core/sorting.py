"""Display ordering and presentation helpers for todo lists."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pomodoro_todo.core.models import Todo


def _display_key(todo: Todo) -> tuple:
    # Negated timestamps give descending order inside an ascending sort.
    due = (0, todo.due_date.timestamp()) if todo.due_date else (1, 0.0)
    return (
        todo.completed,
        -todo.priority.rank,
        due,
        -todo.created_at.timestamp(),
    )


def sort_for_display(todos: Iterable[Todo]) -> list[Todo]:
    """Order todos for presentation.

    Incomplete todos come first, then higher priority, then the earliest due
    date (todos without one last), then the most recently created.
    """
    return sorted(todos, key=_display_key)


def is_overdue(todo: Todo, now: datetime | None = None) -> bool:
    if todo.completed or todo.due_date is None:
        return False
    now = now or datetime.now(todo.due_date.tzinfo)
    # Timestamps compare naive and aware values alike; naive ones are local time.
    return todo.due_date.timestamp() < now.timestamp()
