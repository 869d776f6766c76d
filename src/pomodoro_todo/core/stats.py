"""Aggregate statistics over the full set of todos."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from pomodoro_todo.core.models import Priority, Todo, TodoStats


def completion_rate(completed: int, total: int) -> int:
    """Percentage of completed todos, halves rounded up; 0 for an empty set."""
    if total <= 0:
        return 0
    rate = Decimal(completed * 100) / Decimal(total)
    return int(rate.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_stats(todos: Iterable[Todo]) -> TodoStats:
    total = 0
    completed = 0
    by_priority = {priority: 0 for priority in (Priority.HIGH, Priority.MEDIUM, Priority.LOW)}

    for todo in todos:
        total += 1
        if todo.completed:
            completed += 1
        by_priority[todo.priority] += 1

    return TodoStats(
        total=total,
        completed=completed,
        pending=total - completed,
        completion_rate=completion_rate(completed, total),
        by_priority=by_priority,
    )
