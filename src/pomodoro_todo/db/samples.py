"""Demo todos for a fresh store."""

from __future__ import annotations

from datetime import datetime, timedelta

from pomodoro_todo.core.models import NewTodo, Priority


def sample_todos(now: datetime) -> list[tuple[NewTodo, datetime]]:
    """Return ``(todo, created_at)`` pairs relative to ``now``."""
    return [
        (
            NewTodo(
                title="Work with Pomodoro Technique",
                description="Focus for 25 minutes and take 5 minute breaks",
                priority=Priority.HIGH,
                category="Work",
            ),
            now,
        ),
        (
            NewTodo(
                title="Prepare shopping list",
                description="Create weekly shopping list",
                priority=Priority.MEDIUM,
                category="Personal",
                due_date=now + timedelta(days=1),
                completed=True,
            ),
            now - timedelta(days=1),
        ),
        (
            NewTodo(
                title="Yoga class",
                description="Yoga class at 7 PM",
                priority=Priority.LOW,
                category="Health",
                due_date=now + timedelta(hours=1),
            ),
            now - timedelta(days=2),
        ),
    ]
