"""Client-side access to the Pomodoro Todo API."""

from pomodoro_todo.client.api import TodoApiError, TodoClient
from pomodoro_todo.core.sorting import is_overdue, sort_for_display

__all__ = ["TodoApiError", "TodoClient", "is_overdue", "sort_for_display"]
