"""Pomodoro Todo: a task-management REST backend and client."""

__version__ = "0.1.0"
