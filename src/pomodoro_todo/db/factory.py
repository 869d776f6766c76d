"""Construction of the configured todo store."""

from __future__ import annotations

import structlog

from pomodoro_todo.config import Settings, get_settings
from pomodoro_todo.db.base import TodoStore
from pomodoro_todo.db.memory import InMemoryStore

logger = structlog.get_logger()


def build_store(settings: Settings) -> TodoStore:
    if settings.store_backend == "postgres":
        from pomodoro_todo.db.postgres import PostgresStore

        return PostgresStore(settings.postgres)

    store = InMemoryStore()
    if settings.seed_sample_data:
        store.seed_samples()
    return store


_store: TodoStore | None = None


def get_store() -> TodoStore:
    global _store
    if _store is None:
        settings = get_settings()
        _store = build_store(settings)
        logger.info("todo_store_ready", backend=_store.name)
    return _store
