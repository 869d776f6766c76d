"""PostgreSQL todo store."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

import psycopg
import structlog

from pomodoro_todo.config import PostgresSettings
from pomodoro_todo.core.models import NewTodo, Priority, Todo, TodoFilter, TodoPatch
from pomodoro_todo.db.base import TodoStore

logger = structlog.get_logger()

_COLUMNS = """
    id, title, description, completed, priority, category,
    due_date, created_at, updated_at
"""

# Attribute name on TodoPatch -> column name.
_PATCH_COLUMNS = {
    "title": "title",
    "description": "description",
    "completed": "completed",
    "priority": "priority",
    "category": "category",
    "due_date": "due_date",
}


class PostgresStore(TodoStore):
    """Todo store on psycopg, one connection per operation."""

    name = "postgres"

    def __init__(self, settings: PostgresSettings | None = None):
        self._settings = settings or PostgresSettings()
        logger.info(
            "postgres_store_initialized",
            host=self._settings.host,
            database=self._settings.database,
            user=self._settings.user,
        )

    def _connect(self) -> psycopg.Connection:
        return psycopg.connect(**self._settings.conninfo())

    @contextmanager
    def session(self) -> Generator[psycopg.Connection, None, None]:
        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def health_check(self) -> bool:
        try:
            with self.session() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1")
            return True
        except Exception as e:
            logger.error("database_health_check_failed", error=str(e))
            return False

    def list(self, todo_filter: TodoFilter | None = None) -> list[Todo]:
        todo_filter = todo_filter or TodoFilter()
        conditions = []
        params: list[Any] = []

        if todo_filter.category is not None:
            conditions.append("lower(category) = lower(%s)")
            params.append(todo_filter.category)
        if todo_filter.priority is not None:
            conditions.append("priority = %s")
            params.append(todo_filter.priority.value)
        if todo_filter.completed is not None:
            conditions.append("completed = %s")
            params.append(todo_filter.completed)

        where_clause = ""
        if conditions:
            where_clause = "WHERE " + " AND ".join(conditions)

        with self.session() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM todos
                    {where_clause}
                    ORDER BY created_at DESC
                    """,
                    params,
                )
                rows = cur.fetchall()

        return [self._row_to_todo(row) for row in rows]

    def get(self, todo_id: str) -> Todo | None:
        with self.session() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM todos WHERE id::text = %s",
                    (todo_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._row_to_todo(row)

    def create(self, data: NewTodo) -> Todo:
        with self.session() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO todos
                        (title, description, completed, priority, category, due_date)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    RETURNING {_COLUMNS}
                    """,
                    (
                        data.title,
                        data.description,
                        data.completed,
                        data.priority.value,
                        data.category,
                        data.due_date,
                    ),
                )
                row = cur.fetchone()

        return self._row_to_todo(row)

    def update(self, todo_id: str, patch: TodoPatch) -> Todo | None:
        changes = patch.changes()
        if not changes:
            return self.get(todo_id)

        updates = []
        params: list[Any] = []
        for attr, value in changes.items():
            updates.append(f"{_PATCH_COLUMNS[attr]} = %s")
            params.append(value.value if isinstance(value, Priority) else value)

        updates.append("updated_at = NOW()")
        params.append(todo_id)

        with self.session() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    UPDATE todos
                    SET {", ".join(updates)}
                    WHERE id::text = %s
                    RETURNING {_COLUMNS}
                    """,
                    params,
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._row_to_todo(row)

    def delete(self, todo_id: str) -> Todo | None:
        with self.session() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"DELETE FROM todos WHERE id::text = %s RETURNING {_COLUMNS}",
                    (todo_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._row_to_todo(row)

    @staticmethod
    def _row_to_todo(row: tuple) -> Todo:
        return Todo(
            id=str(row[0]),
            title=row[1],
            description=row[2] or "",
            completed=row[3],
            priority=Priority(row[4]),
            category=row[5],
            due_date=row[6],
            created_at=row[7],
            updated_at=row[8],
        )
