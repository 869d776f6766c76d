"""Alembic environment configuration.

Builds the database URL from ``PostgresSettings`` so migrations use the same
``POSTGRES_*`` environment as the application. The database is created
automatically if it doesn't exist (connects to the default ``postgres``
database to run ``CREATE DATABASE``).
"""

from __future__ import annotations

import sys
from pathlib import Path

from alembic import context
from sqlalchemy import engine_from_config, pool

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from pomodoro_todo.config import PostgresSettings  # noqa: E402
from pomodoro_todo.db.schemas import Base  # noqa: E402

config = context.config
target_metadata = Base.metadata


def _ensure_database(pg: PostgresSettings) -> None:
    """Create the application database if it doesn't exist."""
    import psycopg

    conn = psycopg.connect(**pg.conninfo(database="postgres"), autocommit=True)
    try:
        conn.execute(f'CREATE DATABASE "{pg.database}"')
    except psycopg.errors.DuplicateDatabase:
        pass
    finally:
        conn.close()


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting SQL to stdout."""
    context.configure(
        url=PostgresSettings().sqlalchemy_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against the configured database."""
    pg = PostgresSettings()
    _ensure_database(pg)

    cfg = config.get_section(config.config_ini_section, {})
    cfg["sqlalchemy.url"] = pg.sqlalchemy_url()

    connectable = engine_from_config(
        cfg,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
