"""Developer environment setup for the Pomodoro Todo App.

Creates the Postgres database named by the ``POSTGRES_*`` settings, runs
migrations and optionally loads the demo todos.

Usage:
    uv run python scripts/dev_setup.py                    # create db + migrate
    uv run python scripts/dev_setup.py --seed             # also load demo todos
    uv run python scripts/dev_setup.py --skip-migrations  # skip alembic
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from datetime import datetime
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import psycopg

from pomodoro_todo.config import PostgresSettings
from pomodoro_todo.db.postgres import PostgresStore
from pomodoro_todo.db.samples import sample_todos


def _create_database(pg: PostgresSettings) -> None:
    """Create the application database if it doesn't exist."""
    conn = psycopg.connect(**pg.conninfo(database="postgres"), autocommit=True)
    try:
        conn.execute(f'CREATE DATABASE "{pg.database}"')
        print(f"  Created database '{pg.database}'")
    except psycopg.errors.DuplicateDatabase:
        print(f"  Database '{pg.database}' already exists")
    finally:
        conn.close()


def _run_migrations() -> None:
    """Run alembic upgrade head."""
    project_root = Path(__file__).resolve().parents[1]
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=project_root,
    )
    if result.returncode != 0:
        print("\nMigrations failed. You can retry with:")
        print("  uv run alembic upgrade head")
        sys.exit(1)


def _seed(pg: PostgresSettings) -> None:
    store = PostgresStore(pg)
    if store.list():
        print("  Database already has todos, skipping seed")
        return
    for data, _ in sample_todos(datetime.now()):
        todo = store.create(data)
        print(f"  Added '{todo.title}'")


def main() -> None:
    parser = argparse.ArgumentParser(description="Set up local dev environment")
    parser.add_argument(
        "--skip-migrations", action="store_true", help="Skip running alembic migrations"
    )
    parser.add_argument("--seed", action="store_true", help="Load demo todos")
    args = parser.parse_args()

    pg = PostgresSettings()

    print(f"Creating database '{pg.database}' on {pg.host}:{pg.port}...")
    try:
        _create_database(pg)
    except psycopg.OperationalError as e:
        print(f"  Connection failed: {e}")
        print("\nCheck POSTGRES_HOST, POSTGRES_USER and POSTGRES_PASSWORD")
        sys.exit(1)

    if args.skip_migrations:
        print("\nSkipping migrations (--skip-migrations)")
    else:
        print("\nRunning migrations...")
        _run_migrations()

    if args.seed:
        print("\nSeeding demo todos...")
        _seed(pg)

    print("\n" + "=" * 60)
    print("Setup complete!")
    print("=" * 60)
    print(f"  Database: {pg.database}")
    print(f"  Host:     {pg.host}:{pg.port}")
    print()
    print("Start the server:")
    print("  STORE_BACKEND=postgres uv run uvicorn app:app --reload --host 0.0.0.0 --port 8000")


if __name__ == "__main__":
    main()
