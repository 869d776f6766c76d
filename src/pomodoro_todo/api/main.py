"""FastAPI application for Pomodoro Todo."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pomodoro_todo import __version__
from pomodoro_todo.api.schemas import (
    ApiResponse,
    CreateTodoRequest,
    ErrorResponse,
    HealthResponse,
    TodoResponse,
    TodoStatsResponse,
    UpdateTodoRequest,
)
from pomodoro_todo.config import get_settings
from pomodoro_todo.core.errors import TodoAppError
from pomodoro_todo.core.models import Priority, TodoFilter
from pomodoro_todo.db.base import TodoStore
from pomodoro_todo.db.factory import get_store
from pomodoro_todo.logging_config import configure_logging
from pomodoro_todo.service import TodoService

logger = structlog.get_logger()


def _find_project_root() -> Path:
    from_main = Path(__file__).parent.parent.parent.parent
    if (from_main / "alembic.ini").exists():
        return from_main
    from_cwd = Path.cwd()
    if (from_cwd / "alembic.ini").exists():
        return from_cwd
    return from_main


def _check_migrations(store: TodoStore) -> None:
    """Warn on startup if the database has pending migrations."""
    from pomodoro_todo.db.postgres import PostgresStore

    if not isinstance(store, PostgresStore):
        return
    try:
        from alembic.config import Config
        from alembic.script import ScriptDirectory

        project_root = _find_project_root()
        alembic_cfg = Config(str(project_root / "alembic.ini"))
        alembic_cfg.set_main_option("script_location", str(project_root / "alembic"))
        head = ScriptDirectory.from_config(alembic_cfg).get_current_head()

        with store.session() as conn, conn.cursor() as cur:
            cur.execute("SELECT version_num FROM alembic_version")
            row = cur.fetchone()
            current = row[0] if row else None

        if current is None:
            logger.warning(
                "migrations_not_initialized",
                hint="Run 'alembic upgrade head' to initialize the database",
            )
        elif current != head:
            logger.warning(
                "migrations_pending",
                current=current,
                head=head,
                hint="Run 'alembic upgrade head' to apply pending migrations",
            )
        else:
            logger.info("migrations_up_to_date", revision=current)
    except Exception as e:
        logger.warning("migration_check_failed", error=str(e))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    logger.info("starting", service=settings.service_name, version=__version__)
    _check_migrations(get_store())
    yield


_settings = get_settings()

app = FastAPI(
    title=_settings.service_name,
    description="Task management API with filtering, sorting and statistics",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_allow_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(by_alias=True),
    )


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if loc == ["title"] and first.get("type") in ("missing", "string_type"):
        return "Title is required"
    prefix = f"{'.'.join(loc)}: " if loc else ""
    return f"{prefix}{first.get('msg', 'Invalid value')}"


@app.exception_handler(TodoAppError)
async def todo_error_handler(request: Request, exc: TodoAppError) -> JSONResponse:
    logger.info(
        "request_rejected",
        path=request.url.path,
        status=exc.status_code,
        reason=exc.message,
    )
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.info("request_invalid", path=request.url.path, reason=message)
    return _error(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths alike.
    if exc.status_code in (404, 405):
        return _error(404, "Route not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return _error(500, "Something went wrong!")


def get_todo_service(store: TodoStore = Depends(get_store)) -> TodoService:
    return TodoService(store)


@app.get("/health", response_model=HealthResponse)
async def health(store: TodoStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="OK" if store.health_check() else "DEGRADED",
        timestamp=datetime.now(timezone.utc),
        service=_settings.service_name,
        version=__version__,
        store=store.name,
    )


@app.get("/api/todos", response_model=ApiResponse[list[TodoResponse]])
def list_todos(
    category: str | None = None,
    priority: Priority | None = None,
    completed: bool | None = None,
    service: TodoService = Depends(get_todo_service),
) -> ApiResponse[list[TodoResponse]]:
    todo_filter = TodoFilter(
        category=category.strip() if category and category.strip() else None,
        priority=priority,
        completed=completed,
    )
    todos = service.list_todos(todo_filter)
    return ApiResponse[list[TodoResponse]](
        data=[TodoResponse.from_todo(t) for t in todos],
        count=len(todos),
    )


@app.get("/api/todos/{todo_id}", response_model=ApiResponse[TodoResponse])
def get_todo(
    todo_id: str, service: TodoService = Depends(get_todo_service)
) -> ApiResponse[TodoResponse]:
    todo = service.get_todo(todo_id)
    return ApiResponse[TodoResponse](data=TodoResponse.from_todo(todo))


@app.post("/api/todos", response_model=ApiResponse[TodoResponse], status_code=201)
def create_todo(
    body: CreateTodoRequest, service: TodoService = Depends(get_todo_service)
) -> ApiResponse[TodoResponse]:
    todo = service.create_todo(body.to_new_todo())
    return ApiResponse[TodoResponse](
        data=TodoResponse.from_todo(todo),
        message="Todo created successfully",
    )


@app.put("/api/todos/{todo_id}", response_model=ApiResponse[TodoResponse])
def update_todo(
    todo_id: str,
    body: UpdateTodoRequest,
    service: TodoService = Depends(get_todo_service),
) -> ApiResponse[TodoResponse]:
    todo = service.update_todo(todo_id, body.to_patch())
    return ApiResponse[TodoResponse](
        data=TodoResponse.from_todo(todo),
        message="Todo updated successfully",
    )


@app.delete("/api/todos/{todo_id}", response_model=ApiResponse[TodoResponse])
def delete_todo(
    todo_id: str, service: TodoService = Depends(get_todo_service)
) -> ApiResponse[TodoResponse]:
    todo = service.delete_todo(todo_id)
    return ApiResponse[TodoResponse](
        data=TodoResponse.from_todo(todo),
        message="Todo deleted successfully",
    )


@app.get("/api/categories", response_model=ApiResponse[list[str]])
def list_categories(service: TodoService = Depends(get_todo_service)) -> ApiResponse[list[str]]:
    return ApiResponse[list[str]](data=service.list_categories())


@app.get("/api/stats", response_model=ApiResponse[TodoStatsResponse])
def get_stats(service: TodoService = Depends(get_todo_service)) -> ApiResponse[TodoStatsResponse]:
    return ApiResponse[TodoStatsResponse](data=TodoStatsResponse.from_stats(service.get_stats()))
