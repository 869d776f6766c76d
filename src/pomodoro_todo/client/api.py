"""HTTP client for the Pomodoro Todo API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx
import structlog
from pydantic.alias_generators import to_camel

from pomodoro_todo.api.schemas import ApiResponse, TodoResponse, TodoStatsResponse
from pomodoro_todo.core.models import Priority, Todo, TodoFilter, TodoStats
from pomodoro_todo.core.sorting import sort_for_display

logger = structlog.get_logger()

DEFAULT_BASE_URL = "http://localhost:8000"


class TodoApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _wire_value(value: Any) -> Any:
    if isinstance(value, Priority):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class TodoClient:
    """Talks to the REST API and returns domain objects.

    An existing ``httpx.Client`` may be passed in (for example FastAPI's
    ``TestClient``); otherwise one is created for ``base_url`` and closed by
    :meth:`close`.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)

    def __enter__(self) -> TodoClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        response = self._http.request(method, path, **kwargs)
        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error:
            message = body.get("message") if isinstance(body, dict) else None
            logger.error(
                "api_request_failed",
                method=method,
                path=path,
                status=response.status_code,
                message=message,
            )
            raise TodoApiError(response.status_code, message or response.reason_phrase)
        return body

    def get_todos(self, todo_filter: TodoFilter | None = None) -> list[Todo]:
        params: dict[str, str] = {}
        if todo_filter is not None:
            if todo_filter.category:
                params["category"] = todo_filter.category
            if todo_filter.priority is not None:
                params["priority"] = todo_filter.priority.value
            if todo_filter.completed is not None:
                params["completed"] = str(todo_filter.completed).lower()

        body = self._request("GET", "/api/todos", params=params)
        envelope = ApiResponse[list[TodoResponse]].model_validate(body)
        return [item.to_todo() for item in envelope.data]

    def get_sorted_todos(self, todo_filter: TodoFilter | None = None) -> list[Todo]:
        """Fetch todos and return them in display order."""
        return sort_for_display(self.get_todos(todo_filter))

    def get_todo(self, todo_id: str) -> Todo:
        body = self._request("GET", f"/api/todos/{todo_id}")
        return ApiResponse[TodoResponse].model_validate(body).data.to_todo()

    def create_todo(
        self,
        title: str,
        description: str | None = None,
        priority: Priority | None = None,
        category: str | None = None,
        due_date: datetime | None = None,
    ) -> Todo:
        payload = {
            "title": title,
            "description": description,
            "priority": priority,
            "category": category,
            "dueDate": due_date,
        }
        body = self._request(
            "POST",
            "/api/todos",
            json={k: _wire_value(v) for k, v in payload.items() if v is not None},
        )
        return ApiResponse[TodoResponse].model_validate(body).data.to_todo()

    def update_todo(self, todo_id: str, **changes: Any) -> Todo:
        """Send a partial update; keyword names are the snake_case attribute names.

        Passing ``due_date=None`` clears the due date.
        """
        payload = {to_camel(name): _wire_value(value) for name, value in changes.items()}
        body = self._request("PUT", f"/api/todos/{todo_id}", json=payload)
        return ApiResponse[TodoResponse].model_validate(body).data.to_todo()

    def toggle_todo(self, todo_id: str, completed: bool) -> Todo:
        return self.update_todo(todo_id, completed=completed)

    def delete_todo(self, todo_id: str) -> Todo:
        body = self._request("DELETE", f"/api/todos/{todo_id}")
        return ApiResponse[TodoResponse].model_validate(body).data.to_todo()

    def get_categories(self) -> list[str]:
        body = self._request("GET", "/api/categories")
        return ApiResponse[list[str]].model_validate(body).data

    def get_stats(self) -> TodoStats:
        body = self._request("GET", "/api/stats")
        return ApiResponse[TodoStatsResponse].model_validate(body).data.to_stats()

    def health_check(self) -> dict[str, Any]:
        return self._request("GET", "/health")
