"""Domain errors raised by the todo service."""


class TodoAppError(Exception):
    """Base class for errors reported back to the caller."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TodoNotFoundError(TodoAppError):
    status_code = 404

    def __init__(self, todo_id: str) -> None:
        super().__init__("Todo not found")
        self.todo_id = todo_id


class TodoValidationError(TodoAppError):
    status_code = 400
