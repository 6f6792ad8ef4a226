from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"


LIST_NOT_FOUND_MESSAGE = "The specified list was not found."
TODO_NOT_FOUND_MESSAGE = "The specified todo was not found."


class TodoListError(ValueError):
    """Recoverable error reported to the request handler."""

    kind: ErrorKind


class InvalidLengthError(TodoListError):
    kind = ErrorKind.INVALID_LENGTH


class DuplicateNameError(TodoListError):
    kind = ErrorKind.DUPLICATE_NAME


class NotFoundError(TodoListError):
    kind = ErrorKind.NOT_FOUND


class ListNotFoundError(NotFoundError):
    def __init__(self, list_id: int) -> None:
        super().__init__(LIST_NOT_FOUND_MESSAGE)
        self.list_id = list_id


class TodoNotFoundError(NotFoundError):
    def __init__(self, list_id: int, todo_id: int) -> None:
        super().__init__(TODO_NOT_FOUND_MESSAGE)
        self.list_id = list_id
        self.todo_id = todo_id


_ERRORS_BY_KIND: dict[ErrorKind, type[TodoListError]] = {
    ErrorKind.INVALID_LENGTH: InvalidLengthError,
    ErrorKind.DUPLICATE_NAME: DuplicateNameError,
    ErrorKind.NOT_FOUND: NotFoundError,
}


def error_for_kind(kind: ErrorKind, message: str) -> TodoListError:
    return _ERRORS_BY_KIND[kind](message)
