from __future__ import annotations

from collections.abc import Iterable

from todolists.domain.errors import ErrorKind, error_for_kind
from todolists.domain.lists.entities import TodoList

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100

LIST_NAME_MESSAGES = {
    ErrorKind.INVALID_LENGTH: f"List name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters.",
    ErrorKind.DUPLICATE_NAME: "List name must be unique.",
}
TODO_MESSAGES = {
    ErrorKind.INVALID_LENGTH: f"Todo must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters.",
}


def _has_valid_length(value: str) -> bool:
    return MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH


def validate_list_name(name: str, existing_lists: Iterable[TodoList]) -> ErrorKind | None:
    # Length wins over uniqueness when both fail.
    if not _has_valid_length(name):
        return ErrorKind.INVALID_LENGTH
    if any(todo_list.name == name for todo_list in existing_lists):
        return ErrorKind.DUPLICATE_NAME
    return None


def validate_todo_text(text: str) -> ErrorKind | None:
    if not _has_valid_length(text):
        return ErrorKind.INVALID_LENGTH
    return None


def check_list_name(name: str, existing_lists: Iterable[TodoList]) -> None:
    """Raise the matching TodoListError when the list name is invalid."""
    kind = validate_list_name(name, existing_lists)
    if kind is not None:
        raise error_for_kind(kind, LIST_NAME_MESSAGES[kind])


def check_todo_text(text: str) -> None:
    kind = validate_todo_text(text)
    if kind is not None:
        raise error_for_kind(kind, TODO_MESSAGES[kind])
