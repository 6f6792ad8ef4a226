from __future__ import annotations

import pytest

from todolists.domain.errors import DuplicateNameError, ErrorKind, InvalidLengthError
from todolists.domain.lists.entities import TodoList
from todolists.domain.lists.validation import (
    check_list_name,
    check_todo_text,
    validate_list_name,
    validate_todo_text,
)

EXISTING = [TodoList(id=1, name="Groceries"), TodoList(id=2, name="Work")]


@pytest.mark.parametrize("name", ["a", "Chores", "groceries", "x" * 100])
def test_validate_list_name_accepts_new_names_within_bounds(name: str) -> None:
    assert validate_list_name(name, EXISTING) is None


@pytest.mark.parametrize("name", ["", "x" * 101])
def test_validate_list_name_rejects_bad_length(name: str) -> None:
    assert validate_list_name(name, EXISTING) is ErrorKind.INVALID_LENGTH


def test_validate_list_name_reports_length_before_duplicate() -> None:
    lists = [TodoList(id=1, name="y" * 101)]

    assert validate_list_name("y" * 101, lists) is ErrorKind.INVALID_LENGTH


def test_validate_list_name_rejects_exact_duplicate() -> None:
    assert validate_list_name("Work", EXISTING) is ErrorKind.DUPLICATE_NAME


def test_validate_list_name_is_case_sensitive() -> None:
    assert validate_list_name("WORK", EXISTING) is None


def test_validate_todo_text_bounds() -> None:
    assert validate_todo_text("Milk") is None
    assert validate_todo_text("z" * 100) is None
    assert validate_todo_text("") is ErrorKind.INVALID_LENGTH
    assert validate_todo_text("z" * 101) is ErrorKind.INVALID_LENGTH


def test_check_list_name_raises_with_message() -> None:
    with pytest.raises(InvalidLengthError, match="List name must be between 1 and 100 characters."):
        check_list_name("", EXISTING)
    with pytest.raises(DuplicateNameError, match="List name must be unique."):
        check_list_name("Work", EXISTING)

    check_list_name("New", EXISTING)


def test_check_todo_text_raises_with_message() -> None:
    with pytest.raises(InvalidLengthError) as excinfo:
        check_todo_text("")

    assert str(excinfo.value) == "Todo must be between 1 and 100 characters."
    check_todo_text("Milk")
