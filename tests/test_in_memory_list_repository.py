from __future__ import annotations

import pytest

from todolists.domain.errors import ErrorKind, ListNotFoundError, TodoNotFoundError
from todolists.domain.repositories.list_repository import ListRepository


def test_repository_satisfies_protocol(list_repository) -> None:
    assert isinstance(list_repository, ListRepository)


def test_create_list_appends_in_order_and_mutates_session(list_repository, session_state) -> None:
    first = list_repository.create_list("Groceries")
    second = list_repository.create_list("Work")

    assert [first.id, second.id] == [1, 2]
    assert second.todos == []
    assert session_state.lists == [first, second]


def test_find_list_missing_returns_none_without_mutation(list_repository, session_state) -> None:
    list_repository.create_list("Groceries")
    before = list(session_state.lists)

    assert list_repository.find_list(42) is None
    assert session_state.lists == before


def test_rename_list_keeps_id_and_todos(list_repository) -> None:
    todo_list = list_repository.create_list("Groceries")
    todo = list_repository.add_todo(todo_list.id, "Milk")

    renamed = list_repository.rename_list(todo_list.id, "Shopping")

    assert renamed is todo_list
    assert (renamed.id, renamed.name, renamed.todos) == (1, "Shopping", [todo])


def test_delete_list_is_idempotent(list_repository, session_state) -> None:
    list_repository.create_list("Groceries")
    keep = list_repository.create_list("Work")

    assert list_repository.delete_list(1) is True
    assert list_repository.delete_list(1) is False
    assert session_state.lists == [keep]


def test_list_ids_reuse_freed_max(list_repository) -> None:
    list_repository.create_list("a")
    list_repository.create_list("b")
    list_repository.delete_list(2)

    assert list_repository.create_list("c").id == 2


def test_add_todo_allocates_ids_per_list(list_repository) -> None:
    first = list_repository.create_list("Groceries")
    second = list_repository.create_list("Work")

    milk = list_repository.add_todo(first.id, "Milk")
    eggs = list_repository.add_todo(first.id, "Eggs")
    report = list_repository.add_todo(second.id, "Report")

    assert [milk.id, eggs.id, report.id] == [1, 2, 1]
    assert milk.completed is False


def test_add_then_delete_todo_round_trips(list_repository) -> None:
    todo_list = list_repository.create_list("Groceries")
    list_repository.add_todo(todo_list.id, "Milk")
    before = list(todo_list.todos)

    todo = list_repository.add_todo(todo_list.id, "x")

    assert list_repository.delete_todo(todo_list.id, todo.id) is True
    assert todo_list.todos == before
    assert list_repository.delete_todo(todo_list.id, todo.id) is False


def test_set_todo_completed_toggles_flag(list_repository) -> None:
    todo_list = list_repository.create_list("Groceries")
    todo = list_repository.add_todo(todo_list.id, "Milk")

    list_repository.set_todo_completed(todo_list.id, todo.id, True)
    assert todo.completed is True

    list_repository.set_todo_completed(todo_list.id, todo.id, False)
    assert todo.completed is False


def test_set_todo_completed_missing_todo_raises_not_found(list_repository) -> None:
    todo_list = list_repository.create_list("Groceries")

    with pytest.raises(TodoNotFoundError) as excinfo:
        list_repository.set_todo_completed(todo_list.id, 9, True)

    assert excinfo.value.kind is ErrorKind.NOT_FOUND


def test_complete_all_todos_sets_booleans_and_is_idempotent(list_repository) -> None:
    todo_list = list_repository.create_list("Groceries")
    for text in ("Milk", "Eggs", "Bread"):
        list_repository.add_todo(todo_list.id, text)
    list_repository.set_todo_completed(todo_list.id, 2, True)

    list_repository.complete_all_todos(todo_list.id)
    list_repository.complete_all_todos(todo_list.id)

    assert [todo.completed for todo in todo_list.todos] == [True, True, True]


@pytest.mark.parametrize(
    "operation",
    [
        lambda repo: repo.rename_list(5, "x"),
        lambda repo: repo.add_todo(5, "x"),
        lambda repo: repo.set_todo_completed(5, 1, True),
        lambda repo: repo.complete_all_todos(5),
        lambda repo: repo.delete_todo(5, 1),
    ],
)
def test_list_scoped_operations_raise_for_missing_list(list_repository, operation) -> None:
    with pytest.raises(ListNotFoundError):
        operation(list_repository)
