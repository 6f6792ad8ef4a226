"""Display ordering for lists and todos.

Unfinished work is shown first. Both orderings are stable partitions: items
keep their relative order inside the "open" and the "done" group.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from todolists.domain.lists.entities import Todo, TodoList

T = TypeVar("T")


def todos_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def undone_todos_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def is_list_complete(todo_list: TodoList) -> bool:
    # An empty list is never complete.
    return todos_count(todo_list) > 0 and undone_todos_count(todo_list) == 0


def list_class(todo_list: TodoList) -> str | None:
    return "complete" if is_list_complete(todo_list) else None


def _partition(items: Iterable[T], is_done: Callable[[T], bool]) -> list[T]:
    done: list[T] = []
    open_items: list[T] = []
    for item in items:
        (done if is_done(item) else open_items).append(item)
    return open_items + done


def sort_lists(lists: Iterable[TodoList]) -> list[TodoList]:
    return _partition(lists, is_list_complete)


def sort_todos(todos: Iterable[Todo]) -> list[Todo]:
    return _partition(todos, lambda todo: todo.completed)
