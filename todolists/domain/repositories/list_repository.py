from __future__ import annotations

from typing import Protocol, runtime_checkable

from todolists.domain.lists.entities import Todo, TodoList


@runtime_checkable
class ListRepository(Protocol):
    """Repository interface for the todo lists of one session."""

    def list_all(self) -> list[TodoList]:
        ...

    def create_list(self, name: str) -> TodoList:
        ...

    def find_list(self, list_id: int) -> TodoList | None:
        ...

    def rename_list(self, list_id: int, new_name: str) -> TodoList:
        ...

    def delete_list(self, list_id: int) -> bool:
        ...

    def add_todo(self, list_id: int, text: str) -> Todo:
        ...

    def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> Todo:
        ...

    def complete_all_todos(self, list_id: int) -> TodoList:
        ...

    def delete_todo(self, list_id: int, todo_id: int) -> bool:
        ...
