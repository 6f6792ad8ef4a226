from __future__ import annotations

from todolists.domain.errors import ListNotFoundError, TodoNotFoundError
from todolists.domain.lists.entities import Todo, TodoList
from todolists.domain.lists.identifiers import next_id
from todolists.domain.repositories.list_repository import ListRepository


class InMemoryListRepository(ListRepository):
    """Repository over a session's list collection, mutated in place."""

    def __init__(self, lists: list[TodoList]) -> None:
        self._lists = lists

    def list_all(self) -> list[TodoList]:
        return list(self._lists)

    def create_list(self, name: str) -> TodoList:
        todo_list = TodoList(id=next_id(self._lists), name=name)
        self._lists.append(todo_list)
        return todo_list

    def find_list(self, list_id: int) -> TodoList | None:
        return next((todo_list for todo_list in self._lists if todo_list.id == list_id), None)

    def rename_list(self, list_id: int, new_name: str) -> TodoList:
        todo_list = self._require_list(list_id)
        todo_list.name = new_name
        return todo_list

    def delete_list(self, list_id: int) -> bool:
        for index, todo_list in enumerate(self._lists):
            if todo_list.id == list_id:
                del self._lists[index]
                return True
        return False

    def add_todo(self, list_id: int, text: str) -> Todo:
        todo_list = self._require_list(list_id)
        todo = Todo(id=next_id(todo_list.todos), name=text)
        todo_list.todos.append(todo)
        return todo

    def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> Todo:
        todo_list = self._require_list(list_id)
        todo = todo_list.find_todo(todo_id)
        if todo is None:
            raise TodoNotFoundError(list_id, todo_id)
        todo.completed = completed
        return todo

    def complete_all_todos(self, list_id: int) -> TodoList:
        todo_list = self._require_list(list_id)
        for todo in todo_list.todos:
            todo.completed = True
        return todo_list

    def delete_todo(self, list_id: int, todo_id: int) -> bool:
        todo_list = self._require_list(list_id)
        for index, todo in enumerate(todo_list.todos):
            if todo.id == todo_id:
                del todo_list.todos[index]
                return True
        return False

    def _require_list(self, list_id: int) -> TodoList:
        todo_list = self.find_list(list_id)
        if todo_list is None:
            raise ListNotFoundError(list_id)
        return todo_list
