from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Todo:
    id: int
    name: str
    completed: bool = False


@dataclass
class TodoList:
    id: int
    name: str
    todos: list[Todo] = field(default_factory=list)

    def find_todo(self, todo_id: int) -> Todo | None:
        return next((todo for todo in self.todos if todo.id == todo_id), None)
