from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateListRequest:
    name: str


@dataclass(frozen=True)
class RenameListRequest:
    list_id: int
    name: str


@dataclass(frozen=True)
class AddTodoRequest:
    list_id: int
    text: str


@dataclass(frozen=True)
class UpdateTodoRequest:
    list_id: int
    todo_id: int
    completed: bool
