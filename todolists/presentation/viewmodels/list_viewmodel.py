from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel

from todolists.domain.lists.entities import Todo, TodoList
from todolists.domain.session import SessionState
from todolists.presentation.presenters.list_presenter import (
    is_list_complete,
    list_class,
    sort_lists,
    sort_todos,
    todos_count,
    undone_todos_count,
)


class FlashView(BaseModel):
    success: Optional[str] = None
    error: Optional[str] = None


class TodoView(BaseModel):
    id: int
    name: str
    completed: bool


class ListSummaryView(BaseModel):
    id: int
    name: str
    todos_count: int
    undone_todos_count: int
    css_class: Optional[str] = None


class ListDetailView(BaseModel):
    id: int
    name: str
    complete: bool
    css_class: Optional[str] = None
    todos: List[TodoView]


class ListsPage(BaseModel):
    view: Literal["lists"] = "lists"
    flash: FlashView
    lists: List[ListSummaryView]


class NewListPage(BaseModel):
    view: Literal["new_list"] = "new_list"
    flash: FlashView
    list_name: str = ""


class ListPage(BaseModel):
    view: Literal["list"] = "list"
    flash: FlashView
    list: ListDetailView
    todo: str = ""


class EditListPage(BaseModel):
    view: Literal["edit_list"] = "edit_list"
    flash: FlashView
    list: ListDetailView
    list_name: str = ""


def flash_to_viewmodel(state: SessionState) -> FlashView:
    """Consume the pending flash messages of the session."""
    success, error = state.pop_flash()
    return FlashView(success=success, error=error)


def todo_to_viewmodel(todo: Todo) -> TodoView:
    return TodoView(id=todo.id, name=todo.name, completed=todo.completed)


def list_to_summary(todo_list: TodoList) -> ListSummaryView:
    return ListSummaryView(
        id=todo_list.id,
        name=todo_list.name,
        todos_count=todos_count(todo_list),
        undone_todos_count=undone_todos_count(todo_list),
        css_class=list_class(todo_list),
    )


def list_to_detail(todo_list: TodoList) -> ListDetailView:
    return ListDetailView(
        id=todo_list.id,
        name=todo_list.name,
        complete=is_list_complete(todo_list),
        css_class=list_class(todo_list),
        todos=[todo_to_viewmodel(todo) for todo in sort_todos(todo_list.todos)],
    )


def lists_to_summaries(lists: List[TodoList]) -> List[ListSummaryView]:
    return [list_to_summary(todo_list) for todo_list in sort_lists(lists)]
