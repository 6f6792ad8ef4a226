from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from pydantic import BaseModel

from todolists.application.contracts.list_dtos import (
    AddTodoRequest,
    CreateListRequest,
    RenameListRequest,
    UpdateTodoRequest,
)
from todolists.application.lists.commands.add_todo import AddTodoCommand
from todolists.application.lists.commands.complete_all_todos import CompleteAllTodosCommand
from todolists.application.lists.commands.create_list import CreateListCommand
from todolists.application.lists.commands.delete_list import DeleteListCommand
from todolists.application.lists.commands.delete_todo import DeleteTodoCommand
from todolists.application.lists.commands.rename_list import RenameListCommand
from todolists.application.lists.commands.update_todo import UpdateTodoCommand
from todolists.application.lists.queries.get_list import GetListQuery
from todolists.application.lists.queries.list_lists import ListListsQuery
from todolists.domain.errors import LIST_NOT_FOUND_MESSAGE, NotFoundError, TodoListError
from todolists.domain.lists.entities import TodoList
from todolists.domain.session import SessionState
from todolists.infrastructure.data.repositories.in_memory_list_repository import (
    InMemoryListRepository,
)
from todolists.presentation.dependencies import (
    get_list_repository,
    get_session_state,
    is_scripted_request,
    path_list_id,
    path_todo_id,
)
from todolists.presentation.viewmodels.list_viewmodel import (
    EditListPage,
    ListPage,
    ListsPage,
    NewListPage,
    flash_to_viewmodel,
    list_to_detail,
    lists_to_summaries,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lists"])


def _redirect(url: str, *, after_post: bool = True) -> RedirectResponse:
    code = 303 if after_post else 302
    return RedirectResponse(url=url, status_code=code)


def _list_url(list_id: int) -> str:
    return f"/lists/{list_id}"


def _invalid(page: BaseModel) -> JSONResponse:
    return JSONResponse(page.model_dump(), status_code=422)


def _load_list(
    list_id: int, repository: InMemoryListRepository, state: SessionState
) -> TodoList | None:
    todo_list = GetListQuery(repository).execute(list_id)
    if todo_list is None:
        logger.warning("list.not_found id=%s", list_id)
        state.flash_error(LIST_NOT_FOUND_MESSAGE)
    return todo_list


@router.get("/")
def index() -> RedirectResponse:
    return _redirect("/lists", after_post=False)


@router.get("/lists", response_model=ListsPage)
def show_lists(
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> ListsPage:
    lists = ListListsQuery(repository).execute()
    return ListsPage(flash=flash_to_viewmodel(state), lists=lists_to_summaries(lists))


@router.get("/lists/new", response_model=NewListPage)
def new_list(state: SessionState = Depends(get_session_state)) -> NewListPage:
    return NewListPage(flash=flash_to_viewmodel(state))


@router.post("/lists")
def create_list(
    list_name: str = Form(""),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    try:
        CreateListCommand(repository).execute(CreateListRequest(name=list_name))
    except TodoListError as exc:
        state.flash_error(str(exc))
        return _invalid(NewListPage(flash=flash_to_viewmodel(state), list_name=list_name))
    state.flash_success("This list has been created.")
    return _redirect("/lists")


@router.get("/lists/{list_id}", response_model=ListPage)
def show_list(
    list_id: int = Depends(path_list_id),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
):
    todo_list = _load_list(list_id, repository, state)
    if todo_list is None:
        return _redirect("/lists", after_post=False)
    return ListPage(flash=flash_to_viewmodel(state), list=list_to_detail(todo_list))


@router.get("/lists/{list_id}/edit", response_model=EditListPage)
def edit_list(
    list_id: int = Depends(path_list_id),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
):
    todo_list = _load_list(list_id, repository, state)
    if todo_list is None:
        return _redirect("/lists", after_post=False)
    return EditListPage(
        flash=flash_to_viewmodel(state),
        list=list_to_detail(todo_list),
        list_name=todo_list.name,
    )


@router.post("/lists/{list_id}")
def update_list(
    list_id: int = Depends(path_list_id),
    list_name: str = Form(""),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    try:
        RenameListCommand(repository).execute(RenameListRequest(list_id=list_id, name=list_name))
    except NotFoundError as exc:
        state.flash_error(str(exc))
        return _redirect("/lists")
    except TodoListError as exc:
        state.flash_error(str(exc))
        todo_list = repository.find_list(list_id)
        return _invalid(
            EditListPage(
                flash=flash_to_viewmodel(state),
                list=list_to_detail(todo_list),
                list_name=list_name,
            )
        )
    state.flash_success("This list has been updated.")
    return _redirect(_list_url(list_id))


@router.post("/lists/{list_id}/destroy")
def destroy_list(
    request: Request,
    list_id: int = Depends(path_list_id),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    DeleteListCommand(repository).execute(list_id)
    state.flash_success("The list has been deleted.")
    if is_scripted_request(request):
        return PlainTextResponse("/lists")
    return _redirect("/lists")


@router.post("/lists/{list_id}/todos")
def add_todo(
    list_id: int = Depends(path_list_id),
    todo: str = Form(""),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    try:
        AddTodoCommand(repository).execute(AddTodoRequest(list_id=list_id, text=todo))
    except NotFoundError as exc:
        state.flash_error(str(exc))
        return _redirect("/lists")
    except TodoListError as exc:
        state.flash_error(str(exc))
        todo_list = repository.find_list(list_id)
        return _invalid(
            ListPage(flash=flash_to_viewmodel(state), list=list_to_detail(todo_list), todo=todo)
        )
    state.flash_success("The todo was added.")
    return _redirect(_list_url(list_id))


@router.post("/lists/{list_id}/complete_all")
def complete_all_todos(
    list_id: int = Depends(path_list_id),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    try:
        CompleteAllTodosCommand(repository).execute(list_id)
    except NotFoundError as exc:
        state.flash_error(str(exc))
        return _redirect("/lists")
    state.flash_success("All todo items have been updated.")
    return _redirect(_list_url(list_id))


@router.post("/lists/{list_id}/todos/{todo_id}")
def update_todo(
    list_id: int = Depends(path_list_id),
    todo_id: int = Depends(path_todo_id),
    completed: str = Form(""),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    if _load_list(list_id, repository, state) is None:
        return _redirect("/lists")
    request = UpdateTodoRequest(list_id=list_id, todo_id=todo_id, completed=completed == "true")
    try:
        UpdateTodoCommand(repository).execute(request)
    except NotFoundError as exc:
        logger.warning("todo.not_found list_id=%s id=%s", list_id, todo_id)
        state.flash_error(str(exc))
        return _redirect(_list_url(list_id))
    state.flash_success("The todo item has been updated.")
    return _redirect(_list_url(list_id))


@router.post("/lists/{list_id}/todos/{todo_id}/destroy")
def destroy_todo(
    request: Request,
    list_id: int = Depends(path_list_id),
    todo_id: int = Depends(path_todo_id),
    repository: InMemoryListRepository = Depends(get_list_repository),
    state: SessionState = Depends(get_session_state),
) -> Response:
    if _load_list(list_id, repository, state) is None:
        return _redirect("/lists")
    DeleteTodoCommand(repository).execute(list_id, todo_id)
    if is_scripted_request(request):
        return Response(status_code=204)
    state.flash_success("The todo item has been deleted.")
    return _redirect(_list_url(list_id))
