from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from todolists.composition_root import create_app, create_app_container
from todolists.domain.lists.entities import Todo, TodoList
from todolists.domain.session import SessionState
from todolists.infrastructure.data.repositories.in_memory_list_repository import (
    InMemoryListRepository,
)


@pytest.fixture()
def session_state() -> SessionState:
    return SessionState()


@pytest.fixture()
def list_repository(session_state: SessionState) -> InMemoryListRepository:
    return InMemoryListRepository(session_state.lists)


@pytest.fixture()
def make_list():
    def _make(list_id: int, name: str, *completed: bool) -> TodoList:
        todos = [Todo(id=index, name=f"todo {index}", completed=done) for index, done in enumerate(completed, 1)]
        return TodoList(id=list_id, name=name, todos=todos)

    return _make


@pytest.fixture()
def app():
    return create_app(create_app_container())


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
