from __future__ import annotations

import logging
import uuid

from fastapi import Depends, Request

from todolists.domain.lists.identifiers import parse_id
from todolists.domain.repositories.session_store import SessionStore
from todolists.domain.session import SessionState
from todolists.infrastructure.data.repositories.in_memory_list_repository import (
    InMemoryListRepository,
)

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "sid"
XHR_HEADER_VALUE = "XMLHttpRequest"


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.container.session_store


def get_session_id(request: Request) -> str:
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_ID_KEY] = session_id
        logger.info("session.started sid=%s", session_id)
    return session_id


def get_session_state(
    session_id: str = Depends(get_session_id),
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    return store.get(session_id)


def get_list_repository(
    state: SessionState = Depends(get_session_state),
) -> InMemoryListRepository:
    return InMemoryListRepository(state.lists)


def is_scripted_request(request: Request) -> bool:
    """True for requests sent by page scripts rather than a form submission."""
    return request.headers.get("X-Requested-With") == XHR_HEADER_VALUE


def path_list_id(list_id: str) -> int:
    return parse_id(list_id)


def path_todo_id(todo_id: str) -> int:
    return parse_id(todo_id)
