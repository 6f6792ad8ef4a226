from __future__ import annotations

import logging

from todolists.application.contracts.list_dtos import AddTodoRequest
from todolists.domain.errors import ListNotFoundError
from todolists.domain.lists.entities import Todo
from todolists.domain.lists.validation import check_todo_text
from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class AddTodoCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, request: AddTodoRequest) -> Todo:
        if self._repository.find_list(request.list_id) is None:
            raise ListNotFoundError(request.list_id)
        text = (request.text or "").strip()
        check_todo_text(text)
        todo = self._repository.add_todo(request.list_id, text)
        logger.info("todo.added list_id=%s id=%s", request.list_id, todo.id)
        return todo
