from __future__ import annotations

import logging

from todolists.application.contracts.list_dtos import UpdateTodoRequest
from todolists.domain.lists.entities import Todo
from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class UpdateTodoCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, request: UpdateTodoRequest) -> Todo:
        todo = self._repository.set_todo_completed(
            request.list_id, request.todo_id, bool(request.completed)
        )
        logger.info(
            "todo.updated list_id=%s id=%s completed=%s",
            request.list_id,
            todo.id,
            todo.completed,
        )
        return todo
