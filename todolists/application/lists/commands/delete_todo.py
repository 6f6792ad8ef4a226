from __future__ import annotations

import logging

from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class DeleteTodoCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, list_id: int, todo_id: int) -> bool:
        deleted = self._repository.delete_todo(list_id, todo_id)
        logger.info("todo.deleted list_id=%s id=%s removed=%s", list_id, todo_id, deleted)
        return deleted
