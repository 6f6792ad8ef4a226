from __future__ import annotations

import logging

from todolists.domain.lists.entities import TodoList
from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class CompleteAllTodosCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, list_id: int) -> TodoList:
        todo_list = self._repository.complete_all_todos(list_id)
        logger.info("todo.completed_all list_id=%s count=%s", list_id, len(todo_list.todos))
        return todo_list
