from __future__ import annotations

import logging

from todolists.application.contracts.list_dtos import CreateListRequest
from todolists.domain.lists.entities import TodoList
from todolists.domain.lists.validation import check_list_name
from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class CreateListCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, request: CreateListRequest) -> TodoList:
        name = (request.name or "").strip()
        check_list_name(name, self._repository.list_all())
        todo_list = self._repository.create_list(name)
        logger.info("list.created id=%s", todo_list.id)
        return todo_list
