from __future__ import annotations

import logging

from todolists.application.contracts.list_dtos import RenameListRequest
from todolists.domain.errors import ListNotFoundError
from todolists.domain.lists.entities import TodoList
from todolists.domain.lists.validation import check_list_name
from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class RenameListCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, request: RenameListRequest) -> TodoList:
        if self._repository.find_list(request.list_id) is None:
            raise ListNotFoundError(request.list_id)
        name = (request.name or "").strip()
        # The list being renamed takes part in the uniqueness check.
        check_list_name(name, self._repository.list_all())
        todo_list = self._repository.rename_list(request.list_id, name)
        logger.info("list.renamed id=%s", todo_list.id)
        return todo_list
