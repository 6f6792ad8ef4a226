from __future__ import annotations

import logging

from todolists.domain.repositories.list_repository import ListRepository

logger = logging.getLogger(__name__)


class DeleteListCommand:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, list_id: int) -> bool:
        deleted = self._repository.delete_list(list_id)
        logger.info("list.deleted id=%s removed=%s", list_id, deleted)
        return deleted
