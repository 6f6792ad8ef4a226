from __future__ import annotations

from todolists.domain.lists.entities import TodoList
from todolists.domain.repositories.list_repository import ListRepository


class GetListQuery:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self, list_id: int) -> TodoList | None:
        return self._repository.find_list(list_id)
