from __future__ import annotations

from todolists.domain.lists.entities import TodoList
from todolists.domain.repositories.list_repository import ListRepository


class ListListsQuery:
    def __init__(self, repository: ListRepository) -> None:
        self._repository = repository

    def execute(self) -> list[TodoList]:
        return self._repository.list_all()
