from __future__ import annotations

from dataclasses import dataclass, field

from todolists.domain.lists.entities import TodoList


@dataclass
class SessionState:
    """Everything one visitor owns: their lists and the pending flash messages."""

    lists: list[TodoList] = field(default_factory=list)
    success: str | None = None
    error: str | None = None

    def flash_success(self, message: str) -> None:
        self.success = message

    def flash_error(self, message: str) -> None:
        self.error = message

    def pop_flash(self) -> tuple[str | None, str | None]:
        success, error = self.success, self.error
        self.success = None
        self.error = None
        return success, error
