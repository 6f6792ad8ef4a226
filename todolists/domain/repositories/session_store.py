from __future__ import annotations

from typing import Protocol, runtime_checkable

from todolists.domain.session import SessionState


@runtime_checkable
class SessionStore(Protocol):
    """Key-value store holding one SessionState per visitor."""

    def get(self, session_id: str) -> SessionState:
        ...
