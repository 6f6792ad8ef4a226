from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from cachetools import TTLCache

from todolists.config import DEFAULT_SESSION_MAX_AGE
from todolists.domain.repositories.session_store import SessionStore
from todolists.domain.session import SessionState

logger = logging.getLogger(__name__)

DEFAULT_SESSION_MAXSIZE = 10_000


class InMemorySessionStore(SessionStore):
    """Process-local session store backed by a TTL cache.

    A state expires after `ttl` seconds without a request from its visitor,
    and the least recently used state is evicted once `maxsize` is reached.
    Only the get-or-create step is locked; the returned state is shared by
    reference and mutated by the request that holds it.
    """

    def __init__(
        self,
        maxsize: int = DEFAULT_SESSION_MAXSIZE,
        ttl: float = DEFAULT_SESSION_MAX_AGE,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lock = threading.Lock()
        self._states: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)

    def get(self, session_id: str) -> SessionState:
        with self._lock:
            state = self._states.get(session_id)
            if state is None:
                state = SessionState()
                logger.debug("session.created sid=%s", session_id)
            # Re-inserting restarts the expiry clock.
            self._states[session_id] = state
        return state

    def discard(self, session_id: str) -> bool:
        with self._lock:
            return self._states.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            self._states.expire()
            return len(self._states)
