from __future__ import annotations

from dataclasses import dataclass

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from todolists import __version__
from todolists.config import Settings
from todolists.domain.repositories.session_store import SessionStore
from todolists.infrastructure.session.in_memory_session_store import InMemorySessionStore
from todolists.presentation.routes.lists import router as lists_router

SESSION_COOKIE_NAME = "todolists_session"


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    session_store: SessionStore


def create_app_container(settings: Settings | None = None) -> AppContainer:
    settings = settings or Settings()
    # Server-side state lives exactly as long as the session cookie.
    session_store = InMemorySessionStore(ttl=settings.session_max_age)
    return AppContainer(settings=settings, session_store=session_store)


def create_app(container: AppContainer | None = None) -> FastAPI:
    container = container or create_app_container()

    app = FastAPI(title="todolists", version=__version__)
    app.state.container = container
    app.add_middleware(
        SessionMiddleware,
        secret_key=container.settings.session_secret,
        session_cookie=SESSION_COOKIE_NAME,
        max_age=container.settings.session_max_age,
        https_only=container.settings.is_production,
    )
    app.include_router(lists_router)
    return app
