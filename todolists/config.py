from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_SESSION_SECRET = "dev-session-secret"
_DEFAULT_PORT = 8000
DEFAULT_SESSION_MAX_AGE = 14 * 24 * 60 * 60
_MIN_PRODUCTION_SECRET_LENGTH = 32

_LOADED = False


def load_env() -> Path | None:
    """Load the first .env file found; real environment variables win."""
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    candidates = [
        base_dir.parent / ".env",
        base_dir / ".env",
    ]
    for path in candidates:
        if path.exists():
            load_dotenv(dotenv_path=path, override=False)
            return path
    return None


def _env_flag(name: str) -> bool:
    return os.getenv(name) == "1"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name) or default)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = _DEFAULT_PORT
    session_secret: str = DEFAULT_SESSION_SECRET
    session_max_age: int = DEFAULT_SESSION_MAX_AGE
    log_dir: Path = Path("./data/logs")

    @property
    def is_production(self) -> bool:
        return self.env in {"prod", "production"}


def load_settings() -> Settings:
    settings = Settings(
        env=(os.getenv("TL_ENV") or "development").strip().lower(),
        debug=_env_flag("TL_DEBUG"),
        host=(os.getenv("TL_HOST") or "0.0.0.0").strip(),
        port=_env_int("TL_PORT", _DEFAULT_PORT),
        session_secret=os.getenv("TL_SESSION_SECRET") or DEFAULT_SESSION_SECRET,
        session_max_age=_env_int("TL_SESSION_MAX_AGE", DEFAULT_SESSION_MAX_AGE),
        log_dir=Path(os.getenv("TL_LOG_DIR") or "./data/logs"),
    )
    if settings.is_production and (
        settings.session_secret == DEFAULT_SESSION_SECRET
        or len(settings.session_secret) < _MIN_PRODUCTION_SECRET_LENGTH
    ):
        raise RuntimeError(
            "TL_SESSION_SECRET must be set to at least "
            f"{_MIN_PRODUCTION_SECRET_LENGTH} characters in production"
        )
    return settings
