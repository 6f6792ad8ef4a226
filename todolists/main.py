"""Run the todolists web app."""

import logging

import uvicorn

from todolists.composition_root import create_app, create_app_container
from todolists.config import load_env, load_settings
from todolists.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    env_path = load_env()
    settings = load_settings()
    setup_logging(debug=settings.debug, log_dir=settings.log_dir)
    if env_path is not None:
        logger.debug("env.loaded path=%s", env_path)

    app = create_app(create_app_container(settings))
    logger.info("app.start env=%s host=%s port=%s", settings.env, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ in {"__main__", "__mp_main__"}:
    run()
