"""Run the todo-cache NiceGUI app."""

import logging

from nicegui import app, ui

from todocache.config import load_settings
from todocache.env import load_env
from todocache.logging_setup import setup_logging
from todocache.presentation.ui.pages.home import render_home

logger = logging.getLogger(__name__)


@ui.page("/")
def index() -> None:
    render_home(app.storage.user, load_settings())


def run() -> None:
    load_env()
    settings = load_settings()
    setup_logging(settings)
    logger.info("Starting todo-cache on %s:%s (api=%s)", settings.host, settings.port, settings.api_url)
    ui.run(
        title="Todo-Cache",
        host=settings.host,
        port=settings.port,
        language="de",
        storage_secret=settings.storage_secret,
        favicon="✅",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
