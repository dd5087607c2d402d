import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from todocache.config import Settings


_LOG_FILE_NAME = "todocache.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_APP_LOGGER = "todocache"
# third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(settings: Settings) -> logging.Logger:
    log_level = logging.DEBUG if settings.debug else logging.INFO
    app_logger = logging.getLogger(_APP_LOGGER)
    app_logger.setLevel(log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(log_level if settings.debug else logging.WARNING)

    root_logger = logging.getLogger()
    if getattr(root_logger, "_todo_logging_configured", False):
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return app_logger

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        log_dir / _LOG_FILE_NAME,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_BACKUP_COUNT,
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    # NiceGUI and uvicorn stay at WARNING on the root, our package logs at log_level
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    root_logger.addHandler(stream_handler)
    root_logger.addHandler(file_handler)
    root_logger._todo_logging_configured = True
    return app_logger
