from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from taskdesk.config import PROJECT_ROOT, Settings

APP_LOGGER_NAME = "taskdesk"


def setup_logging(settings: Settings) -> logging.Logger:
    """Route records to a rotating file and the console.

    Third-party loggers stay at WARNING; only the ``taskdesk`` package logs
    at the configured level.
    """
    log_dir = PROJECT_ROOT / settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskdesk.log"

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, delay=True)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(level=logging.WARNING, handlers=[file_handler, console_handler])

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(settings.log_level.upper())
    return app_logger
