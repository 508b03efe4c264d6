from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskdesk.config import Settings
from taskdesk.infra.logging import APP_LOGGER_NAME, setup_logging


@pytest.fixture()
def app_logger():
    logger = logging.getLogger(APP_LOGGER_NAME)
    yield logger
    logger.setLevel(logging.NOTSET)


def test_setup_logging_sets_package_level(tmp_path: Path, app_logger: logging.Logger) -> None:
    log_dir = tmp_path / "logs"

    configured = setup_logging(Settings(log_level="debug", log_dir=str(log_dir)))

    assert configured is app_logger
    assert app_logger.level == logging.DEBUG
    assert logging.getLogger("taskdesk.services.task_store").getEffectiveLevel() == logging.DEBUG
    assert log_dir.is_dir()
